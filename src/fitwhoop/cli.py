"""CLI for the fitwhoop scoring engine."""

import json
import logging

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug details (dropped entries, absent inputs).")
def main(verbose: bool) -> None:
    """fitwhoop: strain, recovery and sleep scores from daily wearable data."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command("analyze")
@click.argument("bundle", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default=None, help="Write summary JSON to file.")
@click.option("--date", "day", default=None, help="Date to score (YYYY-MM-DD); default from the bundle.")
@click.option("--max-hr", default=190.0, envvar="FITWHOOP_MAX_HR", show_default=True,
              help="Personal max heart rate.")
@click.option("--debt-cap", default=2.0, envvar="FITWHOOP_DEBT_CAP", show_default=True,
              help="Upper bound on sleep debt in hours.")
@click.option("--sleep-need", default=7.5, envvar="FITWHOOP_SLEEP_NEED", show_default=True,
              help="Baseline nightly sleep need in hours.")
def analyze_cmd(
    bundle: str,
    output: str | None,
    day: str | None,
    max_hr: float,
    debt_cap: float,
    sleep_need: float,
) -> None:
    """Score one day from a JSON bundle of provider payloads."""
    from fitwhoop.analytics.pipeline import run_pipeline

    try:
        with open(bundle) as f:
            payloads = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise click.ClickException(f"Cannot read bundle {bundle}: {exc}")
    if not isinstance(payloads, dict):
        raise click.ClickException(f"Bundle {bundle} must be a JSON object")

    try:
        summary = run_pipeline(
            payloads,
            max_hr=max_hr,
            debt_cap_hours=debt_cap,
            baseline_need_hours=sleep_need,
            day_override=day,
        )
    except ValueError as exc:
        raise click.ClickException(str(exc))

    rec = summary.recovery
    click.echo(f"\n{'=' * 60}")
    click.echo(f"  Daily Summary: {summary.date}")
    click.echo(f"{'=' * 60}")
    click.echo(f"  Recovery:    {rec.score}/100 ({rec.zone})")
    click.echo(f"  HRV:         {rec.hrv:.1f} ms"
               f"{' (vs baseline)' if rec.baselines_used.get('hrv') else ''}")
    click.echo(f"  Resting HR:  {rec.resting_heart_rate:.0f} bpm"
               f"{' (vs baseline)' if rec.baselines_used.get('rhr') else ''}")
    click.echo(f"  SpO2:        {rec.spo2:.1f}%")
    click.echo(f"  Resp rate:   {rec.respiratory_rate:.1f} breaths/min")
    click.echo(f"  Skin temp:   {rec.skin_temp_deviation:+.1f} °C")
    click.echo(f"  Strain:      {summary.strain.score:.1f}/21 "
               f"(target {summary.target_strain.min:.0f}-{summary.target_strain.max:.0f}, "
               f"{summary.target_strain.label})")
    click.echo(f"  Calories:    {summary.strain.calories:.0f}")
    click.echo(f"  Sleep:       {summary.sleep.score:.0f}/100, "
               f"{summary.sleep.total_sleep_hours:.1f} h asleep, "
               f"{summary.sleep.restorative.percentage_of_sleep}% restorative")
    click.echo(f"  Consistency: {summary.sleep_consistency}/100")
    click.echo(f"  Sleep debt:  {summary.sleep_debt_hours:.1f} h")
    click.echo(f"  Sleep need:  {summary.sleep_need.formatted}")
    click.echo(f"{'=' * 60}")

    if output:
        with open(output, "w") as f:
            f.write(summary.to_json())
        click.echo(f"\nSummary written to {output}")


@main.command("sleep-need")
@click.argument("strain", type=float)
@click.option("--debt", default=0.0, help="Current sleep debt in hours.")
@click.option("--baseline", default=7.5, envvar="FITWHOOP_SLEEP_NEED", show_default=True,
              help="Baseline nightly sleep need in hours.")
def sleep_need_cmd(strain: float, debt: float, baseline: float) -> None:
    """Recommend tonight's sleep from today's STRAIN (0-21)."""
    from fitwhoop.analytics.sleep_need import estimate_sleep_need

    need = estimate_sleep_need(strain, debt, baseline_hours=baseline)
    click.echo(f"Sleep need: {need.formatted} "
               f"(baseline {need.baseline:.1f}h + strain {need.strain_load:.1f}h "
               f"+ debt {need.debt:.1f}h)")


@main.command("baseline")
@click.argument("values", nargs=-1, type=float)
def baseline_cmd(values: tuple[float, ...]) -> None:
    """Compute a personal baseline from historical VALUES."""
    from fitwhoop.analytics.baseline import estimate_baseline

    baseline = estimate_baseline(values)
    if baseline is None:
        click.echo("Insufficient data: need at least 2 positive values.")
        return
    click.echo(f"mean={baseline.mean:.1f} sd={baseline.std_dev:.1f} (n={baseline.sample_count})")


if __name__ == "__main__":
    main()
