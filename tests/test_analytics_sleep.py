"""Tests for fitwhoop.analytics.sleep -- main-session sleep scoring."""

import dataclasses

from fitwhoop.analytics.sleep import (
    score_sleep,
    select_main_sleep,
    SleepResult,
    StageHours,
    Restorative,
)
from tests.conftest import make_classic_session, make_session


class TestSelectMainSleep:
    def test_empty(self):
        assert select_main_sleep([]) is None
        assert select_main_sleep(None) is None

    def test_prefers_main_sleep(self):
        nap = make_session(is_main_sleep=False, minutes_asleep=40)
        main = make_session(minutes_asleep=420)
        assert select_main_sleep([nap, main]) is main

    def test_falls_back_to_first(self):
        first = make_session(is_main_sleep=False, minutes_asleep=40)
        second = make_session(is_main_sleep=False, minutes_asleep=60)
        assert select_main_sleep([first, second]) is first


class TestScoreSleep:
    def test_empty_history(self):
        result = score_sleep([])
        assert result == SleepResult()
        assert result.score == 0.0
        assert result.stage_hours == StageHours()
        assert result.restorative == Restorative()

    def test_none_history(self):
        assert score_sleep(None) == SleepResult()

    def test_stage_model(self):
        # deep 90, light 240, rem 90, wake 60; 420 asleep / 480 in bed
        result = score_sleep([make_session()])
        assert result.score == 88.0
        assert result.total_sleep_hours == 7.0
        assert result.time_in_bed_hours == 8.0
        assert result.stage_hours == StageHours(deep=1.5, light=4.0, rem=1.5, awake=1.0)
        assert result.restorative.hours == 3.0
        assert result.restorative.percentage_of_sleep == 43  # 180 / 420

    def test_classic_model(self):
        # asleep 300 → light; restless 20 + awake 10 → awake
        result = score_sleep([make_classic_session(asleep=300, restless=20, awake=10)])
        assert result.stage_hours.light == 5.0
        assert result.stage_hours.awake == 0.5
        assert result.stage_hours.deep == 0.0
        assert result.stage_hours.rem == 0.0
        assert result.total_sleep_hours == 5.0

    def test_classic_model_has_no_restorative_sleep(self):
        result = score_sleep([make_classic_session()])
        assert result.restorative.hours == 0.0
        assert result.restorative.percentage_of_sleep == 0

    def test_no_stage_breakdown(self):
        session = dataclasses.replace(make_session(), stages=None)
        result = score_sleep([session])
        assert result.stage_hours == StageHours()
        assert result.total_sleep_hours == 7.0

    def test_zero_minutes_asleep(self):
        result = score_sleep([make_session(minutes_asleep=0)])
        assert result.restorative.percentage_of_sleep == 0
        assert result.total_sleep_hours == 0.0

    def test_uses_main_session_not_nap(self):
        nap = make_session(is_main_sleep=False, minutes_asleep=30, efficiency=95)
        main = make_session(minutes_asleep=420, efficiency=88)
        result = score_sleep([nap, main])
        assert result.score == 88.0
        assert result.total_sleep_hours == 7.0

    def test_efficiency_clamped(self):
        assert score_sleep([make_session(efficiency=104)]).score == 100.0

    def test_times_pass_through(self):
        result = score_sleep([make_session()])
        assert result.start_time == "2026-02-12T23:00:00.000"
        assert result.end_time == "2026-02-13T07:00:00.000"

    def test_idempotent(self):
        history = [make_session(), make_classic_session()]
        assert score_sleep(history) == score_sleep(history)

    def test_result_repr(self):
        s = repr(score_sleep([make_session()]))
        assert "88" in s
        assert "7.0h" in s
