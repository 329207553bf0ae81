"""fitwhoop: Whoop-style strain, recovery and sleep scores from daily wearable data."""

__version__ = "0.1.0"
