"""Activity Advisor: report-driven activity recommendations for parents."""

__version__ = "0.1.0"
