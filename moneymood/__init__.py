"""MoneyMood: multi-currency expense valuation and life-state feedback."""

__version__ = "1.0.0"
