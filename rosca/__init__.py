"""ROSCA service: rotating-savings group roster, period counter and payout rotation."""

__version__ = "1.0.0"
