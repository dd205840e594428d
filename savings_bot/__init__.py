"""Savings calculator and investment-bot projection backend."""

__version__ = "0.1.0"
