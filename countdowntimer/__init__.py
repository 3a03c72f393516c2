"""Countdown Timer — a single-screen three-minute countdown."""

__version__ = "0.1.0"
