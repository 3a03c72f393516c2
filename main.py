#!/usr/bin/env python3
"""Countdown Timer — entry point.

Run with:
    python main.py
    python -m countdowntimer
"""

from countdowntimer.__main__ import main


if __name__ == "__main__":
    main()
