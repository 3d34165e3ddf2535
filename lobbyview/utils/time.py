"""
time.py - time utilities
Single responsibility: common time helpers.
"""
from datetime import datetime


def now_clock() -> str:
    """Local wall-clock time for status lines, e.g. "14:03:27"."""
    return datetime.now().strftime("%H:%M:%S")
