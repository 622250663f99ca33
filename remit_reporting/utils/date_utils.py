"""Timestamp utilities"""

import time
from typing import Callable

# Source of "now" for overdue checks and report stamps, in unix seconds
Clock = Callable[[], int]


def ledger_timestamp() -> int:
    """Current unix timestamp in whole seconds"""
    return int(time.time())
