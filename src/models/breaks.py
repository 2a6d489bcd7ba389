"""
Data models for the break/lunch scheduler.

Frozen dataclasses: the aggregator reads them and never mutates its inputs.
"""

from dataclasses import dataclass

BREAK = "break"
LUNCH = "lunch"

PLANNED = "planned"
STARTED = "started"
FINISHED = "finished"


@dataclass(frozen=True)
class EmployeeLimit:
    """Daily break and lunch allowance for one employee."""
    name: str
    break_limit_minutes: int = 0
    lunch_limit_minutes: int = 0


@dataclass(frozen=True)
class BreakEvent:
    """One break or lunch entry from the day sheet."""
    employee_name: str
    kind: str  # "break" | "lunch"
    state: str  # "planned" | "started" | "finished"
    start_time: str = ""  # "HH:MM" or empty
    end_time: str = ""


@dataclass(frozen=True)
class BalanceRow:
    """Remaining minutes for one employee."""
    name: str
    break_used_minutes: int
    break_limit_minutes: int
    break_left_minutes: int
    lunch_used_minutes: int
    lunch_limit_minutes: int
    lunch_left_minutes: int
