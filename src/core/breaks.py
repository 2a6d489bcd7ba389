"""
Break/lunch usage aggregation.

Folds the day's events into remaining-minutes balances per employee.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable

from models.breaks import BREAK, FINISHED, LUNCH, BalanceRow, BreakEvent, EmployeeLimit

_HM_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def parse_hm(value: str | None) -> int | None:
    """Parse 'HH:MM' into minutes since midnight, or None if invalid."""
    match = _HM_RE.match(str(value or "").strip())
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def duration_minutes(start: str | None, end: str | None) -> int:
    """Minutes between start and end; 0 when unparseable or end < start."""
    start_min = parse_hm(start)
    end_min = parse_hm(end)
    if start_min is None or end_min is None:
        return 0
    return max(0, end_min - start_min)


def _base_letter(ch: str) -> str:
    # Cyrillic letters are distinct (й after и) except ё, which sorts with е
    if ch == "ё":
        return "е"
    if "\u0400" <= ch <= "\u04ff":
        return ch
    decomposed = unicodedata.normalize("NFKD", ch)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def collation_key(name: str) -> tuple[str, str, str]:
    """
    Sort key approximating Russian locale collation.

    Primary: case folded, Latin accents stripped, 'ё' treated as 'е'.
    Ties broken by case-folded then raw text to keep the order total.
    """
    folded = name.casefold()
    base = "".join(_base_letter(ch) for ch in folded)
    return base, folded, name


@dataclass
class _Usage:
    break_limit: int
    lunch_limit: int
    break_used: int = 0
    lunch_used: int = 0


def _fold_events(usage: dict[str, _Usage], events: Iterable[BreakEvent]) -> None:
    for event in events:
        acc = usage.get(event.employee_name)
        if acc is None:
            continue
        if event.state != FINISHED:
            continue
        minutes = duration_minutes(event.start_time, event.end_time)
        if event.kind == BREAK:
            acc.break_used += minutes
        elif event.kind == LUNCH:
            acc.lunch_used += minutes


def compute_remaining(
    employees: Iterable[EmployeeLimit], events: Iterable[BreakEvent]
) -> list[BalanceRow]:
    """
    Compute remaining break and lunch minutes for every known employee.

    Only finished events count. Events for names missing from `employees`
    are ignored. Remaining minutes never go below zero.
    """
    usage: dict[str, _Usage] = {}
    for employee in employees:
        usage[employee.name] = _Usage(
            break_limit=employee.break_limit_minutes,
            lunch_limit=employee.lunch_limit_minutes,
        )

    _fold_events(usage, events)

    rows = [
        BalanceRow(
            name=name,
            break_used_minutes=acc.break_used,
            break_limit_minutes=acc.break_limit,
            break_left_minutes=max(0, acc.break_limit - acc.break_used),
            lunch_used_minutes=acc.lunch_used,
            lunch_limit_minutes=acc.lunch_limit,
            lunch_left_minutes=max(0, acc.lunch_limit - acc.lunch_used),
        )
        for name, acc in usage.items()
    ]
    rows.sort(key=lambda row: collation_key(row.name))
    return rows
