"""Tests for the break/lunch aggregator."""

import random

import pytest

from core.breaks import collation_key, compute_remaining, duration_minutes, parse_hm
from fixtures.generate_breaks import generate_day
from models.breaks import BalanceRow, BreakEvent, EmployeeLimit
from services.breaks import employee_limits_from_rows, event_from_row


def finished(name, kind, start, end):
    return BreakEvent(employee_name=name, kind=kind, state="finished", start_time=start, end_time=end)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("09:00", 540),
        ("9:05", 545),
        ("00:00", 0),
        ("23:59", 1439),
        ("24:00", None),
        ("12:60", None),
        ("1:5", None),
        ("09:00:00", None),
        ("", None),
        (None, None),
        ("abc", None),
    ],
)
def test_parse_hm(value, expected):
    assert parse_hm(value) == expected


def test_duration_minutes():
    assert duration_minutes("09:00", "09:20") == 20
    assert duration_minutes("09:30", "09:10") == 0
    assert duration_minutes("", "09:10") == 0
    assert duration_minutes("09:00", "99:99") == 0


def test_single_finished_break():
    rows = compute_remaining(
        [EmployeeLimit("A", break_limit_minutes=30, lunch_limit_minutes=60)],
        [finished("A", "break", "09:00", "09:20")],
    )
    assert rows == [
        BalanceRow(
            name="A",
            break_used_minutes=20,
            break_limit_minutes=30,
            break_left_minutes=10,
            lunch_used_minutes=0,
            lunch_limit_minutes=60,
            lunch_left_minutes=60,
        )
    ]


def test_end_before_start_counts_zero():
    rows = compute_remaining(
        [EmployeeLimit("A", 30, 60)], [finished("A", "break", "09:30", "09:10")]
    )
    assert rows[0].break_used_minutes == 0
    assert rows[0].break_left_minutes == 30


def test_unknown_employee_is_ignored():
    rows = compute_remaining(
        [EmployeeLimit("A", 30, 60)],
        [finished("B", "break", "09:00", "09:30"), finished("A", "lunch", "12:00", "12:40")],
    )
    assert [r.name for r in rows] == ["A"]
    assert rows[0].break_used_minutes == 0
    assert rows[0].lunch_used_minutes == 40
    assert rows[0].lunch_left_minutes == 20


@pytest.mark.parametrize("state", ["planned", "started", "", "Завершен"])
def test_unfinished_events_never_count(state):
    event = BreakEvent("A", "break", state, "09:00", "10:00")
    rows = compute_remaining([EmployeeLimit("A", 30, 60)], [event])
    assert rows[0].break_used_minutes == 0


def test_unknown_kind_is_ignored():
    rows = compute_remaining([EmployeeLimit("A", 30, 60)], [finished("A", "smoke", "09:00", "09:10")])
    assert rows[0].break_used_minutes == 0
    assert rows[0].lunch_used_minutes == 0


def test_left_never_negative():
    rows = compute_remaining(
        [EmployeeLimit("A", 10, 0)],
        [finished("A", "break", "09:00", "09:30"), finished("A", "break", "10:00", "10:15"),
         finished("A", "lunch", "12:00", "12:30")],
    )
    assert rows[0].break_used_minutes == 45
    assert rows[0].break_left_minutes == 0
    assert rows[0].lunch_used_minutes == 30
    assert rows[0].lunch_left_minutes == 0


def test_empty_inputs():
    assert compute_remaining([], []) == []
    rows = compute_remaining([EmployeeLimit("A", 15, 30)], [])
    assert rows[0].break_left_minutes == 15


def test_rows_are_collated_by_name():
    names = ["Яковлев", "Йорданов", "алексеев", "Кузнецов", "Ёлкин", "Иоффе", "Борисов",
             "Жуков", "Егоров"]
    rows = compute_remaining([EmployeeLimit(n, 30, 60) for n in names], [])
    assert [r.name for r in rows] == [
        "алексеев", "Борисов", "Егоров", "Ёлкин", "Жуков", "Иоффе", "Йорданов", "Кузнецов",
        "Яковлев",
    ]


def test_short_i_sorts_after_i():
    rows = compute_remaining([EmployeeLimit("Йорданов", 30, 60), EmployeeLimit("Иоффе", 30, 60)], [])
    assert [r.name for r in rows] == ["Иоффе", "Йорданов"]
    assert collation_key("йод") > collation_key("иней")


def test_collation_key_ignores_case_and_accents_first():
    assert collation_key("émile") < collation_key("Fabrice")
    assert sorted(["b", "a", "B"], key=collation_key) == ["a", "B", "b"]


def test_order_independent_of_input_order():
    day = generate_day(seed=7)
    employees = employee_limits_from_rows(day["employees"])
    events = [event_from_row(r) for r in day["events"]]
    expected = compute_remaining(employees, events)

    rng = random.Random(1)
    for _ in range(5):
        shuffled_employees = employees[:]
        shuffled_events = events[:]
        rng.shuffle(shuffled_employees)
        rng.shuffle(shuffled_events)
        assert compute_remaining(shuffled_employees, shuffled_events) == expected


@pytest.mark.parametrize("seed", [1, 2, 3, 42])
def test_generated_day_totals(seed):
    day = generate_day(seed=seed)
    employees = employee_limits_from_rows(day["employees"])
    events = [event_from_row(r) for r in day["events"]]
    rows = {r.name: r for r in compute_remaining(employees, events)}

    assert set(rows) == {e.name for e in employees}
    for employee in employees:
        mine = [e for e in events if e.employee_name == employee.name and e.state == "finished"]
        breaks = sum(duration_minutes(e.start_time, e.end_time) for e in mine if e.kind == "break")
        lunches = sum(duration_minutes(e.start_time, e.end_time) for e in mine if e.kind == "lunch")
        row = rows[employee.name]
        assert row.break_used_minutes == breaks
        assert row.lunch_used_minutes == lunches
        assert row.break_left_minutes == max(0, employee.break_limit_minutes - breaks)
        assert row.lunch_left_minutes == max(0, employee.lunch_limit_minutes - lunches)
        assert row.break_used_minutes >= 0 and row.break_left_minutes >= 0
