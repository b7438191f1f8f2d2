import re

import pytest

from adventkit import runner
from adventkit.executor import Day
from adventkit.runner import (
    DayInfo,
    DayNotFoundError,
    create_days,
    find_day_by_name,
    main,
    render_table,
    run_day,
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


class FixedDay(Day):
    def __init__(self, answer1="a1", answer2="a2", ok1=True, ok2=False):
        self.answer1 = answer1
        self.answer2 = answer2
        self.ok1 = ok1
        self.ok2 = ok2

    def part1(self):
        return self.answer1

    def part2(self):
        return self.answer2

    def _self_check1(self):
        return self.ok1

    def _self_check2(self):
        return self.ok2

    test_part1 = _self_check1
    test_part2 = _self_check2


def make_days(*names):
    return [DayInfo(day=FixedDay(answer1=f"{n}-1", answer2=f"{n}-2"), name=n) for n in names]


@pytest.mark.parametrize("query, expected", [("5", "05"), ("05", "05"), ("12", "12"), ("1", "01")])
def test_find_day_by_name_pads_single_digit(query, expected):
    days = make_days("01", "05", "12")
    assert find_day_by_name(days, query).name == expected


def test_find_day_by_name_missing_raises():
    with pytest.raises(DayNotFoundError):
        find_day_by_name(make_days("01"), "7")


def test_run_day_records_outcome():
    info = DayInfo(day=FixedDay(answer1="42", answer2="99", ok1=True, ok2=False), name="03")
    returned = run_day(info)
    assert returned is info
    assert info.has_run
    assert info.test_a_pass is True
    assert info.test_b_pass is False
    assert (info.code_a, info.code_b) == ("42", "99")
    assert info.execution_time_a >= 0.0 and info.execution_time_b >= 0.0


def test_render_table_lists_only_run_days():
    days = make_days("01", "02")
    run_day(days[0])
    text = _ANSI.sub("", render_table(days))
    assert "01-1" in text and "01-2" in text
    assert "02-1" not in text
    assert "Self-test" in text and "Part A" in text and "Part B" in text
    assert "Pass" in text and "Fail" in text


def test_render_table_lines_have_equal_width():
    days = make_days("01", "02")
    for info in days:
        run_day(info)
    lines = _ANSI.sub("", render_table(days)).splitlines()
    assert len({len(line) for line in lines}) == 1
    assert lines[0].startswith("╔") and lines[-1].startswith("╚")


def test_render_table_times_have_six_decimals():
    days = make_days("04")
    run_day(days[0])
    text = _ANSI.sub("", render_table(days))
    assert len(re.findall(r"\d+\.\d{6}\b", text)) == 2


def test_render_table_colours_verdicts():
    days = make_days("04")
    run_day(days[0])
    text = render_table(days)
    assert "\x1b[32mPass" in text
    assert "\x1b[31mFail" in text


def test_render_table_without_runs_has_only_headers():
    lines = render_table(make_days("01")).splitlines()
    assert len(lines) == 5
    assert "01" not in "".join(lines)


def test_create_days_uses_registry_order(monkeypatch):
    monkeypatch.setattr(runner, "DAY_FACTORIES", {"02": FixedDay, "01": FixedDay})
    names = [info.name for info in create_days()]
    assert names == ["02", "01"]
    assert all(not info.has_run for info in create_days())


def test_main_runs_all_days(monkeypatch, capsys):
    monkeypatch.setattr(runner, "DAY_FACTORIES", {
        "01": lambda: FixedDay(answer1="one"),
        "02": lambda: FixedDay(answer1="two"),
    })
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "one" in out and "two" in out
    assert "Running Day" not in out


def test_main_runs_named_day(monkeypatch, capsys):
    monkeypatch.setattr(runner, "DAY_FACTORIES", {
        "01": lambda: FixedDay(answer1="one"),
        "03": lambda: FixedDay(answer1="three"),
    })
    assert main(["prog", "3"]) == 0
    out = capsys.readouterr().out
    assert "Running Day 3..." in out
    assert "three" in out
    assert "one" not in out


def test_main_unknown_day_fails(monkeypatch, capsys):
    monkeypatch.setattr(runner, "DAY_FACTORIES", {"01": FixedDay})
    assert main(["prog", "9"]) == 1
    assert "not found" in capsys.readouterr().err