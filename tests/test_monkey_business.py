import pytest

from aoc2022.monkey_business import business_level, main, play_round
from aoc2022.monkeys import InspectOp, Monkey, MonkeyNotFoundError, parse_monkeys

EXAMPLE = """Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def _total_items(monkeys):
    return sum(len(m.items) for m in monkeys)


def test_example_twenty_rounds():
    monkeys = parse_monkeys(EXAMPLE)
    for _ in range(20):
        play_round(monkeys, False)
    assert business_level(monkeys) == 10605


def test_example_panic_rounds():
    monkeys = parse_monkeys(EXAMPLE)
    for _ in range(10_000):
        play_round(monkeys, True)
    assert business_level(monkeys) == 2713310158


def test_round_keeps_every_item():
    monkeys = parse_monkeys(EXAMPLE)
    before = _total_items(monkeys)
    play_round(monkeys, False)
    assert _total_items(monkeys) == before
    assert sum(m.inspect_count() for m in monkeys) >= before


def test_business_level_uses_top_two():
    monkeys = parse_monkeys(EXAMPLE)
    play_round(monkeys, False)
    counts = sorted(m.inspect_count() for m in monkeys)
    assert business_level(monkeys) == counts[-1] * counts[-2]


def test_business_level_needs_two_monkeys():
    with pytest.raises(ValueError):
        business_level([Monkey(0, [], InspectOp.ADD, 1, 2, 0, 0)])


def test_round_propagates_missing_monkey():
    monkeys = [Monkey(0, [1], InspectOp.ADD, 1, 2, 5, 5)]
    with pytest.raises(MonkeyNotFoundError):
        play_round(monkeys)


def test_main_reports_levels(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Monkey business level after 20 rounds (non-panic): 10605" in out
    assert "Monkey 0 inspected items" in out