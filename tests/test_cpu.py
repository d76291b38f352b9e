import pytest

from aoc2022.cpu import Addx, CommandParseError, Interpreter, Noop, parse_commands


def test_parse_commands():
    assert parse_commands("noop\naddx 3\naddx -5\n") == [Noop(), Addx(3), Addx(-5)]


def test_parse_stops_at_unreadable_text():
    assert parse_commands("noop\nbogus\nnoop\n") == [Noop()]


def test_parse_requires_a_command():
    with pytest.raises(CommandParseError):
        parse_commands("")


def test_parse_requires_trailing_newline():
    with pytest.raises(CommandParseError):
        parse_commands("noop")


def test_parse_rejects_overflow():
    with pytest.raises(CommandParseError):
        parse_commands("addx 99999999999\n")


def test_command_str():
    assert str(Noop()) == "NOP"
    assert str(Addx(-5)) == "ADDX -5"


def test_x_starts_at_one():
    assert Interpreter().x() == 1


def test_empty_program_finishes_at_once():
    assert Interpreter().tick() is True


def test_addx_takes_two_cycles():
    interpreter = Interpreter([Addx(3), Noop()])
    assert interpreter.tick() is False
    assert interpreter.x() == 1
    assert interpreter.tick() is False
    assert interpreter.x() == 1 + 3


def test_last_command_is_cut_short():
    interpreter = Interpreter([Noop(), Addx(3), Addx(-5)])
    results = [interpreter.tick() for _ in range(5)]
    assert results == [False, False, False, False, True]
    assert interpreter.x() == 1 + 3


def test_push_command():
    interpreter = Interpreter()
    interpreter.push_command(Noop())
    assert interpreter.tick() is False
    assert interpreter.tick() is True