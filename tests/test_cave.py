import pytest

from aoc2022.cave import (
    Cave,
    CavePos,
    Element,
    IntoVoidError,
    NotInCaveError,
    OccupiedError,
    parse_rock_formations,
)


def test_parse_single_path_expands_and_dedups():
    rocks = parse_rock_formations("498,4 -> 498,6 -> 496,6\n")
    assert rocks == [
        CavePos(498, 4),
        CavePos(498, 5),
        CavePos(498, 6),
        CavePos(496, 6),
        CavePos(497, 6),
    ]


def test_parse_no_repeats_across_lines():
    rocks = parse_rock_formations("1,1 -> 3,1\n2,1 -> 2,3\n")
    assert len(rocks) == len(set(rocks))
    assert CavePos(2, 1) in rocks and CavePos(2, 3) in rocks


def test_parse_single_point_and_empty():
    assert parse_rock_formations("5,5\n") == []
    assert parse_rock_formations("") == []


@pytest.mark.parametrize("text", ["1,2", "1,2 -> x\n", "a,b\n", "99999999999,1 -> 1,1\n"])
def test_parse_errors(text):
    with pytest.raises(ValueError):
        parse_rock_formations(text)


def test_floor_settles_and_fills():
    cave = Cave.with_floor(3, 3)
    assert cave.has_floor()
    start = CavePos(1, 0)
    assert cave.drop_sand(start) == CavePos(1, 1)
    results = [cave.drop_sand(start) for _ in range(3)]
    assert results[-1] == start
    assert len(set(results)) == 3
    assert all(cave.at(p) is Element.SAND for p in results)
    with pytest.raises(OccupiedError) as info:
        cave.drop_sand(start)
    assert info.value.element is Element.SAND


def test_without_floor_falls_into_void():
    cave = Cave(2, 3)
    assert not cave.has_floor()
    with pytest.raises(IntoVoidError):
        cave.drop_sand(CavePos(1, 0))
    assert cave.at(CavePos(1, 0)) is Element.VOID
    assert cave.at(CavePos(1, 1)) is Element.VOID


def test_occupied_by_rock():
    cave = Cave(2, 2)
    cave.set(CavePos(0, 0), Element.ROCK)
    with pytest.raises(OccupiedError, match="Rock"):
        cave.drop_sand(CavePos(0, 0))


def test_not_in_cave():
    cave = Cave(2, 2)
    with pytest.raises(NotInCaveError) as info:
        cave.drop_sand(CavePos(0, 5))
    assert info.value.pos == CavePos(0, 5)


def test_set_out_of_bounds_is_ignored():
    cave = Cave(2, 3)
    cave.set(CavePos(5, 0), Element.ROCK)
    assert cave.at(CavePos(2, 1)) is Element.VOID
    assert cave.at(CavePos(0, 9)) is None
    assert cave.at(CavePos(-1, 0)) is None


def test_element_symbols_and_names():
    assert [e.symbol() for e in (Element.VOID, Element.SAND, Element.ROCK)] == [".", "o", "#"]
    assert str(Element.SAND) == "Sand"
    assert str(CavePos(3, 4)) == "(3,4)"


def test_display():
    cave = Cave(1, 3)
    cave.set(CavePos(0, 0), Element.ROCK)
    cave.set(CavePos(2, 0), Element.ROCK)
    assert str(cave) == "|#.|\n"


def test_display_floor_row_is_rock():
    cave = Cave.with_floor(2, 3)
    cave.set(CavePos(0, 0), Element.ROCK)
    cave.set(CavePos(2, 0), Element.ROCK)
    last = str(cave).splitlines()[-1]
    assert set(last.strip("|")) == {"#"}


def test_display_empty_raises():
    with pytest.raises(ValueError):
        str(Cave(2, 2))