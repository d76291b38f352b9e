import pytest

from aoc2022.cave import CavePos, Element, parse_rock_formations
from aoc2022.sand import CaveBuilder, CaveSimulation, main

EXAMPLE = "498,4 -> 498,6 -> 496,6\n503,4 -> 502,4 -> 502,9 -> 494,9\n"


def test_example_without_floor():
    assert CaveSimulation(CaveBuilder(EXAMPLE)).run() == 24


def test_example_with_floor():
    assert CaveSimulation(CaveBuilder(EXAMPLE), with_floor=True).run() == 93


def test_step_and_reset():
    sim = CaveSimulation(CaveBuilder(EXAMPLE))
    assert sim.step() is True
    assert sim.total_sand == 1
    first = sim.run()
    assert sim.step() is False
    assert sim.total_sand == first
    sim.reset(False)
    assert sim.total_sand == 0
    assert sim.run() == first


def test_with_floor_stops_when_source_blocked():
    sim = CaveSimulation(CaveBuilder(EXAMPLE), with_floor=True)
    total = sim.run()
    assert sim.cave.at(sim.drop_location) is Element.SAND
    assert sim.step() is False
    assert sim.total_sand == total


def test_builders_place_rocks():
    builder = CaveBuilder(EXAMPLE)
    rocks = parse_rock_formations(EXAMPLE)
    plain = builder.without_floor()
    floored = builder.with_floor(2)
    assert not plain.has_floor()
    assert floored.has_floor()
    assert all(plain.at(r) is Element.ROCK for r in rocks)
    assert all(floored.at(r) is Element.ROCK for r in rocks)
    assert floored.height == plain.height + 2


def test_invalid_drop_location():
    sim = CaveSimulation(CaveBuilder(EXAMPLE), drop_location=CavePos(0, 100))
    with pytest.raises(ValueError, match="Drop location invalid"):
        sim.step()


def test_empty_scan_raises():
    with pytest.raises(ValueError):
        CaveBuilder("").without_floor()


def test_main_prints_both_counts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Fallen Sand (no floor): 24" in out
    assert "Fallen Sand (with floor): 93" in out