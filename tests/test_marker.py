import pytest

from aoc2022.marker import find_marker, main

STREAM = "mjqjpqmgbljsphdztnvjfqwrcgsmlb"


def test_packet_marker_example():
    assert find_marker(STREAM, 4) == 7


def test_message_marker_example():
    assert find_marker(STREAM) == 19


@pytest.mark.parametrize("window", [1, 2, 4, 14])
def test_marker_window_is_distinct_and_first(window):
    end = find_marker(STREAM, window)
    assert len(set(STREAM[end - window:end])) == window
    assert all(
        len(set(STREAM[start:start + window])) < window for start in range(end - window)
    )


def test_no_marker():
    with pytest.raises(ValueError, match="No marker found"):
        find_marker("aaaaaaaaaaaaaaaaaaaa", 4)


def test_text_shorter_than_window():
    with pytest.raises(ValueError):
        find_marker("abc", 4)


def test_invalid_window():
    with pytest.raises(ValueError):
        find_marker(STREAM, 0)


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(STREAM)
    main([str(path)])
    assert capsys.readouterr().out == f"Offset: {find_marker(STREAM)}\n"