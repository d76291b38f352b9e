import pytest

from aoc2022.packets import (
    Packet,
    PacketParseError,
    compare,
    decoder_key,
    parse_packet,
    parse_pairs,
    right_order_sum,
)

SAMPLE = (
    "[1,1,3,1,1]\n[1,1,5,1,1]\n\n"
    "[[1],[2,3,4]]\n[[1],4]\n\n"
    "[9]\n[[8,7,6]]\n\n"
    "[[4,4],4,4]\n[[4,4],4,4,4]\n\n"
    "[7,7,7,7]\n[7,7,7]\n\n"
    "[]\n[3]\n\n"
    "[[[]]]\n[[]]\n\n"
    "[1,[2,[3,[4,[5,6,7]]]],8,9]\n[1,[2,[3,[4,[5,6,0]]]],8,9]\n"
)


@pytest.mark.parametrize(
    "left, right, ordered",
    [
        ("[1,1,3,1,1]", "[1,1,5,1,1]", True),
        ("[[1],[2,3,4]]", "[[1],4]", True),
        ("[9]", "[[8,7,6]]", False),
        ("[[4,4],4,4]", "[[4,4],4,4,4]", True),
        ("[7,7,7,7]", "[7,7,7]", False),
        ("[]", "[3]", True),
        ("[[[]]]", "[[]]", False),
    ],
)
def test_compare_orders_pairs(left, right, ordered):
    result = compare(parse_packet(left), parse_packet(right))
    assert (result < 0) is ordered
    assert (compare(parse_packet(right), parse_packet(left)) > 0) is ordered


def test_compare_mixed_int_and_list_equal():
    assert compare(3, (3,)) == 0


@pytest.mark.parametrize("text", ["[]", "[1,[2,[3]],4]", "[[[]]]", "[-5,10]"])
def test_parse_packet_round_trip(text):
    assert str(parse_packet(text)) == text


@pytest.mark.parametrize("text", ["[1,2", "[1,,2]", "1", "[1]x", "[99999999999]"])
def test_parse_packet_rejects(text):
    with pytest.raises(PacketParseError):
        parse_packet(text)


def test_parse_pairs_sample():
    pairs = parse_pairs(SAMPLE)
    assert len(pairs) == 8
    assert pairs[0][0] == Packet((1, 1, 3, 1, 1))


def test_parse_pairs_requires_trailing_newline():
    with pytest.raises(PacketParseError):
        parse_pairs(SAMPLE.rstrip("\n"))


def test_parse_pairs_empty():
    assert parse_pairs("\n") == []


def test_sample_results():
    pairs = parse_pairs(SAMPLE)
    assert right_order_sum(pairs) == 13
    assert decoder_key(pairs) == 140


def test_equal_pair_raises():
    pairs = parse_pairs("[1]\n[1]\n")
    with pytest.raises(ValueError):
        right_order_sum(pairs)


def test_packet_sorting_is_consistent_with_compare():
    packets = [p for pair in parse_pairs(SAMPLE) for p in pair]
    ordered = sorted(packets)
    assert all(compare(a, b) <= 0 for a, b in zip(ordered, ordered[1:]))