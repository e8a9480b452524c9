import dataclasses

import pytest

from linked_adts import Direction, OutOfRangeError, Position

L, R = Direction.LEFT, Direction.RIGHT


def test_root_position():
    pos = Position()
    assert pos.size() == 0
    assert len(pos) == 0
    assert str(pos) == "[]"
    with pytest.raises(OutOfRangeError):
        pos.get(0)


def test_get_directions():
    pos = Position([R, L])
    assert pos.size() == 2
    assert pos.get(0) is R
    assert pos.get(1) is L
    assert str(pos) == "[RIGHT, LEFT]"


@pytest.mark.parametrize("index", [-1, 2, 7])
def test_get_out_of_range(index):
    with pytest.raises(OutOfRangeError):
        Position([R, L]).get(index)


def test_position_is_immutable():
    directions = [L]
    pos = Position(directions)
    directions.append(R)
    assert pos.size() == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.directions = (R,)


def test_equality_and_hashing():
    assert Position([L, R]) == Position((L, R))
    assert Position([L, R]) != Position([R, L])
    assert len({Position([L]), Position([L]), Position()}) == 2


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ()),
        ("L", (L,)),
        ("RL", (R, L)),
        ("rlr", (R, L, R)),
        (" LL ", (L, L)),
    ],
)
def test_parse(text, expected):
    assert Position.parse(text).directions == expected


@pytest.mark.parametrize("text", ["X", "L R", "LEFT"])
def test_parse_rejects_unknown_directions(text):
    with pytest.raises(ValueError):
        Position.parse(text)


def test_rejects_non_directions():
    with pytest.raises(TypeError):
        Position(["L"])
