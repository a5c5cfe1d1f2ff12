import pytest

from tonalcore.pitch import (
    Direction,
    Pitch,
    chroma,
    coordinates,
    height,
    is_named_pitch,
    is_pitch,
    midi,
    pitch_from_coordinates,
)

C = Pitch(0, 0)
Cs = Pitch(0, 1)
Cb = Pitch(0, -1)
A = Pitch(5, 0)

C4 = Pitch(0, 0, 4)
A4 = Pitch(5, 0, 4)
Gs6 = Pitch(4, 1, 6)

P5 = Pitch(4, 0, 0, Direction.ASCENDING)
P_5 = Pitch(4, 0, 0, Direction.DESCENDING)


class _Named:
    def __init__(self, name):
        self.name = name


def test_is_named_pitch():
    assert is_named_pitch(_Named("C")) is True
    assert is_named_pitch({"name": "C"}) is True
    assert is_named_pitch(None) is False
    assert is_named_pitch(42) is False


def test_height():
    assert [height(p) for p in (C, Cs, Cb, A)] == [-1200, -1199, -1201, -1191]
    assert [height(n) for n in (C4, A4, Gs6)] == [48, 57, 80]
    assert [height(i) for i in (P5, P_5)] == [7, -7]


def test_midi():
    assert [midi(p) for p in (C, Cs, Cb, A)] == [None, None, None, None]
    assert [midi(n) for n in (C4, A4, Gs6)] == [60, 69, 92]


def test_chroma():
    assert [chroma(p) for p in (C, Cs, Cb, A)] == [0, 1, 11, 9]
    assert [chroma(n) for n in (C4, A4, Gs6)] == [0, 9, 8]
    assert [chroma(i) for i in (P5, P_5)] == [7, 7]


def test_coordinates():
    assert coordinates(C) == (0,)
    assert coordinates(A) == (3,)
    assert coordinates(Cs) == (7,)
    assert coordinates(Cb) == (-7,)
    assert coordinates(C4) == (0, 4)
    assert coordinates(A4) == (3, 3)
    assert coordinates(P5) == (1, 0)
    assert coordinates(P_5) == (-1, 0)


def test_pitch_from_coordinates():
    p = pitch_from_coordinates((0,))
    assert (p.step, p.alt, p.oct, p.dir) == (C.step, C.alt, None, None)
    p = pitch_from_coordinates((7,))
    assert (p.step, p.alt, p.oct, p.dir) == (Cs.step, Cs.alt, None, None)


@pytest.mark.parametrize("p", [C, Cs, Cb, A, C4, A4, Gs6])
def test_coordinates_round_trip(p):
    back = pitch_from_coordinates(coordinates(p))
    assert (back.step, back.alt, back.oct) == (p.step, p.alt, p.oct)


def test_pitch_from_coordinates_direction():
    p = pitch_from_coordinates((1, 0, -1))
    assert p.dir is Direction.DESCENDING
    assert (p.step, p.alt, p.oct) == (4, 0, 0)


@pytest.mark.parametrize(
    "p",
    [
        Pitch(0, 0),
        Pitch(2, -1),
        Pitch(4, 1, 4),
        Pitch(4, 0, 0, Direction.ASCENDING),
    ],
)
def test_is_pitch_valid(p):
    assert is_pitch(p) is True


@pytest.mark.parametrize(
    "p",
    [
        Pitch(-(2**31), 0),
        Pitch(0, -(2**31)),
        Pitch(-1, -100),
        None,
    ],
)
def test_is_pitch_invalid(p):
    assert is_pitch(p) is False