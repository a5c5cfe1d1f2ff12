"""Pitch primitives: steps, alterations, octaves and fifths/octaves coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Sequence, Tuple

# Semitones from C for each natural step (C D E F G A B).
SIZES: Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
# Position in the circle of fifths for each natural step.
FIFTHS: Tuple[int, ...] = (0, 2, 4, -1, 1, 3, 5)
# Steps indexed by position in the circle of fifths (F C G D A E B).
FIFTHS_TO_STEPS: Tuple[int, ...] = (3, 0, 4, 1, 5, 2, 6)
# Octaves spanned by each step when walking the circle of fifths.
STEPS_TO_OCTS: Tuple[int, ...] = tuple((f * 7) // 12 for f in FIFTHS)

PitchCoordinates = Tuple[int, ...]


class Direction(IntEnum):
    """Direction of an interval."""

    ASCENDING = 1
    DESCENDING = -1


@dataclass(frozen=True)
class Pitch:
    """A pitch class, a note (with octave) or an interval (with direction)."""

    step: int
    alt: int
    oct: Optional[int] = None
    dir: Optional[Direction] = None
    name: str = ""


def is_named_pitch(src: Any) -> bool:
    """Return True if ``src`` carries a string ``name``."""
    if src is None:
        return False
    if isinstance(src, dict):
        return isinstance(src.get("name"), str)
    return isinstance(getattr(src, "name", None), str)


def is_pitch(src: Any) -> bool:
    """Return True if ``src`` looks like a valid pitch."""
    if src is None:
        return False
    step = getattr(src, "step", None)
    alt = getattr(src, "alt", None)
    if not isinstance(step, int) or not isinstance(alt, int):
        return False
    if not (0 <= step <= 6 and -10 <= alt <= 10):
        return False
    octave = getattr(src, "oct", None)
    if octave is not None and not (isinstance(octave, int) and -10 <= octave <= 10):
        return False
    direction = getattr(src, "dir", None)
    if direction is not None and not isinstance(direction, Direction):
        return False
    return True


def chroma(pitch: Pitch) -> int:
    """Pitch class number (0-11) of the pitch."""
    return (SIZES[pitch.step] + pitch.alt) % 12


def height(pitch: Pitch) -> int:
    """Signed height in semitones; pitch classes sit far below any note."""
    octave = pitch.oct if pitch.oct is not None else -100
    direction = int(pitch.dir) if pitch.dir is not None else 1
    return direction * (SIZES[pitch.step] + pitch.alt + 12 * octave)


def midi(pitch: Pitch) -> Optional[int]:
    """MIDI number of a note, or None for pitch classes and out-of-range notes."""
    h = height(pitch)
    if pitch.oct is not None and -12 <= h <= 115:
        return h + 12
    return None


def coordinates(pitch: Pitch) -> PitchCoordinates:
    """Fifths (and octaves, when the pitch has an octave) coordinates."""
    direction = int(pitch.dir) if pitch.dir is not None else 1
    fifths = FIFTHS[pitch.step] + 7 * pitch.alt
    if pitch.oct is None:
        return (direction * fifths,)
    octaves = pitch.oct - STEPS_TO_OCTS[pitch.step] - 4 * pitch.alt
    return (direction * fifths, direction * octaves)


def _unaltered(fifths: int) -> int:
    return (fifths + 1) % 7


def pitch_from_coordinates(coord: Sequence[int]) -> Pitch:
    """Build a pitch from ``(fifths[, octaves[, direction]])`` coordinates."""
    if not coord:
        return Pitch(0, 0)
    fifths = coord[0]
    octaves = coord[1] if len(coord) > 1 else None
    direction: Optional[Direction] = None
    if len(coord) > 2:
        direction = Direction.DESCENDING if coord[2] < 0 else Direction.ASCENDING
    step = FIFTHS_TO_STEPS[_unaltered(fifths)]
    alt = (fifths + 1) // 7
    if octaves is None:
        return Pitch(step, alt, None, direction)
    octave = octaves + 4 * alt + STEPS_TO_OCTS[step]
    return Pitch(step, alt, octave, direction)