"""Interval parsing and naming."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional, Sequence, Tuple, Union

from tonalcore.pitch import Direction, Pitch, coordinates, pitch_from_coordinates

SIZES: Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
TYPES = "PMMPPMM"

_INTERVAL_RE = re.compile(
    r"^([-+]?[0-9]+)(d{1,4}|m|M|P|A{1,4})|(AA|A|P|M|m|d|dd)([-+]?[0-9]+)$"
)


class IntervalType(Enum):
    """Whether an interval number takes major/minor or perfect qualities."""

    MAJORABLE = "majorable"
    PERFECTABLE = "perfectable"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Interval:
    """A parsed interval; the default instance is the empty interval."""

    empty: bool = True
    name: str = ""
    num: Optional[int] = None
    q: str = ""
    type: IntervalType = IntervalType.UNKNOWN
    step: Optional[int] = None
    alt: Optional[int] = None
    dir: Optional[Direction] = None
    simple: Optional[int] = None
    semitones: Optional[int] = None
    chroma: Optional[int] = None
    oct: Optional[int] = None
    coord: Tuple[int, ...] = ()


NO_INTERVAL = Interval()


def _type_of_step(step: int) -> IntervalType:
    return IntervalType.MAJORABLE if TYPES[step] == "M" else IntervalType.PERFECTABLE


def tokenize_interval(text: str) -> Tuple[str, str]:
    """Split an interval name into ``(number, quality)``; empty strings if invalid."""
    if not text:
        return "", ""
    match = _INTERVAL_RE.fullmatch(text)
    if match is None:
        return "", ""
    if match.group(1) is not None:
        return match.group(1), match.group(2)
    return match.group(4), match.group(3)


def q_to_alt(interval_type: IntervalType, quality: str) -> int:
    """Alteration denoted by a quality for the given interval type."""
    if (quality == "M" and interval_type is IntervalType.MAJORABLE) or (
        quality == "P" and interval_type is IntervalType.PERFECTABLE
    ):
        return 0
    if quality == "m" and interval_type is IntervalType.MAJORABLE:
        return -1
    if quality.strip("A") == "":
        return len(quality)
    if quality.strip("d") == "":
        if interval_type is IntervalType.PERFECTABLE:
            return -len(quality)
        return -(len(quality) + 1)
    return 0


def alt_to_q(interval_type: IntervalType, alt: int) -> str:
    """Quality string for an alteration of the given interval type."""
    if alt == 0:
        return "M" if interval_type is IntervalType.MAJORABLE else "P"
    if alt == -1 and interval_type is IntervalType.MAJORABLE:
        return "m"
    if alt > 0:
        return "A" * alt
    diminished = alt if interval_type is IntervalType.PERFECTABLE else alt + 1
    return "d" * abs(diminished)


def interval_pitch_name(pitch: Pitch) -> str:
    """Interval name of a pitch with direction, or "" when it has none."""
    if pitch.dir is None:
        return ""
    step = pitch.step
    octave = pitch.oct if pitch.oct is not None else 0
    calc_num = step + 1 + 7 * octave
    num = step + 1 if calc_num == 0 else calc_num
    prefix = "-" if pitch.dir is Direction.DESCENDING else ""
    return f"{prefix}{num}{alt_to_q(_type_of_step(step), pitch.alt)}"


@lru_cache(maxsize=None)
def _parse(text: str) -> Interval:
    num_str, quality = tokenize_interval(text)
    if not num_str:
        return NO_INTERVAL
    num = int(num_str)
    if num == 0:
        return NO_INTERVAL
    step = (abs(num) - 1) % 7
    interval_type = _type_of_step(step)
    if interval_type is IntervalType.MAJORABLE and quality == "P":
        return NO_INTERVAL

    direction = Direction.DESCENDING if num < 0 else Direction.ASCENDING
    sign = int(direction)
    simple = num if num in (8, -8) else sign * (step + 1)
    alt = q_to_alt(interval_type, quality)
    octave = (abs(num) - 1) // 7
    semitones = sign * (SIZES[step] + alt + 12 * octave)
    chroma = (sign * (SIZES[step] + alt)) % 12
    fifths, octaves = coordinates(Pitch(step, alt, octave, direction))
    return Interval(
        empty=False,
        name=num_str + quality,
        num=num,
        q=quality,
        type=interval_type,
        step=step,
        alt=alt,
        dir=direction,
        simple=simple,
        semitones=semitones,
        chroma=chroma,
        oct=octave,
        coord=(fifths, octaves, sign),
    )


def interval(src: Union[str, Interval]) -> Interval:
    """Parse an interval name such as "3M" or "P5"; returns the empty interval if invalid."""
    if isinstance(src, Interval):
        return src
    if not src:
        return NO_INTERVAL
    return _parse(src)


def coord_to_interval(coord: Sequence[int], force_descending: bool = False) -> Interval:
    """Interval for ``(fifths[, octaves])`` coordinates."""
    if not coord:
        return NO_INTERVAL
    fifths = coord[0]
    octaves = coord[1] if len(coord) > 1 else 0
    if force_descending or fifths * 7 + octaves * 12 < 0:
        ivl = (-fifths, -octaves, -1)
    else:
        ivl = (fifths, octaves, 1)
    return interval(interval_pitch_name(pitch_from_coordinates(ivl)))