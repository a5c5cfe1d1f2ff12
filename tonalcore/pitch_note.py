"""Note names: parsing, naming and conversion from pitch coordinates."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional, Sequence, Tuple

from tonalcore.pitch import Pitch, coordinates, pitch_from_coordinates

SEMI: Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
LETTERS = "CDEFGAB"

_NOTE_RE = re.compile(r"^([a-gA-G]?)(#+|b+|x+|)(-?\d*)\s*(.*)$")


@dataclass(frozen=True)
class Note:
    """A parsed note or pitch class; the default instance is the empty note."""

    empty: bool = True
    name: str = ""
    letter: str = ""
    acc: str = ""
    pc: str = ""
    step: Optional[int] = None
    alt: Optional[int] = None
    oct: Optional[int] = None
    chroma: Optional[int] = None
    height: Optional[int] = None
    coord: Tuple[int, ...] = ()
    midi: Optional[int] = None
    freq: Optional[float] = None


NO_NOTE = Note()


def tokenize_note(name: str) -> Tuple[str, str, str, str]:
    """Split a note name into ``(letter, accidentals, octave, rest)``.

    The letter is upper-cased and each ``x`` becomes ``##``.
    """
    match = _NOTE_RE.fullmatch(name)
    if match is None:
        return "", "", "", ""
    letter, acc, octave, rest = match.groups()
    return letter.upper(), acc.replace("x", "##"), octave, rest


def acc_to_alt(acc: str) -> int:
    """Alteration expressed by an accidental string ("bb" -> -2, "#" -> 1)."""
    if not acc:
        return 0
    return -len(acc) if acc[0] == "b" else len(acc)


def alt_to_acc(alt: int) -> str:
    """Accidental string for an alteration (-2 -> "bb", 1 -> "#")."""
    return "b" * -alt if alt < 0 else "#" * alt


def step_to_letter(step: int) -> str:
    """Letter of a natural step (0 -> "C"), or "" when out of range."""
    return LETTERS[step] if 0 <= step < len(LETTERS) else ""


@lru_cache(maxsize=None)
def _parse(name: str) -> Note:
    letter, acc, oct_str, rest = tokenize_note(name)
    if not letter or rest:
        return NO_NOTE
    try:
        octave = int(oct_str) if oct_str else None
    except ValueError:
        return NO_NOTE

    step = (ord(letter) - ord("A") + 5) % 7
    alt = acc_to_alt(acc)
    chroma = (SEMI[step] + alt) % 12
    if octave is None:
        height = (SEMI[step] + alt) % 12 - 12 * 99
        freq = None
    else:
        height = SEMI[step] + alt + 12 * (octave + 1)
        freq = 2.0 ** ((height - 69.0) / 12.0) * 440.0
    midi = height if 0 <= height <= 127 else None
    pc = letter + acc
    return Note(
        empty=False,
        name=pc + oct_str,
        letter=letter,
        acc=acc,
        pc=pc,
        step=step,
        alt=alt,
        oct=octave,
        chroma=chroma,
        height=height,
        coord=coordinates(Pitch(step, alt, octave)),
        midi=midi,
        freq=freq,
    )


def pitch_name(pitch: Pitch) -> str:
    """Note name of a pitch ("C#4", "Bb"), or "" when its step is invalid."""
    letter = step_to_letter(pitch.step)
    if not letter:
        return ""
    pc = letter + alt_to_acc(pitch.alt)
    return pc if pitch.oct is None else f"{pc}{pitch.oct}"


def note(src: Any) -> Note:
    """Parse a note from a name, a pitch or any object with a ``name``.

    Returns the empty note when the input is not a valid note.
    """
    if isinstance(src, str):
        return _parse(src)
    if isinstance(src, Pitch):
        return _parse(pitch_name(src))
    name = getattr(src, "name", None)
    if isinstance(name, str):
        return _parse(name)
    return NO_NOTE


def coord_to_note(coord: Sequence[int]) -> Note:
    """Note at ``(fifths[, octaves])`` coordinates."""
    return note(pitch_from_coordinates(coord))