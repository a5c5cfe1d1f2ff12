"""Transposition of notes and distances between them."""

from __future__ import annotations

from typing import Any, List, Sequence, Union

from tonalcore.pitch_interval import Interval, coord_to_interval, interval
from tonalcore.pitch_note import Note, coord_to_note, note


def _shift(n: Note, fifths: int, octaves: int) -> str:
    if len(n.coord) == 1:
        result = (n.coord[0] + fifths,)
    else:
        result = (n.coord[0] + fifths, n.coord[1] + octaves)
    return coord_to_note(result).name


def transpose(
    note_name: Union[str, Note],
    interval_or_coords: Union[str, Interval, Sequence[int]],
) -> str:
    """Transpose a note by an interval name/object or by ``(fifths, octaves)``.

    Returns "" when the note or the interval is invalid.
    """
    n = note(note_name)
    if isinstance(interval_or_coords, (str, Interval)):
        ivl = interval(interval_or_coords)
        if n.empty or not ivl.name:
            return ""
        return _shift(n, ivl.coord[0], ivl.coord[1])

    coords = list(interval_or_coords)
    if not coords:
        return ""
    fifths = coords[0]
    octaves = coords[1] if len(coords) > 1 else 0
    if n.empty:
        return ""
    return _shift(n, fifths, octaves)


def distance(from_note: Any, to_note: Any) -> str:
    """Interval name between two notes, or "" when either is invalid.

    Between pitch classes the interval is always ascending.
    """
    start = note(from_note)
    end = note(to_note)
    if start.empty or end.empty:
        return ""

    fifths = end.coord[0] - start.coord[0]
    if len(start.coord) == 2 and len(end.coord) == 2:
        octaves = end.coord[1] - start.coord[1]
    else:
        octaves = -((fifths * 7) // 12)

    force_descending = (
        end.height == start.height
        and end.midi is not None
        and start.oct == end.oct
        and start.step > end.step
    )
    return coord_to_interval((fifths, octaves), force_descending).name


def tonic_intervals_transposer(intervals: Sequence[str], tonic: str) -> List[str]:
    """Notes obtained by transposing ``tonic`` by each interval, in order."""
    if not tonic:
        return []
    root = transpose(tonic, (0, 0))
    return [transpose(root, ivl) for ivl in intervals]