"""Music theory primitives: pitches, notes, intervals, transposition and distance."""

__version__ = "0.1.0"
__all__ = ["pitch", "pitch_interval", "pitch_note", "pitch_distance"]