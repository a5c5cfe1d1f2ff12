# tonalcore

Music theory primitives in pure Python: parse note names and interval
names, transpose notes and measure the distance between them. It has no
dependencies outside the standard library.

## Installation

```
pip install tonalcore
```

## Usage

### Notes

```python
from tonalcore.pitch_note import note

c4 = note("C4")
c4.name     # "C4"
c4.pc       # "C"
c4.midi     # 60
c4.freq     # 261.6255653005986
c4.coord    # (0, 4)

note("fx").name     # "F##"   ("x" is read as a double sharp)
note("blah").empty  # True
```

`note` accepts a name, a `Pitch`, or any object with a string `name`
attribute. A note without an octave (such as `"C"`) is a pitch class: its
`oct`, `midi` and `freq` are `None`. Helpers in the same module:
`tokenize_note`, `acc_to_alt`, `alt_to_acc`, `step_to_letter`,
`pitch_name` and `coord_to_note`.

### Intervals

```python
from tonalcore.pitch_interval import interval

p4 = interval("P4")
p4.name       # "4P"
p4.semitones  # 5
p4.coord      # (-1, 1, 1)
```

Both `"4P"` (number then quality) and `"P4"` (shorthand) are accepted.
The module also provides `tokenize_interval`, `q_to_alt`, `alt_to_q`,
`interval_pitch_name`, `coord_to_interval` and the `IntervalType` enum.

### Transposition and distance

```python
from tonalcore.pitch_distance import transpose, distance, tonic_intervals_transposer

transpose("C3", "3M")      # "E3"
transpose("D", "3M")       # "F#"
transpose("C3", [1, 0])    # "G3"  (one fifth up, given as [fifths, octaves])

distance("C3", "E4")       # "10M"
distance("C3", "C2")       # "-8P"
distance("C", "G")         # "5P"

tonic_intervals_transposer(["1P", "3M", "5P"], "D")  # ["D", "F#", "A"]
```

Distances between pitch classes are always ascending; if either note is a
pitch class, the distance is taken between pitch classes.

An invalid note or interval name gives an empty result (an empty string,
or an empty `Note` or `Interval` whose `empty` flag is set) rather than
raising.

### Pitch coordinates

```python
from tonalcore.pitch import Pitch, Direction, coordinates, pitch_from_coordinates, midi

coordinates(Pitch(step=5, alt=0, oct=4))   # (3, 3)
midi(Pitch(step=0, alt=0, oct=4))          # 60
pitch_from_coordinates((7,))               # Pitch(step=0, alt=1, ...)  C sharp
```

`tonalcore.pitch` also has `chroma`, `height`, `is_pitch` and
`is_named_pitch`.

## What it does not do

tonalcore covers pitches, notes, intervals, transposition and distance
only. It has no chord or scale dictionaries, no chord or scale detection,
no MIDI or frequency conversion utilities beyond the `midi` and `freq`
fields of a parsed note, and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```