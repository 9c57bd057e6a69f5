"""
Pitch primitives - PitchClass and Interval.

PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the distance between pitches in semitones.
"""

from __future__ import annotations

from enum import IntEnum

# Display names (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Spelling is a display concern, handled by spell().
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def spell(self) -> str:
        """Get the note name, e.g. 'C' or 'F#'."""
        return _SHARP_NAMES[self.value]


class Interval:
    """
    Distance between pitches in semitones.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"


WHOLE_STEP = Interval(2)
HALF_STEP = Interval(1)
