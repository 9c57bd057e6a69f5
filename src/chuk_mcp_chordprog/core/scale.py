"""
Scale primitives - ScaleType, Key and the C major degree table.

Scales are interval patterns from a root. Keys are scale types applied to a root pitch.
Scale degrees are 1-based positions (1-7) within a key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .pitch import HALF_STEP, WHOLE_STEP, Interval, PitchClass


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its interval pattern.

    The intervals are from one degree to the next (not cumulative).
    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones)
    """

    intervals: tuple[Interval, ...]
    name: str = ""

    MAJOR: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        # Intervals must close the octave
        total = sum(i.semitones for i in self.intervals)
        if total != 12:
            raise ValueError(f"Scale intervals must sum to 12 semitones, got {total}")

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """
        Get all pitch classes in this scale starting from root.

        Returns 7 pitches (the octave is not included).
        """
        pitches = [root]
        current = root
        for interval in self.intervals[:-1]:
            current = current.transpose(interval.semitones)
            pitches.append(current)
        return pitches


ScaleType.MAJOR = ScaleType(
    (WHOLE_STEP, WHOLE_STEP, HALF_STEP, WHOLE_STEP, WHOLE_STEP, WHOLE_STEP, HALF_STEP),
    "major",
)


@dataclass(frozen=True)
class Key:
    """
    A key is a root pitch class plus a scale type.

    Example:
        Key(PitchClass.C, ScaleType.MAJOR) = C major
    """

    root: PitchClass
    scale: ScaleType

    def get_pitches(self) -> list[PitchClass]:
        """Get all pitch classes in this key."""
        return self.scale.get_pitches(self.root)

    def pitch_to_degree(self, pitch: PitchClass) -> int | None:
        """
        Get the scale degree for a pitch class, if it's in the key.

        Returns None if the pitch is not diatonic to the key.
        """
        for degree, candidate in enumerate(self.get_pitches(), start=1):
            if candidate == pitch:
                return degree
        return None

    def degree_table(self) -> dict[str, int]:
        """
        Map each spelled diatonic note name of the key to its degree.

        Chromatic pitch classes are left out.
        """
        table: dict[str, int] = {}
        for pitch in PitchClass:
            degree = self.pitch_to_degree(pitch)
            if degree is not None:
                table[pitch.spell()] = degree
        return table

    def __str__(self) -> str:
        return f"{self.root.spell()} {self.scale.name}"


C_MAJOR = Key(PitchClass.C, ScaleType.MAJOR)

# Note letter -> degree. C=1, D=2, E=3, F=4, G=5, A=6, B=7
SCALE_TABLE: dict[str, int] = C_MAJOR.degree_table()


def note_to_degree(note: str) -> int | None:
    """
    Look up the C major scale degree of a note name.

    The match is exact: no trimming and no case-folding, so 'c', ' C' and
    'C#' all have no degree.

    Returns:
        Degree 1-7, or None for anything that is not a bare note letter
    """
    return SCALE_TABLE.get(note)
