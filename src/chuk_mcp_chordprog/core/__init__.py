"""
Core music primitives.

- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Distance between pitches in semitones
- ScaleType: Interval pattern defining a scale
- Key: Root + scale type, resolves pitches to degrees
- note_to_degree: C major note letter -> degree 1-7
"""

from chuk_mcp_chordprog.core.pitch import Interval, PitchClass
from chuk_mcp_chordprog.core.scale import C_MAJOR, SCALE_TABLE, Key, ScaleType, note_to_degree

__all__ = [
    # Pitch
    "PitchClass",
    "Interval",
    # Scale
    "ScaleType",
    "Key",
    "C_MAJOR",
    "SCALE_TABLE",
    "note_to_degree",
]
