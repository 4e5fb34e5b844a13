#!/usr/bin/env python3
"""
Example: Notes, Intervals, Scales and Chords.

This walks through the core engine: naming pitches, measuring and
applying intervals, and building scales and chords (with inversions
and figured bass).

Usage:
    python examples/explore_notes.py
"""

from chuk_mcp_theory.constants import NotationPreference
from chuk_mcp_theory.core import (
    ChordQuality,
    IntervalName,
    Note,
    PitchOutOfRange,
    ScaleKind,
    chord_from_name,
    diatonic_chord,
    interval_between,
)


def show(label: str, notes: list[Note]) -> None:
    names = " ".join(n.name() for n in notes)
    indices = ", ".join(str(n.midi()) for n in notes)
    print(f"  {label:<22} {names:<24} [{indices}]")


def main() -> None:
    """Demonstrate the theory engine."""
    print("CHUK Theory Engine Demo")
    print("=" * 40)
    print()

    # Notes
    print("Notes:")
    for value in ["A4", "Db5", 63, ("F", "#", 2)]:
        note = Note(value)
        print(
            f"  {value!s:<16} -> {note.name():<4} index={note.midi():<3} "
            f"octave={note.octave():<2} {note.frequency():.3f} Hz"
        )
    sharp = Note(61, NotationPreference.SHARP)
    print(f"  61 (sharp)       -> {sharp.name()}")
    print()

    # Intervals
    print("Intervals from C4:")
    c4 = Note("C4")
    for name in [IntervalName.m3, IntervalName.P5, IntervalName.M9]:
        up = c4.interval(name)
        print(f"  {name.value:<4} up   -> {up.name()} ({name.semitones} semitones)")
    print(f"  M3   down -> {c4.interval(IntervalName.M3, -1).name()}")
    gap = interval_between(Note("E4"), Note("B4"))
    print(f"  E4 to B4 is a {gap.value if gap else '?'}")
    print()

    # Scales
    print("Scales:")
    show("C Major", c4.scale(ScaleKind.MAJOR))
    show("A Minor", Note("A3").scale(ScaleKind.MINOR))
    show("D Dorian", Note("D4").scale(ScaleKind.DORIAN))
    show("C Blues", c4.scale(ScaleKind.BLUES))
    print()

    # Diatonic chords
    print("Diatonic sevenths in C major:")
    for degree in range(1, 8):
        show(f"degree {degree}", diatonic_chord(c4, ScaleKind.MAJOR, degree, size=4))
    print()

    # Chords
    print("Chords:")
    show("C4 Dom7", c4.chord(ChordQuality.DOMINANT_7))
    show("C4 Dom7, 1st inv", c4.chord(ChordQuality.DOMINANT_7, inversion=1))
    show("Cmaj7/E", chord_from_name("Cmaj7/E"))
    show("F#sus4", chord_from_name("F#sus4"))
    show("Bbm7 (octave 2)", chord_from_name("Bbm7", octave=2))
    print()

    # Range errors
    print("Range checks:")
    top = Note("G9")
    print(f"  G9 octave_up() -> {top.octave_up()} (still {top.name()})")
    try:
        top.interval(IntervalName.m2)
    except PitchOutOfRange as e:
        print(f"  G9 + m2 -> {e}")


if __name__ == "__main__":
    main()
