#!/usr/bin/env python3
"""
Example: Identify, tune and transpose pitches.

This walks through the pitch core end to end - from a raw frequency to a
named pitch, how far out of tune it is, and the intervals around it.

Usage:
    python examples/tune_and_transpose.py
"""

from chuk_mcp_pitch import Interval, NoteName, Pitch, between


def main() -> None:
    """Run the examples."""
    # Example 1: What note is this frequency?
    print("Identifying frequencies...")
    for hz in (261.63, 440.0, 445.0, 82.41, 1000.0):
        pitch = Pitch.from_frequency(hz)
        print(f"  {hz:>8.2f} Hz -> {pitch!s:<12} ({pitch.cents_deviation():+.1f} cents)")

    # Example 2: Tuning a string - how far to turn the peg
    print("\nTuning a guitar low E string at 80 Hz...")
    target = Pitch.parse("E2")
    heard = Pitch.from_frequency(80.0)
    correction = between(heard, target)
    print(f"  target {target} = {target.format_frequency()}")
    print(f"  heard  {heard}")
    print(f"  correction {correction.format_cents()}")

    # Example 3: Build a major scale from intervals
    print("\nA major scale from A3...")
    steps = [Interval.M2, Interval.M2, Interval.m2, Interval.M2, Interval.M2, Interval.M2]
    current = Pitch.from_note(NoteName.A, 3)
    scale = [current]
    for step in steps:
        current = current + step
        scale.append(current)
    print("  " + " ".join(str(p) for p in scale))

    # Example 4: Named intervals above middle C
    print("\nIntervals above middle C...")
    c4 = Pitch.from_note("C", 4)
    for interval in (Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH, Interval.OCTAVE):
        upper = c4 + interval
        print(f"  {interval!s:<3} {upper!s:<4} {upper.format_frequency()}")

    print("\nDone!")


if __name__ == "__main__":
    main()
