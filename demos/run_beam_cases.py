# File: demos/run_beam_cases.py
"""
Runs the two textbook cases and prints them next to the hand calculation.

CASE A: simply supported, P = -10 at midspan, L = 10
    R = +5 at each end, V = ±5, M_max = PL/4 = 25

CASE B: fixed-fixed, UDL q = -2 over the whole span, L = 10
    R = +10 at each end, M_end = qL²/12 = -16.67, M_mid = -qL²/24 = 8.33
"""

import numpy as np

from mini_beam import (
    BeamInput,
    DistributedLoad,
    PointLoad,
    SupportKind,
    analyze_beam,
)
from mini_beam.post import diagram_summary, format_reactions


def value_at(result, x):
    i = int(np.argmin(np.abs(result.x - x)))
    return result.V[i], result.M[i]


def main():
    print("=" * 60)
    print("CASE A: Simply supported beam, central point load")
    print("=" * 60)

    beam_a = BeamInput(
        span=10.0,
        left_support=SupportKind.PINNED,
        right_support=SupportKind.ROLLER,
        point_loads=(PointLoad(-10.0, 5.0),),
    )
    result_a = analyze_beam(beam_a)
    for line in format_reactions(result_a.reactions):
        print(f"  {line}")
    V_mid, M_mid = value_at(result_a, 5.0)
    print(f"  M(5)  = {M_mid:.3f}   (expected 25.000)")
    print(f"  V(2)  = {value_at(result_a, 2.0)[0]:.3f}    (expected 5.000)")
    print(f"  V(8)  = {value_at(result_a, 8.0)[0]:.3f}   (expected -5.000)")

    print()
    print("=" * 60)
    print("CASE B: Fixed-fixed beam, full-span UDL")
    print("=" * 60)

    beam_b = BeamInput(
        span=10.0,
        left_support=SupportKind.FIXED,
        right_support=SupportKind.FIXED,
        distributed_loads=(DistributedLoad(0.0, 10.0, -2.0),),
    )
    result_b = analyze_beam(beam_b)
    for line in format_reactions(result_b.reactions):
        print(f"  {line}")
    print(f"  M(0)  = {result_b.M[0]:.3f}  (expected -16.667)")
    print(f"  M(5)  = {value_at(result_b, 5.0)[1]:.3f}    (expected 8.333)")
    print(f"  M(10) = {result_b.M[-1]:.3f}  (expected -16.667)")

    summary = diagram_summary(result_b)
    print(f"  Peak |M| = {abs(summary['max_moment']):.3f} at x = {summary['x_max_moment']:.2f} m")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
