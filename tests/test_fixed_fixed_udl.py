# File: tests/test_fixed_fixed_udl.py
"""
TEST: FIXED-FIXED BEAM WITH A FULL-SPAN UNIFORM LOAD
====================================================

THEORETICAL SOLUTION:
--------------------
For a beam clamped at both ends carrying q (per unit length) over its span L:
- Vertical reactions: -qL/2 at each end
- End moments:        |qL²/12|, hogging (negative M in a sagging-positive diagram)
- Midspan moment:     |qL²/24|, sagging

With q = -2 and L = 10: reactions +10, end moments -16.67, midspan +8.33.

Every DOF of the single element is fixed, so the solve is the empty
system; the reactions are exactly the negated consistent nodal loads.
"""

import numpy as np

from mini_beam import BeamInput, DistributedLoad, SupportKind, analyze_beam


L = 10.0
q = -2.0


def make_beam():
    return BeamInput(
        span=L,
        left_support=SupportKind.FIXED,
        right_support=SupportKind.FIXED,
        distributed_loads=(DistributedLoad(0.0, L, q),),
    )


def test_fixed_fixed_reactions():
    result = analyze_beam(make_beam())

    forces = result.force_reactions
    moments = result.moment_reactions

    np.testing.assert_allclose([r.value for r in forces], [10.0, 10.0], rtol=1e-12)
    np.testing.assert_allclose(
        [abs(r.value) for r in moments], [abs(q) * L**2 / 12] * 2, rtol=1e-12
    )

    # Counter-clockwise positive: left wall turns the beam CCW, right wall CW
    assert moments[0].position == 0.0 and moments[0].value > 0
    assert moments[1].position == L and moments[1].value < 0

    # DOF order: v0, θ0, vL, θL
    assert [r.dof for r in result.reactions] == [0, 1, 2, 3]
    print("✓ Fixed-fixed reactions: ±qL/2 forces, ±qL²/12 moments")


def test_fixed_fixed_moment_diagram():
    result = analyze_beam(make_beam())

    M_end = q * L**2 / 12          # -16.67
    M_mid = -q * L**2 / 24         # +8.33

    i_mid = int(np.argmin(np.abs(result.x - L / 2)))

    assert np.isclose(result.M[0], M_end, rtol=1e-6)
    assert np.isclose(result.M[-1], M_end, rtol=1e-6)
    assert np.isclose(result.M[i_mid], M_mid, rtol=1e-3)
    assert abs(result.M[i_mid]) < abs(result.M[0])

    # Closed form everywhere: M(x) = M_end + (-qL/2)x + qx²/2
    expected = M_end + (-q * L / 2) * result.x + q * result.x**2 / 2
    np.testing.assert_allclose(result.M, expected, atol=1e-8)

    print(f"✓ End moments {result.M[0]:.3f}, {result.M[-1]:.3f} (expected {M_end:.3f})")
    print(f"✓ Midspan moment {result.M[i_mid]:.3f} (expected {M_mid:.3f})")


def test_fixed_fixed_shear_is_linear():
    result = analyze_beam(make_beam())
    np.testing.assert_allclose(result.V, 10.0 + q * result.x, atol=1e-9)
    assert np.isclose(result.V[0], 10.0)
    assert np.isclose(result.V[-1], -10.0)


def test_meshed_fixed_fixed_udl_midspan_deflection():
    """
    One element with every DOF fixed has no nodal displacement at all, so
    add a node at midspan (a zero point load) to get a deflection to check:
    δ_mid = qL⁴/(384EI) = -52.08 for EI = 1.
    """
    from mini_beam import PointLoad

    beam = BeamInput(
        span=L,
        left_support=SupportKind.FIXED,
        right_support=SupportKind.FIXED,
        distributed_loads=(DistributedLoad(0.0, L, q),),
        point_loads=(PointLoad(0.0, L / 2),),
    )
    result = analyze_beam(beam)
    i_mid = int(np.argmin(np.abs(result.x - L / 2)))
    assert np.isclose(result.v[i_mid], q * L**4 / 384, rtol=1e-9)
