import numpy as np

from mini_beam import BeamInput, PointLoad, ReactionKind, SupportKind, analyze_beam


def make_beam():
    return BeamInput(
        span=10.0,
        left_support=SupportKind.PINNED,
        right_support=SupportKind.ROLLER,
        point_loads=(PointLoad(-10.0, 5.0),),
    )


def test_simply_supported_midspan_pointload():
    """
    A 10 m beam on a pin and a roller, 10 kN pushing down at midspan.

    WHAT WE EXPECT (textbook):
    - Each support takes half the load: R = +5 at x=0 and x=10
    - Shear is +5 left of the load and -5 right of it
    - Moment peaks under the load: M = PL/4 = 25, zero at both ends
    - Midspan deflection (EI = 1): δ = PL³/(48EI) = -208.33
    """
    result = analyze_beam(make_beam())

    # ========================================================================
    # REACTIONS
    # ========================================================================
    forces = result.force_reactions
    assert len(forces) == 2
    assert len(result.moment_reactions) == 0
    assert [r.position for r in forces] == [0.0, 10.0]
    np.testing.assert_allclose([r.value for r in forces], [5.0, 5.0], rtol=1e-9, atol=1e-9)

    # ========================================================================
    # SHEAR: +5 on [0, 5), -5 on [5, 10]
    # ========================================================================
    left = result.x < 5.0
    np.testing.assert_allclose(result.V[left], 5.0, atol=1e-9)
    np.testing.assert_allclose(result.V[~left], -5.0, atol=1e-9)
    assert np.isclose(result.V[-1], -5.0), "Shear at x=L is the value just left of the support"

    # ========================================================================
    # MOMENT
    # ========================================================================
    i_mid = int(np.argmin(np.abs(result.x - 5.0)))
    assert result.x[i_mid] == 5.0, "The load position must be a sample point"
    assert np.isclose(result.M[i_mid], 25.0, rtol=1e-9)
    assert np.isclose(result.M[0], 0.0, atol=1e-9)
    assert np.isclose(result.M[-1], 0.0, atol=1e-9)

    # ========================================================================
    # DEFLECTION
    # ========================================================================
    delta_expected = -10.0 * 10.0**3 / 48.0
    assert np.isclose(result.v[i_mid], delta_expected, rtol=1e-9)
    assert np.isclose(result.v[0], 0.0, atol=1e-12)
    assert np.isclose(result.v[-1], 0.0, atol=1e-12)

    print(f"✓ Reactions: {[round(r.value, 3) for r in forces]} (expected [5, 5])")
    print(f"✓ M(5) = {result.M[i_mid]:.3f} (expected 25)")


def test_moment_diagram_is_linear_between_supports_and_load():
    """With no UDL, M is piecewise linear: M = 5x on the left half."""
    result = analyze_beam(make_beam())
    left = result.x <= 5.0
    np.testing.assert_allclose(result.M[left], 5.0 * result.x[left], rtol=1e-9, atol=1e-9)
    right = result.x >= 5.0
    np.testing.assert_allclose(result.M[right], 5.0 * (10.0 - result.x[right]), rtol=1e-9, atol=1e-9)


def test_sample_grid():
    """Two elements × 200 samples, minus the shared node: 399 ascending points."""
    result = analyze_beam(make_beam())
    assert len(result.x) == 2 * 200 - 1
    assert result.x[0] == 0.0
    assert result.x[-1] == 10.0
    assert np.all(np.diff(result.x) > 0)
    assert result.path == "fem"
    assert all(r.kind == ReactionKind.FORCE for r in result.reactions)
