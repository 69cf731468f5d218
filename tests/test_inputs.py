# File: tests/test_inputs.py
"""
Input parsing, validation policy, section scaling and reporting helpers.
"""

import numpy as np
import pandas as pd
import pytest

from mini_beam import (
    AnalysisConfig,
    BeamInput,
    DistributedLoad,
    InvalidSpanError,
    PointLoad,
    SectionProperties,
    SupportKind,
    analyze_beam,
    parse_beam_input,
    section_response,
)
from mini_beam.diagrams import finite_difference_shear, merge_samples
from mini_beam.inputs import parse_distributed_loads, parse_point_loads
from mini_beam.post import diagram_summary, format_reactions
from mini_beam.section import bending_stress, scale_deflection


# =============================================================================
# PARSING
# =============================================================================

def test_parse_drops_bad_rows_and_keeps_the_rest():
    beam = parse_beam_input({
        "span": " 10 ",
        "left_support": "Fixed",
        "right_support": "free",
        "point_loads": [
            ("-10", "5"),
            ("abc", "2"),                              # non-numeric
            ("-3", "11"),                              # outside span
            {"magnitude": "-2", "position": "7"},
            ("4",),                                    # too short
            "12",                                      # bare string, not a row
            7.5,                                       # scalar, not a row
        ],
        "distributed_loads": [
            ("8", "2", "-1"),                          # reversed bounds
            ("x", "1", "1"),
            ("-5", "3", "-2"),                         # clamped to [0, 3]
            ("12", "15", "-1"),                        # nothing left on span
        ],
        "point_moments": [("5", "")],
        "interior_supports": [("5", "fixed"), ("6", "hinge"), ("20", "pinned"), ("3", None)],
    })

    assert beam.span == 10.0
    assert beam.left_support == SupportKind.FIXED
    assert beam.right_support == SupportKind.FREE

    assert beam.point_loads == (PointLoad(-10.0, 5.0), PointLoad(-2.0, 7.0))
    assert beam.distributed_loads == (
        DistributedLoad(2.0, 8.0, -1.0),
        DistributedLoad(0.0, 3.0, -2.0),
    )
    assert beam.point_moments == ()
    assert [(s.position, s.kind) for s in beam.interior_supports] == [
        (5.0, SupportKind.FIXED),
        (3.0, SupportKind.PINNED),
    ]
    print("✓ Malformed rows dropped, valid rows kept")


def test_bare_string_row_is_not_split_into_fields():
    """A bare "12" is one malformed row, not a load of 1 at x = 2."""
    assert parse_point_loads(["12", "35"], 10.0) == []
    assert parse_distributed_loads(["258"], 10.0) == []
    assert parse_point_loads([b"12"], 10.0) == []


@pytest.mark.parametrize("span", [None, "", "abc", "0", -1.0, float("nan"), float("inf")])
def test_invalid_span(span):
    with pytest.raises(InvalidSpanError):
        parse_beam_input({"span": span})


def test_invalid_span_is_a_value_error():
    assert issubclass(InvalidSpanError, ValueError)
    with pytest.raises(ValueError):
        BeamInput(span=0.0)


def test_unknown_end_support_raises():
    with pytest.raises(ValueError):
        parse_beam_input({"span": 5, "left_support": "glued"})


def test_defaults():
    beam = parse_beam_input({"span": 4})
    assert beam.left_support == SupportKind.PINNED
    assert beam.right_support == SupportKind.ROLLER
    assert beam.point_loads == beam.distributed_loads == beam.point_moments == ()
    assert beam.section == SectionProperties()


def test_beam_input_drops_out_of_span_entries():
    beam = BeamInput(
        span=5.0,
        point_loads=(PointLoad(-1.0, 6.0), PointLoad(-1.0, 5.0)),
        distributed_loads=(DistributedLoad(-2.0, -1.0, 3.0),),
    )
    assert beam.point_loads == (PointLoad(-1.0, 5.0),)
    assert beam.distributed_loads == ()


def test_load_fields_must_be_finite():
    with pytest.raises(ValueError):
        PointLoad(float("nan"), 1.0)


# =============================================================================
# SECTION
# =============================================================================

def test_section_fallbacks():
    section = SectionProperties(E="x", I=-2.0, h=None)
    assert (section.E, section.I, section.h) == (1.0, 1.0, 1.0)
    assert SectionProperties(E="200", I=0.5, h=0.4).EI == 100.0


def test_section_response_scales_unit_results():
    """
    EI = 1 results divided by the real EI; stress = M·c/I with c = h/2.
    Scenario: simply supported, P = -10 at midspan, E = 200, I = 2, h = 0.5
    """
    beam = BeamInput(span=10.0, point_loads=(PointLoad(-10.0, 5.0),))
    result = analyze_beam(beam)
    section = SectionProperties(E=200.0, I=2.0, h=0.5)

    scaled = section_response(result, section)

    np.testing.assert_allclose(scaled.deflection, result.v / 400.0)
    np.testing.assert_allclose(scaled.stress, result.M * 0.25 / 2.0)
    np.testing.assert_array_equal(scaled.x, result.x)

    np.testing.assert_allclose(scale_deflection([4.0], section), [0.01])
    np.testing.assert_allclose(bending_stress([8.0], section), [1.0])


# =============================================================================
# CONFIG
# =============================================================================

def test_config_sample_count():
    """Two elements, 50 samples each, shared node counted once."""
    beam = BeamInput(span=10.0, point_loads=(PointLoad(-10.0, 5.0),))
    result = analyze_beam(beam, AnalysisConfig(samples_per_element=50, free_samples=30))
    assert len(result.x) == 99

    free = BeamInput(span=10.0, left_support="free", right_support="free")
    assert len(analyze_beam(free, AnalysisConfig(free_samples=30)).x) == 30


def test_config_validation():
    with pytest.raises(ValueError):
        AnalysisConfig(samples_per_element=1)
    with pytest.raises(ValueError):
        AnalysisConfig(EI=0.0)
    assert AnalysisConfig().position_tol(1000.0) == pytest.approx(1e-6)


# =============================================================================
# SAMPLER HELPERS
# =============================================================================

def test_merge_samples_drops_shared_nodes():
    x = np.array([0.0, 0.5, 1.0, 1.0, 1.5, 1.5 + 1e-9])
    keep = merge_samples(x, decimals=6, tol=1e-10)
    np.testing.assert_array_equal(keep, [0, 1, 2, 4])


def test_finite_difference_shear_of_linear_moment():
    x = np.linspace(0.0, 2.0, 9)
    V = finite_difference_shear(x, 3.0 * x)
    np.testing.assert_allclose(V, -3.0)


# =============================================================================
# REPORTING
# =============================================================================

def test_format_reactions_and_summary():
    beam = BeamInput(
        span=10.0,
        left_support=SupportKind.FIXED,
        right_support=SupportKind.FIXED,
        distributed_loads=(DistributedLoad(0.0, 10.0, -2.0),),
    )
    result = analyze_beam(beam)

    lines = format_reactions(result.reactions)
    assert lines == [
        "Node at x=0 m, Vertical Reaction: 10.000 kN",
        "Node at x=0 m, Moment Reaction: 16.667 kN·m",
        "Node at x=10 m, Vertical Reaction: 10.000 kN",
        "Node at x=10 m, Moment Reaction: -16.667 kN·m",
    ]

    summary = diagram_summary(result)
    assert summary["max_shear"] == pytest.approx(10.0)
    assert summary["x_max_shear"] == 0.0
    assert summary["max_moment"] == pytest.approx(-50.0 / 3.0)
    assert summary["sum_force_reactions"] == pytest.approx(20.0)


def test_to_dataframe():
    result = analyze_beam(BeamInput(span=2.0, point_loads=(PointLoad(-1.0, 1.0),)))
    frame = result.to_dataframe()
    assert isinstance(frame, pd.DataFrame)
    assert list(frame.columns) == ["x", "V", "M", "v"]
    assert len(frame) == len(result.x)
