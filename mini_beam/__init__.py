# mini_beam - Straight beam shear, moment, deflection and reactions
"""
MINI-BEAM: A Straight-Beam Analysis Engine
==========================================

Euler-Bernoulli beam under point loads, uniform distributed loads and
concentrated moments, on pinned / roller / fixed / free supports at any
positions along the span.

ARCHITECTURE:
-------------
    kernel/         DOF indexing, global assembly, Gaussian elimination
    model.py        Input / result value objects (frozen dataclasses)
    inputs.py       Loose rows (forms, JSON) -> BeamInput
    mesh.py         Node list and per-element loads
    supports.py     Support kinds -> per-node constraints
    elements.py     4x4 beam stiffness, Hermite shape functions
    loads.py        Consistent nodal loads, global F
    assembly.py     Global K for a mesh
    post.py         Reactions, reaction report, peak values
    diagrams.py     In-element sampling of the FE solution
    statics.py      V/M from equilibrium, free-floating beams
    analysis.py     analyze_beam(): the whole pipeline
    section.py      E, I, h scaling for deflection and stress
    config.py       Sample counts and tolerances
"""

from .analysis import analyze_beam
from .config import AnalysisConfig, CONFIG
from .inputs import parse_beam_input
from .kernel import MechanismError, SingularSystemError
from .model import (
    BeamInput,
    BeamResult,
    DistributedLoad,
    InvalidSpanError,
    PointLoad,
    PointMoment,
    Reaction,
    ReactionKind,
    Support,
    SupportKind,
)
from .section import SectionProperties, section_response

__version__ = "0.1.0"

__all__ = [
    'analyze_beam',
    'parse_beam_input',
    'AnalysisConfig',
    'CONFIG',
    'BeamInput',
    'BeamResult',
    'PointLoad',
    'DistributedLoad',
    'PointMoment',
    'Support',
    'SupportKind',
    'Reaction',
    'ReactionKind',
    'SectionProperties',
    'section_response',
    'InvalidSpanError',
    'MechanismError',
    'SingularSystemError',
]
