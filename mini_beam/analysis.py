# mini_beam/analysis.py
"""
ANALYSIS DRIVER
===============

One call, one immutable result:

    result = analyze_beam(BeamInput(span=10.0, ...))

PIPELINE:
---------
    build_mesh ─> resolve_boundary_conditions ─┬─> FE stage ──────────┐
                                               │  (K, F, solve,       │
                                               │   reactions, v(x))   │
                                               └─> free-floating ─────┤
                                                   (v(x) only)        │
                                                                      v
                                   reconstruct_shear_moment (V, M from statics)

The FE stage is responsible for reactions and deflection only. Shear and
moment always come from the statics stage, whichever path ran before it.

The path is chosen by has_vertical_support. That flag does not prove the
reduced system is solvable (a single pin with free ends still rotates);
the pivot check inside gauss_solve is what decides, and a singular system
aborts the run with SingularSystemError. Nothing partial is returned.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .assembly import assemble_beam_K
from .config import AnalysisConfig, CONFIG
from .diagrams import RawDiagrams, sample_element_diagrams
from .kernel.solve import solve_linear
from .loads import assemble_beam_loads
from .mesh import Mesh, build_mesh
from .model import BeamInput, BeamResult, Reaction
from .post import extract_reactions
from .statics import reconstruct_shear_moment, solve_free_floating
from .supports import BoundaryConditions, resolve_boundary_conditions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FEStage:
    """Everything the finite element path produces."""
    K: np.ndarray
    F: np.ndarray
    d: np.ndarray
    reactions: Tuple[Reaction, ...]
    raw: RawDiagrams


def run_fe_stage(
    mesh: Mesh,
    bc: BoundaryConditions,
    config: AnalysisConfig = CONFIG,
) -> FEStage:
    """
    Assemble, solve, extract reactions and sample deflection.

    Raises:
        SingularSystemError: If the constrained system is singular
    """
    K = assemble_beam_K(mesh, config.EI)
    F = assemble_beam_loads(mesh)
    fixed = bc.fixed_dofs()

    d, _, _ = solve_linear(K, F, fixed, pivot_tol=config.pivot_tol)
    reactions = extract_reactions(K, d, F, fixed, mesh.positions)

    raw = sample_element_diagrams(
        mesh, d,
        EI=config.EI,
        n_samples=config.samples_per_element,
        merge_decimals=config.merge_decimals,
        merge_tol=config.merge_tol,
    )
    return FEStage(K=K, F=F, d=d, reactions=reactions, raw=raw)


def analyze_beam(beam: BeamInput, config: AnalysisConfig = CONFIG) -> BeamResult:
    """
    Shear, moment, deflection and reactions of a beam.

    Parameters:
    -----------
    beam : BeamInput
        Span, supports and loads (already validated by BeamInput)
    config : AnalysisConfig
        Sample counts and tolerances

    Returns:
    --------
    BeamResult
        x ascending from 0 to L; V, M from statics; v for EI = config.EI;
        reactions at every constrained DOF (empty for a free-floating beam)

    Raises:
    -------
    SingularSystemError
        If the supports leave a mechanism
    """
    mesh = build_mesh(beam, config)
    bc = resolve_boundary_conditions(beam, mesh)

    if bc.has_vertical_support:
        fe = run_fe_stage(mesh, bc, config)
        x, v, reactions, path = fe.raw.x, fe.raw.v, fe.reactions, "fem"
    else:
        logger.debug("No vertical support, using free-floating equilibrium")
        free = solve_free_floating(beam, config.free_samples, config.EI, config.load_tol)
        x, v, reactions, path = free.x, free.v, (), "free"

    V, M = reconstruct_shear_moment(
        x, beam, reactions,
        load_tol=config.load_tol,
        load_positions=[mesh.positions[n] for n in mesh.load_nodes],
        moment_positions=[mesh.positions[n] for n in mesh.moment_nodes],
    )

    logger.info(
        "Analyzed beam L=%g: %d nodes, %d samples, %d reactions (%s path)",
        beam.span, mesh.n_nodes, len(x), len(reactions), path,
    )
    return BeamResult(x=x, V=V, M=M, v=v, reactions=reactions, path=path)
