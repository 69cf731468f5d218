# mini_beam/statics.py
"""
EQUILIBRIUM RECONSTRUCTION AND THE FREE-FLOATING PATH
=====================================================

Once the reactions are known, shear and moment follow from statics alone:

    V(x) = Σ forces left of x  (reactions, point loads, UDL resultants)
    M(x) = ∫₀ˣ V dt  -  Σ couples left of x

This is exact, so the engine uses it for the reported V and M instead of
differentiating the finite element curvature.

SIGN CONVENTION:
----------------
- Forces positive upward, couples positive counter-clockwise.
- M is sagging positive, so dM/dx = V.
- A counter-clockwise couple C at x0 makes M drop by C at x0.
  (Free body left of the cut: ΣF_i (x - x_i) - ΣC_i - M = 0.)

WHAT "LEFT OF x" MEANS:
-----------------------
Everything at a position <= x (tolerance load_tol) counts, so the diagrams
are right-continuous: V jumps *at* a point load. The one exception is the
right end: contributions located at x = L close both diagrams to zero, and
the value reported at x = L is the left limit (the end shear and the end
moment of a fixed support stay visible).

FREE-FLOATING BEAMS:
--------------------
With no vertical support anywhere there are no reactions to start from.
virtual_end_reactions() invents two end forces R_A, R_B that satisfy
ΣF = 0 and ΣM@0 = 0, and solve_free_floating() integrates from them.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .model import BeamInput, Reaction, ReactionKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FreeBeamDiagrams:
    x: np.ndarray
    V: np.ndarray
    M: np.ndarray
    slope: np.ndarray
    v: np.ndarray
    R_A: float
    R_B: float


def virtual_end_reactions(beam: BeamInput) -> Tuple[float, float]:
    """
    End forces (R_A at x=0, R_B at x=L) balancing all applied loads.

        M_P = Σ P·x
        M_Q = Σ q(b-a)·(a+b)/2
        M_M = Σ M
        R_B = -(M_P + M_Q + M_M) / L
        R_A = -(ΣP + Σq(b-a)) - R_B
    """
    L = beam.span
    P_sum = sum(pl.magnitude for pl in beam.point_loads)
    M_P = sum(pl.magnitude * pl.position for pl in beam.point_loads)
    Q_sum = sum(udl.resultant for udl in beam.distributed_loads)
    M_Q = sum(udl.resultant * udl.centroid for udl in beam.distributed_loads)
    M_M = sum(pm.magnitude for pm in beam.point_moments)

    R_B = -(M_P + M_Q + M_M) / L
    R_A = -(P_sum + Q_sum) - R_B
    return R_A, R_B


def virtual_reactions(beam: BeamInput) -> Tuple[Reaction, Reaction]:
    R_A, R_B = virtual_end_reactions(beam)
    return (
        Reaction(position=0.0, kind=ReactionKind.FORCE, value=R_A),
        Reaction(position=beam.span, kind=ReactionKind.FORCE, value=R_B),
    )


def _cumulative_trapezoid(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    out = np.zeros(len(x), dtype=float)
    if len(x) > 1:
        out[1:] = np.cumsum(0.5 * (y[1:] + y[:-1]) * np.diff(x))
    return out


def reconstruct_shear_moment(
    x: np.ndarray,
    beam: BeamInput,
    reactions: Sequence[Reaction],
    load_tol: float = 1e-12,
    load_positions: Sequence[float] = None,
    moment_positions: Sequence[float] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Shear and moment at every sample position from statics.

    Parameters:
    -----------
    x : np.ndarray
        Ascending sample positions, x[0] = 0, x[-1] = L
    beam : BeamInput
        Applied loads
    reactions : Sequence[Reaction]
        Force and moment reactions (real or virtual). If it holds no force
        reaction, the virtual end reactions are used instead.
    load_tol : float
        Tolerance of the "position <= x" test
    load_positions, moment_positions : Sequence[float], optional
        Node positions of the point loads / point moments, in input order,
        so that an entry merged into a node is counted exactly at that node

    Returns:
    --------
    V, M : np.ndarray
        Same length as x
    """
    x = np.asarray(x, dtype=float)
    L = beam.span

    reaction_forces = [(r.position, r.value) for r in reactions if r.kind == ReactionKind.FORCE]
    reaction_moments = [(r.position, r.value) for r in reactions if r.kind == ReactionKind.MOMENT]
    if not reaction_forces:
        virtual = virtual_reactions(beam)
        reaction_forces = [(r.position, r.value) for r in virtual]
        logger.debug(
            "No force reactions, using virtual end reactions %g, %g",
            virtual[0].value, virtual[1].value,
        )

    if load_positions is None:
        load_positions = [pl.position for pl in beam.point_loads]
    if moment_positions is None:
        moment_positions = [pm.position for pm in beam.point_moments]

    forces = reaction_forces + [
        (p, pl.magnitude) for p, pl in zip(load_positions, beam.point_loads)
    ]
    couples = reaction_moments + [
        (p, pm.magnitude) for p, pm in zip(moment_positions, beam.point_moments)
    ]

    # Contributions sitting on the right end are never "left of" a sample
    def acts_before(p):
        return (p <= x + load_tol) & (p < L - load_tol)

    V_jump = np.zeros_like(x)
    M_jump = np.zeros_like(x)
    for p, value in forces:
        V_jump += np.where(acts_before(p), value, 0.0)
        M_jump += value * np.clip(x - p, 0.0, None)

    V_udl = np.zeros_like(x)
    for udl in beam.distributed_loads:
        V_udl += udl.intensity * np.clip(np.minimum(x, udl.end) - udl.start, 0.0, None)

    V = V_jump + V_udl

    # The distributed part is continuous: trapezoids. The jumps are
    # integrated exactly (ramps), so no half-step of area leaks into the
    # interval next to a point load.
    M = _cumulative_trapezoid(x, V_udl) + M_jump

    for p, value in couples:
        M -= np.where(acts_before(p), value, 0.0)

    return V, M


def solve_free_floating(
    beam: BeamInput,
    n_samples: int = 200,
    EI: float = 1.0,
    load_tol: float = 1e-12,
) -> FreeBeamDiagrams:
    """
    Closed-form diagrams for a beam with no vertical support.

    Uniform grid over [0, L]. Shear starts from R_A, picks up loads as they
    are passed and R_B once x reaches L. Moment, slope and deflection are
    successive trapezoidal integrals, slope and deflection anchored at zero
    at x = 0.

    The deflection is nominal: pinning the left end to zero is arbitrary for
    an unsupported beam, but gives a stable shape indicator.
    """
    L = beam.span
    R_A, R_B = virtual_end_reactions(beam)
    x = np.linspace(0.0, L, n_samples)

    V = np.full_like(x, R_A)
    for pl in beam.point_loads:
        V += np.where(pl.position <= x + load_tol, pl.magnitude, 0.0)
    for udl in beam.distributed_loads:
        V += udl.intensity * np.clip(np.minimum(x, udl.end) - udl.start, 0.0, None)
    V += np.where(x >= L - load_tol, R_B, 0.0)

    M = _cumulative_trapezoid(x, V)
    for pm in beam.point_moments:
        M -= np.where(pm.position <= x + load_tol, pm.magnitude, 0.0)

    slope = _cumulative_trapezoid(x, M / EI)
    v = _cumulative_trapezoid(x, slope)

    logger.debug("Free-floating beam: virtual reactions R_A=%g, R_B=%g", R_A, R_B)
    return FreeBeamDiagrams(x=x, V=V, M=M, slope=slope, v=v, R_A=R_A, R_B=R_B)
