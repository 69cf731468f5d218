# reactions, reaction report, diagram summary

import numpy as np
from typing import Dict, List, Sequence, Tuple

from .kernel.dof import DOFManager, DOF_BEAM, VERTICAL
from .model import Reaction, ReactionKind


def extract_reactions(
    K: np.ndarray,
    d: np.ndarray,
    F: np.ndarray,
    fixed_dofs: Sequence[int],
    positions: np.ndarray,
    dof: DOFManager = DOF_BEAM,
) -> Tuple[Reaction, ...]:
    """
    Recover support reactions from the full (unreduced) system.

    R = K·d - F is zero at free DOFs (up to round-off) and equals the
    support reaction at fixed DOFs. Vertical DOFs give force reactions,
    rotation DOFs give moment reactions.

    Parameters:
    -----------
    K : np.ndarray
        Global stiffness matrix (ndof x ndof), before any partitioning
    d : np.ndarray
        Full displacement vector, zeros at fixed DOFs
    F : np.ndarray
        Full load vector
    fixed_dofs : Sequence[int]
        Constrained DOFs; one Reaction is produced for each, in this order
    positions : np.ndarray
        Node coordinates, used to place each reaction

    Returns:
    --------
    Tuple[Reaction, ...]
    """
    R = K @ d - F

    reactions = []
    for i in fixed_dofs:
        kind = ReactionKind.FORCE if dof.local_of(i) == VERTICAL else ReactionKind.MOMENT
        reactions.append(Reaction(
            position=float(positions[dof.node_of(i)]),
            kind=kind,
            value=float(R[i]),
            dof=int(i),
        ))
    return tuple(reactions)


def format_reactions(reactions: Sequence[Reaction]) -> List[str]:
    """
    One human-readable line per reaction.

    >>> format_reactions([Reaction(0.0, ReactionKind.FORCE, 5.0, 0)])
    ['Node at x=0 m, Vertical Reaction: 5.000 kN']
    """
    lines = []
    for r in reactions:
        if r.kind == ReactionKind.FORCE:
            lines.append(f"Node at x={r.position:g} m, Vertical Reaction: {r.value:.3f} kN")
        else:
            lines.append(f"Node at x={r.position:g} m, Moment Reaction: {r.value:.3f} kN·m")
    return lines


def diagram_summary(result) -> Dict:
    """
    Peak values of a BeamResult and where they occur.

    Returns:
    --------
    Dict with:
        - max_shear, x_max_shear: V where |V| peaks (signed), and where
        - max_moment, x_max_moment: same for M
        - max_deflection, x_max_deflection: same for v (EI = 1)
        - sum_force_reactions: ΣR over force reactions
    """
    summary = {}
    for key, values in (("shear", result.V), ("moment", result.M), ("deflection", result.v)):
        if len(values) == 0:
            summary[f"max_{key}"] = 0.0
            summary[f"x_max_{key}"] = None
            continue
        i = int(np.argmax(np.abs(values)))
        summary[f"max_{key}"] = float(values[i])
        summary[f"x_max_{key}"] = float(result.x[i])
    summary["sum_force_reactions"] = float(sum(r.value for r in result.force_reactions))
    return summary
