# mini_beam/supports.py
"""
BOUNDARY CONDITION RESOLVER
===========================

Maps support kinds to per-node constraints:

    pinned, roller  ->  (vertical fixed, rotation free)
    fixed           ->  (vertical fixed, rotation fixed)
    free            ->  (nothing fixed)

Pinned and roller are the same thing here: the beam model has no axial DOF,
so the only difference between them (horizontal restraint) does not exist.

The span ends take the left/right support kinds. Interior supports are then
applied in input order and *overwrite* the pair at their node, so an
interior entry at x = 0 or x = L replaces the end support there.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .kernel.dof import DOFManager, DOF_BEAM, VERTICAL, ROTATION
from .mesh import Mesh
from .model import BeamInput, SupportKind

logger = logging.getLogger(__name__)


SUPPORT_CONSTRAINTS = {
    SupportKind.PINNED: (True, False),
    SupportKind.ROLLER: (True, False),
    SupportKind.FIXED: (True, True),
    SupportKind.FREE: (False, False),
}


@dataclass(frozen=True)
class BoundaryConditions:
    """(vertical_fixed, rotation_fixed) for every node."""
    constraints: Tuple[Tuple[bool, bool], ...]

    @property
    def has_vertical_support(self) -> bool:
        return any(v for v, _ in self.constraints)

    def fixed_dofs(self, dof: DOFManager = DOF_BEAM) -> List[int]:
        """Constrained global DOFs in ascending order."""
        fixed = []
        for n, (v_fixed, r_fixed) in enumerate(self.constraints):
            if v_fixed:
                fixed.append(dof.idx(n, VERTICAL))
            if r_fixed:
                fixed.append(dof.idx(n, ROTATION))
        return fixed


def resolve_boundary_conditions(beam: BeamInput, mesh: Mesh) -> BoundaryConditions:
    """
    Build the per-node constraint pairs for a mesh.

    Parameters:
    -----------
    beam : BeamInput
        Supplies the end support kinds and the interior supports
    mesh : Mesh
        Supplies node positions and the node index of every interior support

    Returns:
    --------
    BoundaryConditions
    """
    free = SUPPORT_CONSTRAINTS[SupportKind.FREE]
    bc = [free] * mesh.n_nodes
    bc[0] = SUPPORT_CONSTRAINTS[beam.left_support]
    bc[-1] = SUPPORT_CONSTRAINTS[beam.right_support]

    for support, node in zip(beam.interior_supports, mesh.support_nodes):
        if node is None:
            logger.debug("No node for support at x=%g, ignored", support.position)
            continue
        bc[node] = SUPPORT_CONSTRAINTS[support.kind]

    result = BoundaryConditions(constraints=tuple(bc))
    logger.debug(
        "Boundary conditions: %d fixed DOFs, vertical support: %s",
        len(result.fixed_dofs()), result.has_vertical_support,
    )
    return result
