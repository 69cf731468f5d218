# mini_beam/kernel - DOF indexing, assembly and the dense solver
"""
KERNEL: THE NUMERICAL FOUNDATION
================================

Nothing in here knows about loads or supports. The kernel only needs:
- A way to map (node_id, local_dof) → global_dof_index
- Element matrices with their DOF maps
- Fixed DOF lists
- Load vectors

Beam-specific pieces (element stiffness, UDL loads, supports) live one
level up.
"""

from .dof import DOFManager, DOF_BEAM
from .assemble import assemble_global_K, assemble_global_F, add_nodal_load
from .solve import gauss_solve, solve_linear, MechanismError, SingularSystemError

__all__ = [
    'DOFManager',
    'DOF_BEAM',
    'assemble_global_K',
    'assemble_global_F',
    'add_nodal_load',
    'gauss_solve',
    'solve_linear',
    'MechanismError',
    'SingularSystemError',
]
