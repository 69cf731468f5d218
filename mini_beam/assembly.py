# global K assembly for a meshed beam

import numpy as np

from .elements import beam_local_stiffness
from .kernel.assemble import assemble_global_K
from .kernel.dof import DOFManager, DOF_BEAM
from .mesh import Mesh


def assemble_beam_K(mesh: Mesh, EI: float = 1.0, dof: DOFManager = DOF_BEAM) -> np.ndarray:
    contributions = []
    for e, (ni, nj) in enumerate(mesh.element_nodes()):
        ke = beam_local_stiffness(mesh.lengths[e], EI)
        contributions.append((dof.element_dof_map([ni, nj]), ke))
    return assemble_global_K(dof.ndof(mesh.n_nodes), contributions)
