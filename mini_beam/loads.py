# loads.py - Equivalent nodal loads for distributed loads

import numpy as np

from .kernel.dof import DOFManager, DOF_BEAM
from .kernel.assemble import assemble_global_F, add_nodal_load


def beam_equiv_nodal_load_udl(L: float, q: float) -> np.ndarray:
    """
    Consistent nodal load vector of a uniform load q on a beam element.

    A uniform load q over length L has resultant qL. The cubic Hermite
    element carries it as half the resultant at each end plus the
    fixed-end moments ±qL²/12, which reproduce the work of the load exactly.

    Parameters:
    -----------
    L : float
        Element length (must be positive)
    q : float
        Load per unit length; q > 0 upward, q < 0 downward (gravity)

    Returns:
    --------
    np.ndarray
        Shape (4,): [F_i, M_i, F_j, M_j] = [qL/2, qL²/12, qL/2, -qL²/12]

    Examples:
    --------
    >>> beam_equiv_nodal_load_udl(4.0, -1000.0)[[0, 2]]
    array([-2000., -2000.])
    """
    force_per_node = q * L / 2.0
    moment_magnitude = q * L * L / 12.0

    return np.array([
        force_per_node,         # F_i
        moment_magnitude,       # M_i (+qL²/12)
        force_per_node,         # F_j
        -moment_magnitude,      # M_j (-qL²/12, opposite)
    ], dtype=float)


def assemble_beam_loads(mesh, dof: DOFManager = DOF_BEAM) -> np.ndarray:
    """
    Global load vector of a meshed beam.

    Element UDLs enter through their consistent nodal loads; concentrated
    loads and moments already sit on their nodes (the mesh resolved them)
    and are added at (2n, 2n+1).

    Parameters:
    -----------
    mesh : Mesh
        Output of build_mesh()
    dof : DOFManager
        DOF indexing, 2 per node

    Returns:
    --------
    np.ndarray
        F of shape (2 × n_nodes,)
    """
    ndof = dof.ndof(mesh.n_nodes)

    contributions = []
    for e, (ni, nj) in enumerate(mesh.element_nodes()):
        q = mesh.element_q[e]
        if q == 0.0:
            continue
        fe = beam_equiv_nodal_load_udl(mesh.lengths[e], q)
        contributions.append((dof.element_dof_map([ni, nj]), fe))

    F = assemble_global_F(ndof, contributions)

    for n in range(mesh.n_nodes):
        add_nodal_load(
            F, n, [mesh.node_loads[n], mesh.node_moments[n]], dof.dof_per_node
        )

    return F
