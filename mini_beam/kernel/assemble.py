# mini_beam/kernel/assemble.py
"""
ASSEMBLY: Scatter-Add Into the Global System
============================================

Element matrices and element load vectors are added into the global K and
F through their DOF maps. Nothing here knows what an element is: each
contribution is just (dof_map, matrix) or (dof_map, vector).

For a beam element between nodes i and j the map is [2i, 2i+1, 2j, 2j+1],
so neighbouring elements overlap on the shared node's two DOFs and their
terms add up there.

USAGE:
------
    pairs = [(dof.element_dof_map([ni, nj]), beam_local_stiffness(Le))
             for (ni, nj), Le in zip(mesh.element_nodes(), mesh.lengths)]
    K = assemble_global_K(dof.ndof(mesh.n_nodes), pairs)
"""

import numpy as np
from typing import Iterable, List, Sequence, Tuple


def assemble_global_K(
    ndof: int,
    contributions: Iterable[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Global stiffness matrix from (dof_map, ke) pairs.

    Parameters:
    -----------
    ndof : int
        Size of the global system (2 × n_nodes for a beam)
    contributions : Iterable[Tuple[List[int], np.ndarray]]
        One pair per element; ke is square with side len(dof_map)

    Returns:
    --------
    np.ndarray
        K of shape (ndof, ndof). Singular until supports are applied.
    """
    K = np.zeros((ndof, ndof), dtype=float)

    for dof_map, ke in contributions:
        m = len(dof_map)
        if ke.shape != (m, m):
            raise ValueError(f"Element matrix {ke.shape} does not fit a {m}-DOF map")
        K[np.ix_(dof_map, dof_map)] += ke

    return K


def assemble_global_F(
    ndof: int,
    contributions: Iterable[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """Global load vector from (dof_map, fe) pairs (consistent UDL loads)."""
    F = np.zeros(ndof, dtype=float)

    for dof_map, fe in contributions:
        if fe.shape != (len(dof_map),):
            raise ValueError(f"Element load {fe.shape} does not fit a {len(dof_map)}-DOF map")
        np.add.at(F, dof_map, fe)

    return F


def add_nodal_load(
    F: np.ndarray,
    node_id: int,
    load_vector: Sequence[float],
    dof_per_node: int
) -> None:
    """
    Add [P, M] (vertical force, couple) at one node, in place.

    >>> F = np.zeros(6)
    >>> add_nodal_load(F, 1, [-10.0, 2.0], dof_per_node=2)
    >>> F[2:4].tolist()
    [-10.0, 2.0]
    """
    first = dof_per_node * node_id
    F[first:first + len(load_vector)] += np.asarray(load_vector, dtype=float)
