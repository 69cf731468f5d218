# mini_beam/kernel/dof.py
"""
DOF MANAGER: Degree of Freedom Indexing for a 1D Beam
=====================================================

Every node of an Euler-Bernoulli beam owns two degrees of freedom:

    local DOF 0 : v      vertical displacement (positive up)
    local DOF 1 : theta  rotation (positive counter-clockwise)

so node n maps to global DOFs (2n, 2n+1). An element between nodes i and j
uses [2i, 2i+1, 2j, 2j+1].

USAGE:
------
    dof = DOFManager()
    dof.idx(node_id=3, local_dof=1)   # -> 7
    dof.element_dof_map([3, 4])       # -> [6, 7, 8, 9]
"""

from dataclasses import dataclass
from typing import List


VERTICAL = 0
ROTATION = 1


@dataclass
class DOFManager:
    """
    Maps (node_id, local_dof) to a global DOF index.

    Examples:
    ---------
    >>> dof = DOFManager()
    >>> dof.idx(0, VERTICAL)
    0
    >>> dof.idx(2, ROTATION)
    5
    >>> dof.ndof(4)
    8
    """
    dof_per_node: int = 2

    def idx(self, node_id: int, local_dof: int) -> int:
        return self.dof_per_node * node_id + local_dof

    def ndof(self, n_nodes: int) -> int:
        return self.dof_per_node * n_nodes

    def node_of(self, dof: int) -> int:
        """Inverse of idx(): the node that owns a global DOF."""
        return dof // self.dof_per_node

    def local_of(self, dof: int) -> int:
        """Inverse of idx(): VERTICAL or ROTATION for a global DOF."""
        return dof % self.dof_per_node

    def node_dofs(self, node_id: int) -> List[int]:
        base = self.dof_per_node * node_id
        return list(range(base, base + self.dof_per_node))

    def element_dof_map(self, node_ids: List[int]) -> List[int]:
        """
        Flattened global DOF indices for an element.

        >>> DOFManager().element_dof_map([2, 3])
        [4, 5, 6, 7]
        """
        result = []
        for node_id in node_ids:
            result.extend(self.node_dofs(node_id))
        return result


DOF_BEAM = DOFManager(dof_per_node=2)   # v, theta
