# mini_beam/mesh.py
"""
MESH BUILDER
============

Turns a BeamInput into the 1D finite element mesh:

    positions   sorted, deduplicated node coordinates
    element_q   one constant UDL intensity per element
    node_loads  concentrated force per node
    node_moments concentrated moment per node

Every position that carries something (span ends, point loads, point
moments, UDL bounds, interior supports) becomes a node, so an element never
has a concentrated load inside it and never straddles a UDL boundary.

Positions closer than the configured tolerance collapse into a single node.
Concentrated loads are attached to a node *index* here, once, by tolerance
lookup. Later stages never compare floats to find "the node at x".
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import AnalysisConfig, CONFIG
from .model import BeamInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mesh:
    span: float
    positions: np.ndarray
    element_q: np.ndarray
    node_loads: np.ndarray
    node_moments: np.ndarray
    tol: float
    # node index of each input entry, in input order
    load_nodes: Tuple[int, ...] = ()
    moment_nodes: Tuple[int, ...] = ()
    support_nodes: Tuple[int, ...] = ()

    @property
    def n_nodes(self) -> int:
        return len(self.positions)

    @property
    def n_elements(self) -> int:
        return len(self.positions) - 1

    @property
    def lengths(self) -> np.ndarray:
        return np.diff(self.positions)

    def element_nodes(self):
        """(ni, nj) for each element, left to right."""
        return [(e, e + 1) for e in range(self.n_elements)]


def find_node(positions: np.ndarray, x: float, tol: float) -> Optional[int]:
    """Index of the node within tol of x, or None."""
    i = int(np.searchsorted(positions, x))
    for j in (i - 1, i):
        if 0 <= j < len(positions) and abs(positions[j] - x) <= tol:
            return j
    return None


def merge_positions(candidates, span: float, tol: float) -> np.ndarray:
    """
    Sort positions, keep those inside [0, span] and merge near-duplicates.

    The first and last nodes are pinned to exactly 0.0 and span.
    """
    inside = sorted(p for p in candidates if -tol <= p <= span + tol)
    kept = []
    for p in inside:
        if kept and p - kept[-1] <= tol:
            continue
        kept.append(p)
    kept[0] = 0.0
    if len(kept) > 1 and span - kept[-1] <= tol:
        kept[-1] = span
    elif kept[-1] != span:
        kept.append(span)
    return np.array(kept, dtype=float)


def build_mesh(beam: BeamInput, config: AnalysisConfig = CONFIG) -> Mesh:
    """
    Build the node list and per-element / per-node load data.

    Parameters:
    -----------
    beam : BeamInput
        Validated input snapshot
    config : AnalysisConfig
        Supplies the node-merging tolerance

    Returns:
    --------
    Mesh
    """
    L = beam.span
    tol = config.position_tol(L)

    candidates = [0.0, L]
    candidates.extend(pl.position for pl in beam.point_loads)
    candidates.extend(pm.position for pm in beam.point_moments)
    for udl in beam.distributed_loads:
        candidates.extend((udl.start, udl.end))
    candidates.extend(s.position for s in beam.interior_supports)

    positions = merge_positions(candidates, L, tol)
    n_nodes = len(positions)

    node_loads = np.zeros(n_nodes, dtype=float)
    load_nodes = []
    for pl in beam.point_loads:
        n = find_node(positions, pl.position, tol)
        node_loads[n] += pl.magnitude
        load_nodes.append(n)

    node_moments = np.zeros(n_nodes, dtype=float)
    moment_nodes = []
    for pm in beam.point_moments:
        n = find_node(positions, pm.position, tol)
        node_moments[n] += pm.magnitude
        moment_nodes.append(n)

    support_nodes = tuple(find_node(positions, s.position, tol) for s in beam.interior_supports)

    # Constant q per element: sum of UDLs covering the element midpoint
    element_q = np.zeros(n_nodes - 1, dtype=float)
    mids = 0.5 * (positions[:-1] + positions[1:])
    for udl in beam.distributed_loads:
        covered = (udl.start <= mids) & (mids <= udl.end)
        element_q[covered] += udl.intensity

    logger.debug("Mesh: %d nodes, %d elements over span %g", n_nodes, n_nodes - 1, L)

    return Mesh(
        span=L,
        positions=positions,
        element_q=element_q,
        node_loads=node_loads,
        node_moments=node_moments,
        tol=tol,
        load_nodes=tuple(load_nodes),
        moment_nodes=tuple(moment_nodes),
        support_nodes=support_nodes,
    )
