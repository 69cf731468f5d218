# mini_beam/diagrams.py
"""
DIAGRAM SAMPLER
===============

Evaluates the finite element solution inside every element:

- Deflection v(s) from the cubic Hermite shape functions and the element's
  nodal displacements [v_i, theta_i, v_j, theta_j].
- Moment from curvature, EI * d²N/ds² · u_e, plus a closed-form particular
  part for the element's distributed load:

      M_q(s) = Mi(1 - s/Le) + Mj(s/Le) + q s (Le - s) / 2
      Mi = q Le²/12,  Mj = -q Le²/12

- A raw shear, -dM/dx, by finite differences on the sampled moment.

The raw shear (and this moment) are NOT what the engine reports. The
curvature field of a cubic element is only piecewise linear, so its
derivative is noisy and jumps at every node. The authoritative V and M come
from statics.reconstruct_shear_moment(); what this module contributes to the
final result is the sample grid and the deflection.
"""

from dataclasses import dataclass

import numpy as np

from .elements import hermite_shape_functions, hermite_second_derivatives
from .kernel.dof import DOFManager, DOF_BEAM
from .mesh import Mesh


@dataclass(frozen=True)
class RawDiagrams:
    """Sampler output on the merged grid. V is the finite-difference shear."""
    x: np.ndarray
    M: np.ndarray
    V: np.ndarray
    v: np.ndarray


def finite_difference_shear(x: np.ndarray, M: np.ndarray) -> np.ndarray:
    """
    -dM/dx: forward difference at the first sample, backward at the last,
    centred everywhere else.
    """
    n = len(x)
    V = np.zeros(n, dtype=float)
    if n < 2:
        return V
    V[0] = -(M[1] - M[0]) / (x[1] - x[0])
    V[-1] = -(M[-1] - M[-2]) / (x[-1] - x[-2])
    if n > 2:
        V[1:-1] = -(M[2:] - M[:-2]) / (x[2:] - x[:-2])
    return V


def merge_samples(x: np.ndarray, decimals: int = 6, tol: float = 1e-10) -> np.ndarray:
    """
    Indices of the samples to keep when element grids are concatenated.

    A sample is dropped when its rounded position is not beyond the
    previously retained sample's rounded position by more than tol. This
    removes the duplicate point every pair of neighbouring elements shares.
    """
    rounded = np.round(x, decimals)
    keep = []
    last = None
    for i, xr in enumerate(rounded):
        if last is None or xr > last + tol:
            keep.append(i)
            last = xr
    return np.array(keep, dtype=int)


def sample_element_diagrams(
    mesh: Mesh,
    d: np.ndarray,
    EI: float = 1.0,
    n_samples: int = 200,
    merge_decimals: int = 6,
    merge_tol: float = 1e-10,
    dof: DOFManager = DOF_BEAM,
) -> RawDiagrams:
    """
    Sample moment, raw shear and deflection along every element.

    Parameters:
    -----------
    mesh : Mesh
        Node positions and per-element q
    d : np.ndarray
        Full displacement vector from solve_linear, (2 × n_nodes,)
    EI : float
        Flexural rigidity used in the solve
    n_samples : int
        Equally spaced samples per element, both ends included

    Returns:
    --------
    RawDiagrams
        Arrays on the merged (duplicate-free) grid
    """
    x_parts, M_parts, v_parts = [], [], []

    for e, (ni, nj) in enumerate(mesh.element_nodes()):
        xi = mesh.positions[ni]
        xj = mesh.positions[nj]
        Le = xj - xi
        xs = np.linspace(xi, xj, n_samples)
        s = xs - xi

        ue = d[dof.element_dof_map([ni, nj])]
        q = mesh.element_q[e]
        Mi = q * Le * Le / 12.0
        Mj = -q * Le * Le / 12.0

        M_u = EI * (ue @ hermite_second_derivatives(s, Le))
        M_q = Mi * (1 - s / Le) + Mj * (s / Le) + q * s * (Le - s) / 2.0

        x_parts.append(xs)
        M_parts.append(M_u + M_q)
        v_parts.append(ue @ hermite_shape_functions(s, Le))

    x_all = np.concatenate(x_parts)
    M_all = np.concatenate(M_parts)
    v_all = np.concatenate(v_parts)
    V_all = finite_difference_shear(x_all, M_all)

    keep = merge_samples(x_all, merge_decimals, merge_tol)
    return RawDiagrams(x=x_all[keep], M=M_all[keep], V=V_all[keep], v=v_all[keep])
