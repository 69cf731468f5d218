# mini_beam/kernel/solve.py
"""Dense linear solve with boundary conditions and singular-system detection."""

import logging

import numpy as np
from typing import List

logger = logging.getLogger(__name__)


class MechanismError(RuntimeError):
    """Raised when the structure is unstable."""
    pass


class SingularSystemError(MechanismError):
    """Raised when Gaussian elimination runs out of usable pivots."""
    pass


def gauss_solve(A: np.ndarray, b: np.ndarray, pivot_tol: float = 1e-12) -> np.ndarray:
    """
    Solve A·x = b by Gaussian elimination with partial pivoting.

    At step k the row with the largest |A[i, k]| (i >= k) becomes the pivot
    row. If that magnitude is below pivot_tol the system is treated as
    singular. A and b are not modified.

    Args:
        A: Square matrix (n x n), n may be 0
        b: Right-hand side (n,)
        pivot_tol: Smallest acceptable pivot magnitude

    Returns:
        x: Solution vector (n,)

    Raises:
        SingularSystemError: If no pivot above pivot_tol exists at some step
    """
    M = np.array(A, dtype=float, copy=True)
    x = np.array(b, dtype=float, copy=True)
    n = x.shape[0]

    if M.shape != (n, n):
        raise ValueError(f"Matrix shape {M.shape} does not match rhs length {n}")

    # Forward elimination
    for k in range(n):
        p = k + int(np.argmax(np.abs(M[k:, k])))
        pivot = abs(M[p, k])
        if pivot < pivot_tol:
            raise SingularSystemError(
                f"Singular system: largest pivot {pivot:.2e} at step {k} "
                f"is below {pivot_tol:.0e}. Check supports."
            )
        if p != k:
            M[[k, p]] = M[[p, k]]
            x[[k, p]] = x[[p, k]]

        factors = M[k + 1:, k] / M[k, k]
        M[k + 1:, k:] -= np.outer(factors, M[k, k:])
        x[k + 1:] -= factors * x[k]

    # Back substitution
    sol = np.zeros(n, dtype=float)
    for i in range(n - 1, -1, -1):
        sol[i] = (x[i] - M[i, i + 1:] @ sol[i + 1:]) / M[i, i]

    return sol


def solve_linear(
    K: np.ndarray,
    F: np.ndarray,
    fixed_dofs: List[int],
    pivot_tol: float = 1e-12
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Solve K·d = F with fixed DOFs enforced by partitioning.

    Args:
        K: Global stiffness matrix (ndof x ndof)
        F: Global load vector (ndof,)
        fixed_dofs: Constrained DOF indices (displacement = 0)
        pivot_tol: Singular threshold passed to gauss_solve

    Returns:
        d: Displacement vector (ndof,), zero at fixed DOFs
        R: Residual vector K·d - F (ndof,); the reactions at fixed DOFs
        free: Array of free DOF indices

    Raises:
        SingularSystemError: If the reduced system is singular
    """
    ndof = K.shape[0]

    # Partition DOFs
    fixed = set(fixed_dofs)
    free = np.array([i for i in range(ndof) if i not in fixed], dtype=int)

    # Extract reduced system
    Kff = K[np.ix_(free, free)]
    Ff = F[free]

    try:
        df = gauss_solve(Kff, Ff, pivot_tol)
    except SingularSystemError:
        logger.warning(
            "Reduced system with %d free of %d DOFs is singular", len(free), ndof
        )
        raise

    # Assemble full displacement
    d = np.zeros(ndof, dtype=float)
    d[free] = df

    # R = K·d - F
    R = K @ d - F

    return d, R, free
