# Euler-Bernoulli beam element: stiffness + Hermite shape functions

import numpy as np


def beam_local_stiffness(L: float, EI: float = 1.0) -> np.ndarray:
    """
    Element stiffness matrix of a 2-node cubic Hermite beam element.
    DOF order: [v_i, theta_i, v_j, theta_j]
    """
    if L <= 0.0:
        raise ValueError(f"Element length must be positive, got {L}")
    L2 = L * L

    k = np.array([
        [ 12.0,   6*L,  -12.0,   6*L],
        [  6*L,  4*L2,   -6*L,  2*L2],
        [-12.0,  -6*L,   12.0,  -6*L],
        [  6*L,  2*L2,   -6*L,  4*L2],
    ], dtype=float)
    return (EI / (L2 * L)) * k


def hermite_shape_functions(s, L: float) -> np.ndarray:
    """
    Cubic Hermite shape functions at local coordinate(s) s in [0, L].

    v(s) = N1*v_i + N2*theta_i + N3*v_j + N4*theta_j

    The rotation functions N2, N4 already carry the length factor.
    Returns an array of shape (4,) for scalar s, (4, n) for an array.
    """
    s = np.asarray(s, dtype=float)
    xi = s / L
    N1 = 1 - 3*xi**2 + 2*xi**3
    N2 = s * (1 - 2*xi + xi**2)
    N3 = 3*xi**2 - 2*xi**3
    N4 = s * (xi**2 - xi)
    return np.array([N1, N2, N3, N4])


def hermite_second_derivatives(s, L: float) -> np.ndarray:
    """
    d²N/ds² of the shape functions above (curvature operator B).

    M_homogeneous(s) = EI * B(s) · u_e
    """
    s = np.asarray(s, dtype=float)
    L2 = L * L
    L3 = L2 * L
    B1 = -6.0 / L2 + 12.0 * s / L3
    B2 = -4.0 / L + 6.0 * s / L2
    B3 = 6.0 / L2 - 12.0 * s / L3
    B4 = -2.0 / L + 6.0 * s / L2
    return np.array([B1, B2, B3, B4])
