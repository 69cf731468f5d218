# mini_beam/section.py
"""
SECTION PROPERTIES AND PRESENTATION SCALING
===========================================

The solve runs with EI = 1, so the deflection it returns is a *shape*,
not a physical displacement. This module turns the raw result into
numbers a person would plot:

    deflection(x) = v(x) / (E * I)
    stress(x)     = M(x) * c / I,   c = h / 2   (extreme fibre)

E, I and h all fall back to 1.0 when missing, non-numeric or not positive,
so a half-filled form still produces a diagram instead of an error.
"""

import math
from dataclasses import dataclass

import numpy as np


def _positive_or_one(value) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 1.0
    if not math.isfinite(value) or value <= 0.0:
        return 1.0
    return value


@dataclass(frozen=True)
class SectionProperties:
    """
    Material and cross-section data used only after the solve.

    Parameters:
    -----------
    E : float
        Elastic modulus
    I : float
        Second moment of area about the bending axis
    h : float
        Section depth; the extreme fibre sits at c = h/2
    """
    E: float = 1.0
    I: float = 1.0
    h: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "E", _positive_or_one(self.E))
        object.__setattr__(self, "I", _positive_or_one(self.I))
        object.__setattr__(self, "h", _positive_or_one(self.h))

    @property
    def EI(self) -> float:
        return self.E * self.I

    @property
    def c(self) -> float:
        return self.h / 2.0


@dataclass(frozen=True)
class SectionResponse:
    """Physically scaled diagrams for one result and one section."""
    x: np.ndarray
    deflection: np.ndarray
    stress: np.ndarray


def scale_deflection(v, section: SectionProperties) -> np.ndarray:
    return np.asarray(v, dtype=float) / section.EI


def bending_stress(M, section: SectionProperties) -> np.ndarray:
    return np.asarray(M, dtype=float) * section.c / section.I


def section_response(result, section: SectionProperties) -> SectionResponse:
    """
    Scale a BeamResult for a given section.

    Returns fresh arrays, so the caller can keep or animate them without
    touching the result they came from.
    """
    return SectionResponse(
        x=np.array(result.x, dtype=float),
        deflection=scale_deflection(result.v, section),
        stress=bending_stress(result.M, section),
    )
