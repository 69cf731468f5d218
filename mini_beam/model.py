# mini_beam/model.py
"""
Beam input and result value objects.

Everything here is immutable: one BeamInput snapshot goes into an analysis
run and one BeamResult comes out. Nothing is cached between runs.

Sign convention:
    - forces, displacements: positive upward (+v)
    - applied moments, moment reactions, rotations: positive counter-clockwise
    - shear V(x): resultant of the vertical forces left of the cut
    - bending moment M(x): sagging positive, dM/dx = V
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

import numpy as np
import pandas as pd

from .section import SectionProperties

logger = logging.getLogger(__name__)


class InvalidSpanError(ValueError):
    """Raised when the span length is missing, non-numeric or not positive."""
    pass


class SupportKind(str, Enum):
    PINNED = "pinned"
    ROLLER = "roller"
    FIXED = "fixed"
    FREE = "free"


class ReactionKind(str, Enum):
    FORCE = "force"
    MOMENT = "moment"


def _finite(value, name: str) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


@dataclass(frozen=True)
class PointLoad:
    magnitude: float
    position: float

    def __post_init__(self):
        object.__setattr__(self, "magnitude", _finite(self.magnitude, "magnitude"))
        object.__setattr__(self, "position", _finite(self.position, "position"))


@dataclass(frozen=True)
class DistributedLoad:
    """Uniform load of `intensity` per unit length over [start, end]."""
    start: float
    end: float
    intensity: float

    def __post_init__(self):
        a = _finite(self.start, "start")
        b = _finite(self.end, "end")
        object.__setattr__(self, "start", min(a, b))
        object.__setattr__(self, "end", max(a, b))
        object.__setattr__(self, "intensity", _finite(self.intensity, "intensity"))

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def resultant(self) -> float:
        return self.intensity * self.length

    @property
    def centroid(self) -> float:
        return 0.5 * (self.start + self.end)


@dataclass(frozen=True)
class PointMoment:
    magnitude: float
    position: float

    def __post_init__(self):
        object.__setattr__(self, "magnitude", _finite(self.magnitude, "magnitude"))
        object.__setattr__(self, "position", _finite(self.position, "position"))


@dataclass(frozen=True)
class Support:
    position: float
    kind: SupportKind = SupportKind.PINNED

    def __post_init__(self):
        object.__setattr__(self, "position", _finite(self.position, "position"))
        object.__setattr__(self, "kind", SupportKind(self.kind))


@dataclass(frozen=True)
class BeamInput:
    """
    One snapshot of everything the engine needs.

    Entries that do not fit the span are handled here, once:
    point loads, point moments and interior supports outside [0, span] are
    dropped; distributed loads are clamped to [0, span] and dropped if
    nothing is left of them.
    """
    span: float
    left_support: SupportKind = SupportKind.PINNED
    right_support: SupportKind = SupportKind.ROLLER
    point_loads: Tuple[PointLoad, ...] = ()
    distributed_loads: Tuple[DistributedLoad, ...] = ()
    point_moments: Tuple[PointMoment, ...] = ()
    interior_supports: Tuple[Support, ...] = ()
    section: SectionProperties = field(default_factory=SectionProperties)

    def __post_init__(self):
        try:
            span = float(self.span)
        except (TypeError, ValueError):
            raise InvalidSpanError(f"Span must be a positive number, got {self.span!r}")
        if not math.isfinite(span) or span <= 0.0:
            raise InvalidSpanError(f"Span must be a positive number, got {self.span!r}")
        object.__setattr__(self, "span", span)
        object.__setattr__(self, "left_support", SupportKind(self.left_support))
        object.__setattr__(self, "right_support", SupportKind(self.right_support))

        def inside(items, what):
            kept = []
            for item in items:
                if 0.0 <= item.position <= span:
                    kept.append(item)
                else:
                    logger.debug("Dropping %s outside span: %r", what, item)
            return tuple(kept)

        object.__setattr__(self, "point_loads", inside(self.point_loads, "point load"))
        object.__setattr__(self, "point_moments", inside(self.point_moments, "point moment"))
        object.__setattr__(self, "interior_supports", inside(self.interior_supports, "support"))

        udls = []
        for udl in self.distributed_loads:
            a = min(max(udl.start, 0.0), span)
            b = min(max(udl.end, 0.0), span)
            if b <= a:
                logger.debug("Dropping distributed load with no length on span: %r", udl)
                continue
            if (a, b) != (udl.start, udl.end):
                udl = DistributedLoad(a, b, udl.intensity)
            udls.append(udl)
        object.__setattr__(self, "distributed_loads", tuple(udls))


@dataclass(frozen=True)
class Reaction:
    """Support reaction at one constrained degree of freedom."""
    position: float
    kind: ReactionKind
    value: float
    dof: int = -1       # global DOF index, -1 for virtual reactions


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class BeamResult:
    """
    Output bundle of one analysis run.

    x, V, M, v are parallel arrays (read-only). v is the deflection for
    EI = 1; divide by the physical E·I for real units (see section.py).
    """
    x: np.ndarray
    V: np.ndarray
    M: np.ndarray
    v: np.ndarray
    reactions: Tuple[Reaction, ...]
    path: str = "fem"   # "fem" or "free"

    def __post_init__(self):
        for name in ("x", "V", "M", "v"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))
        n = len(self.x)
        if not (len(self.V) == len(self.M) == len(self.v) == n):
            raise ValueError("x, V, M and v must have the same length")
        object.__setattr__(self, "reactions", tuple(self.reactions))

    @property
    def force_reactions(self) -> Tuple[Reaction, ...]:
        return tuple(r for r in self.reactions if r.kind == ReactionKind.FORCE)

    @property
    def moment_reactions(self) -> Tuple[Reaction, ...]:
        return tuple(r for r in self.reactions if r.kind == ReactionKind.MOMENT)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({"x": self.x, "V": self.V, "M": self.M, "v": self.v})
