# mini_beam/inputs.py
"""
Loose row input -> BeamInput.

Rows come from forms, JSON or CSV, so every field may be a string, a
number, empty or missing. Each row is either a dict keyed by field name or
a tuple/list in field order:

    point load      (magnitude, position)
    distributed     (start, end, intensity)
    point moment    (magnitude, position)
    support         (position, kind)

Policy: a row with a non-numeric field, a position outside [0, span] or an
unknown support kind is dropped and the rest of the input is kept.
Distributed loads are clamped to the span instead (see BeamInput). Only a
bad span stops everything, with InvalidSpanError.
"""

import logging
import math
from typing import Any, Iterable, List, Mapping, Sequence

from .model import (
    BeamInput,
    DistributedLoad,
    InvalidSpanError,
    PointLoad,
    PointMoment,
    Support,
    SupportKind,
)
from .section import SectionProperties

logger = logging.getLogger(__name__)


def _fields(row: Any, names: Sequence[str]) -> List[Any]:
    if isinstance(row, Mapping):
        return [row.get(name) for name in names]
    if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
        raise TypeError(f"expected a mapping or a sequence of fields, got {row!r}")
    values = list(row)
    if len(values) < len(names):
        raise ValueError(f"expected {len(names)} fields, got {len(values)}")
    return values[:len(names)]


def _number(value) -> float:
    if isinstance(value, str):
        value = value.strip()
    value = float(value)
    if not math.isfinite(value):
        raise ValueError("not a finite number")
    return value


def parse_span(value) -> float:
    try:
        span = _number(value)
    except (TypeError, ValueError):
        raise InvalidSpanError(f"Please enter a valid beam length, got {value!r}")
    if span <= 0.0:
        raise InvalidSpanError(f"Please enter a valid beam length, got {value!r}")
    return span


def _parse_rows(rows: Iterable[Any], names, build, span: float, what: str) -> list:
    parsed = []
    for row in rows or ():
        try:
            item = build(*_fields(row, names))
        except (TypeError, ValueError) as e:
            logger.debug("Dropping %s row %r: %s", what, row, e)
            continue
        position = getattr(item, "position", None)
        if position is not None and not (0.0 <= position <= span):
            logger.debug("Dropping %s row %r: position outside [0, %g]", what, row, span)
            continue
        parsed.append(item)
    return parsed


def parse_point_loads(rows, span: float) -> List[PointLoad]:
    return _parse_rows(
        rows, ("magnitude", "position"),
        lambda m, x: PointLoad(_number(m), _number(x)),
        span, "point load",
    )


def parse_point_moments(rows, span: float) -> List[PointMoment]:
    return _parse_rows(
        rows, ("magnitude", "position"),
        lambda m, x: PointMoment(_number(m), _number(x)),
        span, "point moment",
    )


def parse_distributed_loads(rows, span: float) -> List[DistributedLoad]:
    return _parse_rows(
        rows, ("start", "end", "intensity"),
        lambda a, b, q: DistributedLoad(_number(a), _number(b), _number(q)),
        span, "distributed load",
    )


def parse_supports(rows, span: float) -> List[Support]:
    def build(x, kind):
        kind = str(kind).strip().lower() if kind is not None else SupportKind.PINNED.value
        return Support(_number(x), SupportKind(kind))

    return _parse_rows(rows, ("position", "kind"), build, span, "support")


def parse_beam_input(raw: Mapping[str, Any]) -> BeamInput:
    """
    Build a BeamInput from a loosely typed mapping.

    Recognised keys: span, left_support, right_support, point_loads,
    distributed_loads, point_moments, interior_supports, E, I, h.

    Raises:
        InvalidSpanError: If span is missing, non-numeric or not positive
        ValueError: If an end support kind is unknown
    """
    span = parse_span(raw.get("span"))

    left = SupportKind(str(raw.get("left_support") or "pinned").strip().lower())
    right = SupportKind(str(raw.get("right_support") or "roller").strip().lower())

    return BeamInput(
        span=span,
        left_support=left,
        right_support=right,
        point_loads=tuple(parse_point_loads(raw.get("point_loads"), span)),
        distributed_loads=tuple(parse_distributed_loads(raw.get("distributed_loads"), span)),
        point_moments=tuple(parse_point_moments(raw.get("point_moments"), span)),
        interior_supports=tuple(parse_supports(raw.get("interior_supports"), span)),
        section=SectionProperties(raw.get("E"), raw.get("I"), raw.get("h")),
    )
