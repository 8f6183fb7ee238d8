"""Constructors and converters for Float2.

Records may be any object with ``x`` and ``y`` attributes or a mapping with
``"x"`` and ``"y"`` keys (decoded JSON). Both fields must be numbers.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence, Union

from pydantic import ValidationError

from geom.float2.errors import InvalidArgument
from geom.float2.schema import Float2Model, HasXY
from geom.float2.vec2 import Float2

logger = logging.getLogger(__name__)

Record = Union[HasXY, Mapping[str, Any]]


def _fields(record: Any) -> dict:
    if isinstance(record, Mapping):
        return {"x": record.get("x"), "y": record.get("y")}
    return {"x": getattr(record, "x", None), "y": getattr(record, "y", None)}


def vec(x: float, y: float) -> Float2:
    return Float2(x, y)


def zero() -> Float2:
    return Float2(0, 0)


def one() -> Float2:
    return Float2(1, 1)


def from_array(arr: Sequence[float]) -> Float2:
    """Build from the first two elements of `arr`; the rest are ignored."""
    if len(arr) < 2:
        logger.debug("from_array got %d element(s)", len(arr))
        raise InvalidArgument(list(arr), reason="arr must have at least 2 elements")
    return Float2(arr[0], arr[1])


def from_json(record: Record) -> Float2:
    fields = _fields(record)
    try:
        m = Float2Model.model_validate(fields)
    except ValidationError as e:
        logger.debug("Rejected Float2 record %r: %s", fields, e)
        raise InvalidArgument(fields, reason="not a number") from e
    return Float2(m.x, m.y)


def as_float2(record: Record) -> Float2:
    return from_json(record)


def is_float2(record: Any) -> bool:
    try:
        Float2Model.model_validate(_fields(record))
    except ValidationError:
        return False
    return True
