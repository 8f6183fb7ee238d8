from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


@runtime_checkable
class HasXY(Protocol):
    """Anything point-like: a Float2, a Float2Model, or any object with x and y."""

    x: float
    y: float


class Float2Model(BaseModel):
    # Strict: ints and floats pass, strings and bools do not.
    model_config = ConfigDict(strict=True)

    x: float
    y: float
