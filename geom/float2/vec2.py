from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
import logging
import math
import numbers
from typing import Iterator, List

import numpy as np

from geom.float2.errors import DivisionByZero, InvalidState
from geom.float2.schema import HasXY

logger = logging.getLogger(__name__)

EPSILON = float(np.finfo(np.float64).eps)
INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)
SHORT_STRING_DECIMALS = 2


def _ieee_div(a: float, b: float) -> float:
    # Plain float division raises on a zero divisor; numpy yields inf/nan.
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(a) / np.float64(b))


def _is_int32(v: float) -> bool:
    return math.isfinite(v) and INT32_MIN <= v <= INT32_MAX and v == math.trunc(v)


def _fixed(v: float, digits: int) -> str:
    # Ties round away from zero on the exact binary value (0.125 -> 0.13).
    if not math.isfinite(v):
        return f"{v:.{digits}f}"
    with localcontext() as ctx:
        ctx.prec = 400
        q = Decimal(abs(v)).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    sign = "-" if v < 0 else ""
    return f"{sign}{q:f}"


def dot(a: HasXY, b: HasXY) -> float:
    return (a.x * b.x) + (a.y * b.y)


def dot_flat(ax: float, ay: float, bx: float, by: float) -> float:
    return (ax * bx) + (ay * by)


def distance(a: HasXY, b: HasXY) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt((dx * dx) + (dy * dy))


def distance_squared(a: HasXY, b: HasXY) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return (dx * dx) + (dy * dy)


def mag_squared_flat(x: float, y: float) -> float:
    return (x * x) + (y * y)


def mag_flat(x: float, y: float) -> float:
    return math.sqrt((x * x) + (y * y))


def mag(p: HasXY) -> float:
    return math.sqrt((p.x * p.x) + (p.y * p.y))


@dataclass(eq=False)
class Float2:
    """Mutable 2D vector.

    Mutators change the vector in place and return it, so calls chain:
    ``Float2(1, 2).add(other).scale(0.5)``. The operators (``+``, ``-``,
    ``*``, unary ``-``) return new vectors instead.

    Components are never validated; use ``assert_ok`` and friends where
    finite values are required.
    """

    x: float
    y: float

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_string(self) -> str:
        return f"{self.x},{self.y}"

    __str__ = to_string

    def to_short_string(self) -> str:
        d = SHORT_STRING_DECIMALS
        return f"{_fixed(self.x, d)},{_fixed(self.y, d)}"

    def to_array(self) -> List[float]:
        return [self.x, self.y]

    def to_json(self) -> dict:
        return {"x": self.x, "y": self.y}

    def copy(self) -> "Float2":
        return Float2(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # =========================================================================
    # Pure operators
    # =========================================================================

    def __add__(self, o: HasXY) -> "Float2":
        if not isinstance(o, HasXY):
            return NotImplemented
        return Float2(self.x + o.x, self.y + o.y)

    def __sub__(self, o: HasXY) -> "Float2":
        if not isinstance(o, HasXY):
            return NotImplemented
        return Float2(self.x - o.x, self.y - o.y)

    def __mul__(self, s: float) -> "Float2":
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return Float2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __neg__(self) -> "Float2":
        return Float2(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HasXY):
            return NotImplemented
        return self.equals(other)

    # =========================================================================
    # Mutators
    # =========================================================================

    def set(self, v: HasXY) -> "Float2":
        self.x = v.x
        self.y = v.y
        return self

    def set_flat(self, x: float, y: float) -> "Float2":
        self.x = x
        self.y = y
        return self

    def set_x(self, v: float) -> "Float2":
        self.x = v
        return self

    def set_y(self, v: float) -> "Float2":
        self.y = v
        return self

    def add(self, v: HasXY) -> "Float2":
        self.x += v.x
        self.y += v.y
        return self

    def add_flat(self, x: float, y: float) -> "Float2":
        self.x += x
        self.y += y
        return self

    def add_x(self, v: float) -> "Float2":
        self.x += v
        return self

    def add_y(self, v: float) -> "Float2":
        self.y += v
        return self

    def add_scaled(self, s: float, v: HasXY) -> "Float2":
        """self += s * v, with s a scalar."""
        self.x += s * v.x
        self.y += s * v.y
        return self

    def add_multiplied(self, s: HasXY, v: HasXY) -> "Float2":
        """self += s * v component-wise; s is a vector, not a scalar."""
        self.x += s.x * v.x
        self.y += s.y * v.y
        return self

    def sub(self, v: HasXY) -> "Float2":
        self.x -= v.x
        self.y -= v.y
        return self

    def scale(self, s: float) -> "Float2":
        self.x *= s
        self.y *= s
        return self

    def multiply(self, v: HasXY) -> "Float2":
        self.x *= v.x
        self.y *= v.y
        return self

    def multiply_flat(self, x: float, y: float) -> "Float2":
        self.x *= x
        self.y *= y
        return self

    def divide(self, v: HasXY) -> "Float2":
        """Component-wise division. A zero divisor gives inf or nan, not an error."""
        self.x = _ieee_div(self.x, v.x)
        self.y = _ieee_div(self.y, v.y)
        return self

    def negate(self) -> "Float2":
        self.x = -self.x
        self.y = -self.y
        return self

    def min(self, v: HasXY) -> "Float2":
        self.x = float(np.minimum(self.x, v.x))
        self.y = float(np.minimum(self.y, v.y))
        return self

    def max(self, v: HasXY) -> "Float2":
        self.x = float(np.maximum(self.x, v.x))
        self.y = float(np.maximum(self.y, v.y))
        return self

    def floor(self) -> "Float2":
        self.x = float(np.floor(self.x))
        self.y = float(np.floor(self.y))
        return self

    def ceil(self) -> "Float2":
        self.x = float(np.ceil(self.x))
        self.y = float(np.ceil(self.y))
        return self

    def abs(self) -> "Float2":
        self.x = abs(self.x)
        self.y = abs(self.y)
        return self

    def normalize(self) -> "Float2":
        # No zero-length guard: a zero vector becomes (nan, nan).
        s = _ieee_div(1.0, self.mag())
        self.x *= s
        self.y *= s
        return self

    def invert(self) -> "Float2":
        if abs(self.x) < EPSILON:
            logger.debug("Refusing to invert %s, x is zero", self)
            raise DivisionByZero(self, reason="cannot invert, x is zero")
        if abs(self.y) < EPSILON:
            logger.debug("Refusing to invert %s, y is zero", self)
            raise DivisionByZero(self, reason="cannot invert, y is zero")
        self.x = 1 / self.x
        self.y = 1 / self.y
        return self

    # =========================================================================
    # Queries
    # =========================================================================

    def is_zero(self) -> bool:
        return abs(self.x) < EPSILON and abs(self.y) < EPSILON

    def equals(self, v: HasXY) -> bool:
        return abs(v.x - self.x) < EPSILON and abs(v.y - self.y) < EPSILON

    def is_ok(self) -> bool:
        return not math.isnan(self.x) and not math.isnan(self.y)

    def is_ints(self) -> bool:
        """True if both components are whole numbers that fit in an int32."""
        return _is_int32(self.x) and _is_int32(self.y)

    def is_unit(self) -> bool:
        # Note the sense: true when the length is NOT within epsilon of 1.
        return abs(1 - self.mag()) > EPSILON

    def is_positive(self) -> bool:
        return self.x >= 0 and self.y >= 0

    def is_less_than(self, p: HasXY) -> bool:
        return self.x < p.x and self.y < p.y

    def is_greater_than(self, p: HasXY) -> bool:
        return self.x > p.x and self.y > p.y

    def dot(self, v: HasXY) -> float:
        return dot(self, v)

    def dot_flat(self, vx: float, vy: float) -> float:
        return dot_flat(self.x, self.y, vx, vy)

    def mag(self) -> float:
        return mag(self)

    def mag_squared(self) -> float:
        return (self.x * self.x) + (self.y * self.y)

    def distance(self, p: HasXY) -> float:
        return distance(self, p)

    def distance_squared(self, p: HasXY) -> float:
        return distance_squared(self, p)

    def distance_flat(self, x: float, y: float) -> float:
        dx = self.x - x
        dy = self.y - y
        return math.sqrt((dx * dx) + (dy * dy))

    def distance_squared_flat(self, x: float, y: float) -> float:
        dx = self.x - x
        dy = self.y - y
        return (dx * dx) + (dy * dy)

    def area(self) -> float:
        return self.x * self.y

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_ok(self) -> "Float2":
        if not self.is_ok():
            logger.debug("Float2 check failed: %s contains nan", self)
            raise InvalidState(self, reason="not ok")
        return self

    def assert_positive(self) -> "Float2":
        if not self.is_positive():
            logger.debug("Float2 check failed: %s is not positive", self)
            raise InvalidState(self, reason="not positive")
        return self

    def assert_ints(self) -> "Float2":
        if not self.is_ints():
            logger.debug("Float2 check failed: %s is not ints", self)
            raise InvalidState(self, reason="not ints")
        return self

    def assert_unit(self) -> "Float2":
        if not self.is_unit():
            logger.debug("Float2 check failed: %s is_unit() is false", self)
            raise InvalidState(self, reason="not a unit vector")
        return self


T = Float2
