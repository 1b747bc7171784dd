"""Piecewise-linear mappings from brush inputs to a setting value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

MAX_POINTS = 8


@dataclass
class _ControlPoints:
    xs: List[float] = field(default_factory=lambda: [0.0] * MAX_POINTS)
    ys: List[float] = field(default_factory=lambda: [0.0] * MAX_POINTS)
    n: int = 0


class Mapping:
    """A base value plus one optional curve per input, all summed together.

    Each curve is a set of up to eight control points; the curve value is
    found by linear interpolation (and extrapolation beyond the ends).
    """

    def __init__(self, inputs: int) -> None:
        if inputs < 0:
            raise ValueError(f"invalid number of inputs: {inputs}")
        self.base_value: float = 0.0
        self._inputs = inputs
        self._points = [_ControlPoints() for _ in range(inputs)]
        self._inputs_used = 0

    @property
    def inputs(self) -> int:
        """Number of inputs this mapping accepts."""
        return self._inputs

    @property
    def inputs_used(self) -> int:
        """Number of inputs that currently have a curve."""
        return self._inputs_used

    def _check_input(self, input: int) -> _ControlPoints:
        if not 0 <= input < self._inputs:
            raise IndexError(f"input out of range: {input}")
        return self._points[input]

    def set_n(self, input: int, n: int) -> None:
        """Set how many control points the curve for ``input`` uses (0 disables it)."""
        points = self._check_input(input)
        if not 0 <= n <= MAX_POINTS:
            raise ValueError(f"number of points must be between 0 and {MAX_POINTS}: {n}")
        if n == 1:
            raise ValueError("a linear mapping needs at least two points")
        if n != 0 and points.n == 0:
            self._inputs_used += 1
        if n == 0 and points.n != 0:
            self._inputs_used -= 1
        points.n = n

    def get_n(self, input: int) -> int:
        """Return how many control points the curve for ``input`` uses."""
        return self._check_input(input).n

    def _check_index(self, points: _ControlPoints, index: int) -> None:
        if not 0 <= index < MAX_POINTS or index >= points.n:
            raise IndexError(f"point index out of range: {index}")

    def set_point(self, input: int, index: int, x: float, y: float) -> None:
        """Set a control point; x values must not decrease along the curve."""
        points = self._check_input(input)
        self._check_index(points, index)
        if index > 0 and x < points.xs[index - 1]:
            raise ValueError("control point x values must not decrease")
        points.xs[index] = x
        points.ys[index] = y

    def get_point(self, input: int, index: int) -> Tuple[float, float]:
        """Return the (x, y) control point at ``index`` of the curve for ``input``."""
        points = self._check_input(input)
        self._check_index(points, index)
        return points.xs[index], points.ys[index]

    def is_constant(self) -> bool:
        """True when no input has a curve, so the result is the base value."""
        return self._inputs_used == 0

    def calculate(self, data: Sequence[float]) -> float:
        """Evaluate the mapping for one value per input."""
        result = self.base_value
        if self._inputs_used == 0:
            return result

        for points, x in zip(self._points, data):
            if not points.n:
                continue
            x0, y0 = points.xs[0], points.ys[0]
            x1, y1 = points.xs[1], points.ys[1]
            for i in range(2, points.n):
                if not x > x1:
                    break
                x0, y0 = x1, y1
                x1, y1 = points.xs[i], points.ys[i]

            if x0 == x1:
                y = y0
            else:
                y = (y1 * (x - x0) + y0 * (x1 - x)) / (x1 - x0)
            result += y
        return result

    def calculate_single_input(self, value: float) -> float:
        """Evaluate a mapping that has exactly one input."""
        if self._inputs != 1:
            raise ValueError("mapping does not have exactly one input")
        return self.calculate((value,))