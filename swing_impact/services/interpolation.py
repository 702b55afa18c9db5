from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class PiecewiseLinearCurve:
    """
    Piecewise-linear curve over sorted (x, value) breakpoints.

    Inputs outside the breakpoint range take the value of the nearest end point.
    """
    breakpoints: Tuple[Tuple[float, float], ...]

    def __post_init__(self):
        if len(self.breakpoints) < 2:
            raise ValueError("A curve needs at least two breakpoints")
        xs = [x for x, _ in self.breakpoints]
        if any(later <= earlier for earlier, later in zip(xs, xs[1:])):
            raise ValueError("Breakpoints must be sorted by strictly increasing x")

    @classmethod
    def from_points(cls, points: Sequence[Tuple[float, float]]) -> "PiecewiseLinearCurve":
        return cls(tuple((float(x), float(y)) for x, y in points))

    @property
    def xs(self) -> np.ndarray:
        return np.array([x for x, _ in self.breakpoints])

    @property
    def values(self) -> np.ndarray:
        return np.array([y for _, y in self.breakpoints])

    def __call__(self, x: float) -> float:
        return float(np.interp(x, self.xs, self.values))
