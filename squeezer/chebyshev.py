"""Single two-pole stage of a recursive Chebyshev filter."""

from __future__ import annotations

import math
import sys
from typing import NamedTuple

_ANTI_DENORMAL = sys.float_info.min


class Coefficients(NamedTuple):
    """Recursion coefficients of one filter stage."""

    a0: float
    a1: float
    a2: float
    b1: float
    b2: float


def _stage_coefficients(
    relative_cutoff: float,
    high_pass: bool,
    percent_ripple: float,
    poles: int,
    pole_pair: int,
) -> Coefficients:
    angle = math.pi / (poles * 2.0) + (pole_pair - 1.0) * math.pi / poles
    rp = -math.cos(angle)
    ip = math.sin(angle)

    # warp from a circle to an ellipse
    if percent_ripple > 0:
        es = math.sqrt((100.0 / (100.0 - percent_ripple)) ** 2 - 1.0)
        vx = (1.0 / poles) * math.log(1.0 / es + math.sqrt(1.0 / es**2 + 1.0))
        kx = (1.0 / poles) * math.log(1.0 / es + math.sqrt(1.0 / es**2 - 1.0))
        kx = (math.exp(kx) + math.exp(-kx)) / 2.0
        rp = rp * ((math.exp(vx) - math.exp(-vx)) / 2.0) / kx
        ip = ip * ((math.exp(vx) + math.exp(-vx)) / 2.0) / kx

    # s-domain to z-domain conversion
    t = 2.0 * math.tan(0.5)
    w = 2.0 * math.pi * relative_cutoff
    m = rp**2 + ip**2
    d = 4.0 - 4.0 * rp * t + m * t**2
    x0 = t**2 / d
    x1 = 2.0 * t**2 / d
    x2 = t**2 / d
    y1 = (8.0 - 2.0 * m * t**2) / d
    y2 = (-4.0 - 4.0 * rp * t - m * t**2) / d

    # low-pass to low-pass, or low-pass to high-pass transform
    if high_pass:
        k = -math.cos((w + 1.0) / 2.0) / math.cos((w - 1.0) / 2.0)
    else:
        k = math.sin((1.0 - w) / 2.0) / math.sin((1.0 + w) / 2.0)

    d = 1.0 + y1 * k - y2 * k**2
    a0 = (x0 - x1 * k + x2 * k**2) / d
    a1 = (-2.0 * x0 * k + x1 + x1 * k**2 - 2.0 * x2 * k) / d
    a2 = (x0 * k**2 - x1 * k + x2) / d
    b1 = (2.0 * k + y1 + y1 * k**2 - 2.0 * y2 * k) / d
    b2 = (-(k**2) - y1 * k + y2) / d

    if high_pass:
        a1 = -a1
        b1 = -b1

    return Coefficients(a0, a1, a2, b1, b2)


class ChebyshevStage:
    """One pole pair of a Chebyshev low-pass or high-pass filter.

    ``relative_cutoff`` lies between 0.0 and 0.5, ``percent_ripple``
    between 0 and 29, ``poles`` is even (2 to 20) and ``pole_pair``
    runs from 1 to ``poles // 2``.
    """

    def __init__(
        self,
        relative_cutoff: float,
        high_pass: bool,
        percent_ripple: float,
        poles: int,
        pole_pair: int,
    ) -> None:
        self.coefficients = Coefficients(0.0, 0.0, 0.0, 0.0, 0.0)
        self.reset()
        self.change_parameters(
            relative_cutoff, high_pass, percent_ripple, poles, pole_pair
        )

    def change_parameters(
        self,
        relative_cutoff: float,
        high_pass: bool,
        percent_ripple: float,
        poles: int,
        pole_pair: int,
    ) -> None:
        """Recalculate the stage's coefficients; the filter state is kept."""
        self.coefficients = _stage_coefficients(
            relative_cutoff, high_pass, percent_ripple, poles, pole_pair
        )

    def filter_sample(self, value: float) -> float:
        """Filter one sample and return the output."""
        c = self.coefficients
        output = (
            c.a0 * value
            + c.a1 * self._input_1
            + c.a2 * self._input_2
            + c.b1 * self._output_1
            + c.b2 * self._output_2
        )
        # keep the recursion away from denormal numbers
        output += _ANTI_DENORMAL

        # both delay taps are refreshed from the newest values
        self._input_1 = self._input_2 = value
        self._output_1 = self._output_2 = output
        return output

    def reset(self) -> None:
        """Clear the filter's history."""
        self._input_1 = 0.0
        self._input_2 = 0.0
        self._output_1 = 0.0
        self._output_2 = 0.0