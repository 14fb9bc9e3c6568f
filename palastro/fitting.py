"""Applying linear [x,y] models and measuring their residuals."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

__all__ = ["FitResiduals", "xy2xy", "pxy"]

Point = tuple[float, float]


@dataclass(frozen=True)
class FitResiduals:
    """Predicted coordinates and RMS residuals of a linear model."""

    predicted: list[Point] = field(default_factory=list)
    xrms: float = 0.0
    yrms: float = 0.0
    rrms: float = 0.0


def xy2xy(x1: float, y1: float, coeffs: Sequence[float]) -> Point:
    """Transform one [x,y] pair with the linear model ``coeffs``.

    With ``coeffs = (A, B, C, D, E, F)`` the result is
    ``(A + B*x1 + C*y1, D + E*x1 + F*y1)``.
    """
    a, b, c, d, e, f = coeffs
    return a + b * x1 + c * y1, d + e * x1 + f * y1


def pxy(
    xye: Sequence[Sequence[float]],
    xym: Sequence[Sequence[float]],
    coeffs: Sequence[float],
) -> FitResiduals:
    """Predict coordinates from measured ones and compute RMS residuals.

    Each measured point in ``xym`` is transformed by the model ``coeffs``;
    the residuals are taken against the matching expected point in ``xye``.
    With no samples the predictions are empty and all RMS values are zero.
    """
    if len(xye) != len(xym):
        raise ValueError("expected and measured coordinate lists differ in length")

    predicted: list[Point] = []
    sdx2 = 0.0
    sdy2 = 0.0
    for (xe, ye), (xm, ym) in zip(xye, xym):
        xp, yp = xy2xy(xm, ym, coeffs)
        predicted.append((xp, yp))
        dx = xe - xp
        dy = ye - yp
        sdx2 += dx * dx
        sdy2 += dy * dy

    p = max(1.0, float(len(predicted)))
    xrms = math.sqrt(sdx2 / p)
    yrms = math.sqrt(sdy2 / p)
    rrms = math.sqrt(xrms * xrms + yrms * yrms)
    return FitResiduals(predicted=predicted, xrms=xrms, yrms=yrms, rrms=rrms)