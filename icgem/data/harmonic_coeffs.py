"""Containers for spherical harmonic coefficients of gravity fields

Description:
------------

:class:`HarmonicCoeffs` stores one set of coefficients `C[l, m]` and `S[l, m]` as numpy arrays, for degrees
`0 <= l <= max_degree` and orders `0 <= m <= max_order`. :class:`GravityField` collects the parts of a gravity field
model: the static part, the time variable part (base coefficients, trends and periodic terms) and the model constants.

Containers are sized when they are created, and are filled, never resized, by the readers in :mod:`icgem.reader`.

"""

# Standard library imports
from typing import Dict, Iterable, Optional

# External library imports
import numpy as np


class HarmonicCoeffs:
    """Spherical harmonic coefficients C and S up to a given degree and order"""

    def __init__(self, max_degree: int, max_order: Optional[int] = None) -> None:
        max_order = max_degree if max_order is None else max_order
        if max_degree < 0 or not 0 <= max_order <= max_degree:
            raise ValueError(f"Invalid degree/order {max_degree}/{max_order} for harmonic coefficients")

        self.max_degree = max_degree
        self.max_order = max_order
        self.C = np.zeros((max_degree + 1, max_order + 1))
        self.S = np.zeros((max_degree + 1, max_order + 1))

    def __repr__(self):
        return f"{type(self).__name__}(max_degree={self.max_degree}, max_order={self.max_order})"

    def fits(self, degree: int, order: int) -> bool:
        """Check whether coefficients up to the given degree and order can be stored"""
        return degree <= self.max_degree and order <= self.max_order


class GravityField:
    """The coefficients and constants of a gravity field model

    Attributes:
        static:    Coefficients of the static part of the field.
        tvg:       Base coefficients of the time variable part of the field.
        trend:     Linear drift of the time variable coefficients, per year.
        periods:   Periods (in years) of the periodic terms, in the order they are listed in the file.
        periodic:  Amplitudes of the periodic terms, `periodic[period]["acos"|"asin"]`.
        gm:        Gravitational constant of the model.
        radius:    Reference radius of the model.
        normalized: Whether the coefficients are fully normalized.
    """

    def __init__(
        self,
        degree: int,
        order: Optional[int] = None,
        degree_tv: int = 0,
        periods: Iterable[float] = (),
        gm: float = 0.0,
        radius: float = 0.0,
        normalized: bool = True,
    ) -> None:
        order = degree if order is None else order
        order_tv = min(order, degree_tv)

        self.static = HarmonicCoeffs(degree, order)
        self.tvg = HarmonicCoeffs(degree_tv, order_tv)
        self.trend = HarmonicCoeffs(degree_tv, order_tv)
        self.periods = list(periods)
        self.periodic: Dict[float, Dict[str, HarmonicCoeffs]] = {
            p: dict(acos=HarmonicCoeffs(degree_tv, order_tv), asin=HarmonicCoeffs(degree_tv, order_tv))
            for p in self.periods
        }
        self.gm = gm
        self.radius = radius
        self.normalized = normalized

    def __repr__(self):
        return (
            f"{type(self).__name__}(degree={self.static.max_degree}, order={self.static.max_order}, "
            f"degree_tv={self.tvg.max_degree}, periods={self.periods})"
        )
