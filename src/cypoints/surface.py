"""Point-cloud sampling of the Calabi-Yau surface slice.

The surface is the real three dimensional slice of the complex curve

    z1**n - z2**n = 1

parameterized by ``z1 = phase1 * cosh(a + ib)**(2/n)`` and
``z2 = phase2 * sinh(a + ib)**(2/n)``. Each branch index pair ``(k1, k2)``
selects one of the ``n**2`` root sheets through the phases
``exp(2*pi*i*k/n)``. The third output axis mixes the two imaginary parts with
the angle ``alpha``.

Points are emitted in a fixed order that consumers rely on to rebuild the
grid topology from a flat buffer:

    k1 ascending, k2 ascending, grid index i ascending, grid index j ascending

Each branch is sampled on a ``(subdivisions + 1) x (subdivisions + 1)`` grid
with ``a`` in ``[0, pi/2]`` and ``b`` in ``[-pi/2, pi/2]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import chain
from math import cos, inf, pi, sin
from typing import Iterable, Iterator, List, Tuple

from cypoints.complex_value import Complex
from cypoints.kernel import u1, u3

__all__ = [
    'Point3',
    'BranchIndex',
    'BranchConstants',
    'cy_coordinate',
    'grid_parameters',
    'branch_indices',
    'branch_points',
    'generate_surface',
    'z_range',
    'flatten',
    'expected_point_count',
]

logger = logging.getLogger(__name__)

Point3 = Tuple[float, float, float]
BranchIndex = Tuple[int, int]

_PI_HALF = pi * 0.5


@dataclass(frozen=True)
class BranchConstants:
    """Per-branch values shared by every sample of one ``(k1, k2)`` sheet."""

    n_inv: float
    phase1: Complex
    phase2: Complex
    alpha_sin: float
    alpha_cos: float

    @classmethod
    def for_branch(cls, n: int, k1: int, k2: int, alpha: float) -> BranchConstants:
        if n <= 0:
            raise ValueError("surface order n must be positive")
        return cls(
            n_inv=2.0 / n,
            phase1=Complex.exp(2.0 * pi * k1 / n),
            phase2=Complex.exp(2.0 * pi * k2 / n),
            alpha_sin=sin(alpha),
            alpha_cos=cos(alpha),
        )


def cy_coordinate(a: float, b: float, constants: BranchConstants) -> Point3:
    """Map the grid parameter ``(a, b)`` to a point on one branch.

    Parameters
    ----------
    a, b : float
        Grid parameters, ``a`` in ``[0, pi/2]`` and ``b`` in ``[-pi/2, pi/2]``.
    constants : BranchConstants
        Phases, exponent and mixing angle of the branch.

    Returns
    -------
    tuple
        ``(Re z1, Re z2, Im z1 * cos(alpha) + Im z2 * sin(alpha))``
    """
    u1_val = u1(a, b).pow(constants.n_inv)
    u3_val = u3(a, b).pow(constants.n_inv)

    z1 = constants.phase1.mul(u1_val)
    z2 = constants.phase2.mul(u3_val)

    return (
        z1.re,
        z2.re,
        z1.im * constants.alpha_cos + z2.im * constants.alpha_sin,
    )


def grid_parameters(subdivisions: int) -> Iterator[Tuple[float, float]]:
    """Yield the ``(a, b)`` grid of one branch, ``a`` outer and ``b`` inner.

    With ``subdivisions == 0`` the grid collapses to the single sample
    ``(0, -pi/2)``.
    """
    if subdivisions < 0:
        raise ValueError("subdivisions must be non-negative")
    step = 1.0 / subdivisions if subdivisions else 0.0
    for i in range(subdivisions + 1):
        a = i * step * _PI_HALF
        for j in range(subdivisions + 1):
            b = (j * step - 0.5) * pi
            yield a, b


def branch_indices(n: int) -> Iterator[BranchIndex]:
    """Yield every ``(k1, k2)`` pair with ``0 <= k < n`` in emission order."""
    for k1 in range(n):
        for k2 in range(n):
            yield k1, k2


def branch_points(n: int, branch: BranchIndex, alpha: float,
                  subdivisions: int) -> List[Point3]:
    """Sample one branch sheet on a uniform grid.

    Returns ``(subdivisions + 1)**2`` points.
    """
    k1, k2 = branch
    constants = BranchConstants.for_branch(n, k1, k2, alpha)
    return [cy_coordinate(a, b, constants) for a, b in grid_parameters(subdivisions)]


def generate_surface(n: int, alpha: float, subdivisions: int) -> List[Point3]:
    """Sample every branch of the order ``n`` surface.

    Parameters
    ----------
    n : int
        Surface order, must be positive.
    alpha : float
        Mixing angle of the two imaginary axes into z (radians).
    subdivisions : int
        Grid subdivisions per parameter axis.

    Returns
    -------
    list
        ``n**2 * (subdivisions + 1)**2`` points in emission order.
    """
    if n <= 0:
        raise ValueError("surface order n must be positive")
    logger.debug("sampling %d branches at %d subdivisions (alpha=%r)",
                 n * n, subdivisions, alpha)
    sheets = (branch_points(n, branch, alpha, subdivisions)
              for branch in branch_indices(n))
    return list(chain.from_iterable(sheets))


def z_range(points: Iterable[Point3]) -> Tuple[float, float]:
    """Return ``(z_min, z_max)`` in one pass.

    An empty input returns ``(inf, -inf)``.
    """
    z_min = inf
    z_max = -inf
    for _, _, z in points:
        if z < z_min:
            z_min = z
        if z > z_max:
            z_max = z
    return z_min, z_max


def flatten(points: Iterable[Point3]) -> List[float]:
    """Interleave points into ``[x0, y0, z0, x1, y1, z1, ...]``."""
    return [c for pt in points for c in pt]


def expected_point_count(n: int, subdivisions: int) -> int:
    """Number of points ``generate_surface`` returns for these arguments."""
    return n * n * (subdivisions + 1) ** 2
