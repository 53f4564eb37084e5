r"""
Functions evaluating the evaporative flux of a pair of identical droplets.

The two droplets of radius :math:`a` are centered at :math:`(\mp b/2, 0)`. On each
droplet, the flux follows the singular profile

.. math::
    J(\rho) = \frac{2}{\pi\sqrt{a^2 - \rho^2}}
        \left(1 - \frac{F\sqrt{b^2 - a^2}}{2\pi d}\right)

where :math:`\rho` is the distance to the center of the droplet, :math:`d` is the
distance to the center of the other droplet, and
:math:`F = 4a / (1 + \frac{2}{\pi}\arcsin(a/b))` is the total flux of the shielded
pair. Points outside both droplets are marked by `nan`.

All numerical functions are compiled with :mod:`numba` and never raise on invalid
geometry. Instead, domain violations are propagated as IEEE-754 special values.

.. autosummary::
   :nosignatures:

   evaluate_flux
   shielding_constant
   fill_flux_pair
   get_flux_pair
   get_grid_coordinates
   check_parameters

.. codeauthor:: David Zwicker <david.zwicker@ds.mpg.de>
"""

from __future__ import annotations

import logging
import math

import numba as nb
import numpy as np

from .tools.typing import FloatArray

# `fastmath` would allow the compiler to assume the absence of nan and inf, which
# are the essential output of these functions
jit = nb.jit(nopython=True, nogil=True, fastmath=False, error_model="numpy")

π = float(np.pi)


@jit
def shielding_constant(a: float, b: float) -> float:
    """Return the total flux of a pair of identical droplets

    Args:
        a (float): Radius of the droplets
        b (float): Distance between the droplet centers

    Returns:
        float: The constant `F`, which is `nan` if `a > b`
    """
    return 4.0 * a / (1.0 + (2.0 / π) * math.asin(a / b))


@jit
def evaluate_flux(
    x: float,
    y: float,
    a: float,
    b: float,
    center_self: float,
    center_other: float,
    F: float,
) -> float:
    """Return the flux at a point on a single droplet of the pair

    Args:
        x (float): x-coordinate of the point
        y (float): y-coordinate of the point
        a (float): Radius of the droplet
        b (float): Distance between the droplet centers
        center_self (float): x-coordinate of the center of the droplet
        center_other (float): x-coordinate of the center of the other droplet
        F (float): The shielding constant returned by :func:`shielding_constant`

    Returns:
        float: The flux, which diverges at the contact line and is `nan` for points
        outside the droplet
    """
    dx = x - center_self
    rho2 = dx * dx + y * y
    if rho2 >= a * a:
        return math.nan  # outside the footprint of this droplet

    J0 = 2.0 / (π * math.sqrt(max(0.0, a * a - rho2)))

    dxo = x - center_other
    d = math.sqrt(dxo * dxo + y * y)

    shield = (F * math.sqrt(max(0.0, b * b - a * a))) / (2.0 * π * d)

    return J0 * (1.0 - shield)


@jit
def _flux_pair_at(x: float, y: float, a: float, b: float, F: float) -> float:
    """Return the flux at a point, deciding which droplet it belongs to"""
    c1 = -0.5 * b
    c2 = +0.5 * b

    r1 = (x - c1) * (x - c1) + y * y
    r2 = (x - c2) * (x - c2) + y * y

    # points in the overlap of both droplets are attributed to the first one
    if r1 < a * a:
        return evaluate_flux(x, y, a, b, c1, c2, F)
    elif r2 < a * a:
        return evaluate_flux(x, y, a, b, c2, c1, F)
    else:
        return math.nan


@jit
def _fill_flux_pair_compiled(
    a: float,
    b: float,
    nx: int,
    ny: int,
    xmin: float,
    xmax: float,
    ymin: float,
    ymax: float,
    out: np.ndarray,
) -> None:
    """Fill the row-major array `out` with the flux on a regular grid"""
    F = shielding_constant(a, b)

    dx = (xmax - xmin) / float(nx - 1)
    dy = (ymax - ymin) / float(ny - 1)

    for j in range(ny):
        y = ymin + dy * float(j)
        for i in range(nx):
            x = xmin + dx * float(i)
            out[j * nx + i] = _flux_pair_at(x, y, a, b, F)


@jit
def _get_flux_pair_compiled(
    xs: np.ndarray, ys: np.ndarray, a: float, b: float, out: np.ndarray
) -> None:
    """Evaluate the flux at the flattened points given by `xs` and `ys`"""
    F = shielding_constant(a, b)
    for k in range(xs.size):
        out[k] = _flux_pair_at(xs[k], ys[k], a, b, F)


def check_parameters(
    a: float, b: float, nx: int | None = None, ny: int | None = None
) -> None:
    """Check whether the parameters describe a sensible droplet pair and grid

    Args:
        a (float): Radius of the droplets
        b (float): Distance between the droplet centers
        nx (int, optional): Number of support points along the x-axis
        ny (int, optional): Number of support points along the y-axis

    Raises:
        ValueError: If the radius or the separation are not positive and finite, if
        the radius is not smaller than the separation, or if the grid has fewer than
        two points along an axis
    """
    if not (math.isfinite(a) and math.isfinite(b)):
        raise ValueError(f"Droplet geometry must be finite, got a={a}, b={b}")
    if a <= 0:
        raise ValueError(f"Radius must be positive, got a={a}")
    if b <= 0:
        raise ValueError(f"Separation must be positive, got b={b}")
    if a >= b:
        raise ValueError(f"Radius must be smaller than the separation ({a} >= {b})")
    for name, value in [("nx", nx), ("ny", ny)]:
        if value is not None and value < 2:
            raise ValueError(f"Grid needs at least two points per axis, got {name}={value}")


def get_grid_coordinates(
    nx: int, ny: int, xmin: float, xmax: float, ymin: float, ymax: float
) -> tuple[np.ndarray, np.ndarray]:
    """Return the coordinates of the support points of the sampling grid

    The coordinates are calculated exactly like in :func:`fill_flux_pair`, so the
    flux at `out[j * nx + i]` belongs to the point `(xs[i], ys[j])`.

    Args:
        nx (int): Number of support points along the x-axis
        ny (int): Number of support points along the y-axis
        xmin (float): Lower bound of the x-coordinate
        xmax (float): Upper bound of the x-coordinate
        ymin (float): Lower bound of the y-coordinate
        ymax (float): Upper bound of the y-coordinate

    Returns:
        tuple: the two arrays `xs` and `ys`
    """
    if nx < 2 or ny < 2:
        raise ValueError(f"Grid needs at least two points per axis, got {nx}x{ny}")
    dx = (xmax - xmin) / float(nx - 1)
    dy = (ymax - ymin) / float(ny - 1)
    xs = xmin + dx * np.arange(nx, dtype=np.double)
    ys = ymin + dy * np.arange(ny, dtype=np.double)
    return xs, ys


def fill_flux_pair(
    a: float,
    b: float,
    nx: int,
    ny: int,
    xmin: float,
    xmax: float,
    ymin: float,
    ymax: float,
    out: np.ndarray | None = None,
    *,
    strict: bool = False,
) -> FloatArray:
    """Calculate the flux of a droplet pair on a regular grid

    The droplets have radius `a` and are centered at `(-b/2, 0)` and `(b/2, 0)`. The
    grid has `nx * ny` support points covering the rectangle
    `[xmin, xmax] x [ymin, ymax]` including its boundary. The values are stored in
    row-major order, i.e., the flux at `x = xmin + i * dx` and `y = ymin + j * dy` is
    stored at index `j * nx + i`. Points outside both droplets are set to `nan`.

    Without `strict`, invalid parameters are not rejected, but propagate as special
    floating point values. For instance, `a > b` results in `nan` everywhere.

    Args:
        a (float): Radius of the droplets
        b (float): Distance between the droplet centers
        nx (int): Number of support points along the x-axis
        ny (int): Number of support points along the y-axis
        xmin (float): Lower bound of the x-coordinate
        xmax (float): Upper bound of the x-coordinate
        ymin (float): Lower bound of the y-coordinate
        ymax (float): Upper bound of the y-coordinate
        out (:class:`~numpy.ndarray`, optional):
            One-dimensional, contiguous array of `nx * ny` doubles, which is
            overwritten with the result. A new array is created if omitted.
        strict (bool):
            Whether to raise a :class:`ValueError` for invalid parameters instead of
            returning `nan`.

    Returns:
        :class:`~numpy.ndarray`: The flux values, which is `out` if it was given
    """
    nx, ny = int(nx), int(ny)
    if strict:
        check_parameters(a, b, nx, ny)
    else:
        try:
            check_parameters(a, b, nx, ny)
        except ValueError as err:
            logger = logging.getLogger(__name__)
            logger.warning("Invalid parameters propagate as nan/inf: %s", err)

    size = nx * ny
    if out is None:
        out = np.empty(max(size, 0), dtype=np.double)
    elif not isinstance(out, np.ndarray):
        raise ValueError("`out` must be a numpy array")
    elif out.dtype != np.double or out.ndim != 1 or out.size != size:
        raise ValueError(
            f"`out` must be a one-dimensional array of {size} doubles, got shape "
            f"{out.shape} and dtype {out.dtype}"
        )
    elif not (out.flags.c_contiguous and out.flags.writeable):
        raise ValueError("`out` must be a writeable, contiguous array")

    _fill_flux_pair_compiled(
        float(a),
        float(b),
        nx,
        ny,
        float(xmin),
        float(xmax),
        float(ymin),
        float(ymax),
        out,
    )
    return out


def get_flux_pair(x, y, a: float, b: float) -> FloatArray:
    """Calculate the flux of a droplet pair at arbitrary points

    Args:
        x (:class:`~numpy.ndarray`): x-coordinates of the points
        y (:class:`~numpy.ndarray`): y-coordinates of the points
        a (float): Radius of the droplets
        b (float): Distance between the droplet centers

    Returns:
        :class:`~numpy.ndarray`: The flux values with the broadcasted shape of the
        coordinates
    """
    xs, ys = np.broadcast_arrays(np.asarray(x, dtype=np.double), np.asarray(y, np.double))
    out = np.empty(xs.shape, dtype=np.double)
    _get_flux_pair_compiled(
        np.ascontiguousarray(xs).ravel(),
        np.ascontiguousarray(ys).ravel(),
        float(a),
        float(b),
        out.reshape(-1),
    )
    return out
