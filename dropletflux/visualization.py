"""
Functions for visualizing the flux field of a droplet pair.

The flux diverges at the contact lines, so the raw values are hardly useful for
plotting. The transforms defined here clip the largest values and compress the
remaining ones logarithmically. Values that are not finite, in particular the `nan`
marking points outside the droplets, stay `nan` and are thus shown transparent.

.. autosummary::
   :nosignatures:

   shade_transform
   contour_transform
   get_clip_value
   normalize_flux
   plot_flux_image

.. codeauthor:: David Zwicker <david.zwicker@ds.mpg.de>
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from .flux import fill_flux_pair, get_grid_coordinates
from .tools.misc import enable_scalar_args
from .tools.typing import Bounds, FloatArray

if TYPE_CHECKING:
    from .pair import DropletPair  # @UnusedImport


def _log_shift(flux: np.ndarray, flux_min: float, eps: float) -> np.ndarray:
    """apply `log(max(flux - flux_min, 0) + eps)` to all finite entries"""
    if not eps > 0:
        raise ValueError(f"Offset `eps` must be positive, got {eps}")
    result = np.full(flux.shape, np.nan)
    finite = np.isfinite(flux)
    result[finite] = np.log(np.maximum(flux[finite] - flux_min, 0) + eps)
    return result


@enable_scalar_args
def shade_transform(
    flux: np.ndarray, *, log_shade: bool = True, flux_min: float = 0, eps: float = 1e-6
) -> FloatArray:
    """Transform flux values into values suitable for shading

    Args:
        flux (float or :class:`~numpy.ndarray`):
            The flux values
        log_shade (bool):
            Whether the values are compressed logarithmically. If `False`, finite
            values are returned unchanged.
        flux_min (float):
            Values below this threshold are all mapped to the same shade
        eps (float):
            Positive offset added before taking the logarithm

    Returns:
        float or :class:`~numpy.ndarray`: The transformed values, which are `nan` for
        all entries that were not finite
    """
    if not log_shade:
        return np.where(np.isfinite(flux), flux, np.nan)
    return _log_shift(flux, flux_min, eps)


@enable_scalar_args
def contour_transform(
    flux: np.ndarray, *, flux_min: float = 0, eps: float = 1e-6
) -> FloatArray:
    """Transform flux values into values suitable for drawing contour lines

    Args:
        flux (float or :class:`~numpy.ndarray`):
            The flux values
        flux_min (float):
            Values below this threshold all lie on the lowest contour
        eps (float):
            Positive offset added before taking the logarithm

    Returns:
        float or :class:`~numpy.ndarray`: `log(max(flux - flux_min, 0) + eps)`, or
        `nan` where the flux was not finite
    """
    return _log_shift(flux, flux_min, eps)


def get_clip_value(flux: np.ndarray, clip: float = 0.97) -> float:
    """Determine the value above which the flux is clipped for plotting

    Args:
        flux (:class:`~numpy.ndarray`):
            The flux values
        clip (float):
            The fraction of finite values that lie below the returned value

    Returns:
        float: The finite value at position `floor(clip * (n - 1))` of the `n` sorted
        finite values, or 1 if there are no finite values
    """
    if not 0 < clip <= 1:
        raise ValueError(f"Clip fraction must be in (0, 1], got {clip}")
    flux = np.asarray(flux)
    finite = np.sort(flux[np.isfinite(flux)], axis=None)
    if finite.size == 0:
        return 1.0
    return float(finite[int(np.floor(clip * (finite.size - 1)))])


@enable_scalar_args
def normalize_flux(
    flux: np.ndarray, *, clip: float = 0.97, log_scale: bool = True
) -> FloatArray:
    """Map flux values to the unit interval

    Values are clipped at the value returned by :func:`get_clip_value` and then
    scaled, either linearly or logarithmically using `log(1 + v) / log(1 + vmax)`.

    Args:
        flux (float or :class:`~numpy.ndarray`):
            The flux values
        clip (float):
            The fraction of finite values that are not clipped
        log_scale (bool):
            Whether to use a logarithmic scaling

    Returns:
        float or :class:`~numpy.ndarray`: Values in [0, 1], or `nan` where the flux
        was not finite
    """
    vmax = max(get_clip_value(flux, clip), 0.0)

    result = np.full(flux.shape, np.nan)
    finite = np.isfinite(flux)
    values = np.clip(flux[finite], 0, vmax)
    if log_scale:
        scale = np.log1p(vmax)
        values = np.log1p(values)
    else:
        scale = vmax
    result[finite] = values / (scale if scale > 0 else 1)
    return result


def plot_flux_image(
    ax,
    pair: DropletPair,
    resolution: tuple[int, int] = (700, 350),
    bounds: Bounds | None = None,
    *,
    clip: float = 0.97,
    log_scale: bool = True,
    contours: int = 0,
    contour_args: dict[str, Any] | None = None,
    footprints: bool = True,
    footprint_args: dict[str, Any] | None = None,
    **kwargs,
):
    """Plot the flux field of a droplet pair on the given axes

    Args:
        ax (:class:`matplotlib.axes.Axes`):
            The axes into which the image is drawn
        pair (:class:`~dropletflux.pair.DropletPair`):
            The droplet pair
        resolution (tuple):
            The number of support points along the two axes
        bounds (tuple):
            The plotted region `(xmin, xmax, ymin, ymax)`. If omitted, the default
            viewing window of the pair is used.
        clip (float):
            The fraction of finite values that are not clipped
        log_scale (bool):
            Whether to use a logarithmic color scale
        contours (int):
            The number of contour lines of the log-shifted flux. No lines are drawn
            if this is zero.
        contour_args (dict):
            Additional arguments for :meth:`matplotlib.axes.Axes.contour`
        footprints (bool):
            Whether to outline the footprints of the droplets
        footprint_args (dict):
            Additional arguments for :class:`matplotlib.patches.Circle`
        **kwargs:
            Additional arguments are passed to :meth:`matplotlib.axes.Axes.imshow`

    Returns:
        :class:`matplotlib.image.AxesImage`: The image showing the flux
    """
    import matplotlib as mpl

    nx, ny = resolution
    if bounds is None:
        bounds = pair.get_viewing_window()
    xmin, xmax, ymin, ymax = bounds

    flux = fill_flux_pair(pair.radius, pair.separation, nx, ny, xmin, xmax, ymin, ymax)
    if not np.any(np.isfinite(flux)):
        logger = logging.getLogger(__name__)
        logger.warning("Flux field does not contain any finite value")
    flux = flux.reshape(ny, nx)

    shade = normalize_flux(flux, clip=clip, log_scale=log_scale)
    kwargs.setdefault("cmap", "hot")
    image = ax.imshow(
        np.ma.masked_invalid(shade),
        origin="lower",
        extent=(xmin, xmax, ymin, ymax),
        vmin=0,
        vmax=1,
        **kwargs,
    )

    if contours > 0:
        if contour_args is None:
            contour_args = {}
        contour_args.setdefault("colors", "w")
        contour_args.setdefault("linewidths", 0.5)
        xs, ys = get_grid_coordinates(nx, ny, xmin, xmax, ymin, ymax)
        values = np.ma.masked_invalid(contour_transform(flux))
        if values.count() > 0:
            ax.contour(xs, ys, values, contours, **contour_args)

    if footprints:
        if footprint_args is None:
            footprint_args = {}
        footprint_args.setdefault("fill", False)
        footprint_args.setdefault("linewidth", 1.6)
        for center in pair.centers:
            circle = mpl.patches.Circle((center, 0), pair.radius, **footprint_args)
            ax.add_patch(circle)

    ax.set_xlim(xmin, xmax)
    ax.set_ylim(ymin, ymax)
    ax.set_aspect("equal")
    return image
