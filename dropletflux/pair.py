"""
Class representing a pair of identical droplets on a line

.. autosummary::
   :nosignatures:

   DropletPair

.. codeauthor:: David Zwicker <david.zwicker@ds.mpg.de>
"""

from __future__ import annotations

import logging

import numpy as np

from pde.fields import ScalarField
from pde.grids import CartesianGrid
from pde.tools.plotting import PlotReference, plot_on_axes

from .flux import check_parameters, fill_flux_pair, get_flux_pair, shielding_constant
from .tools.typing import Bounds, FloatArray

DEFAULT_RESOLUTION = (700, 350)
"""tuple: number of support points used for images of the flux"""


class DropletPair:
    """Represents two droplets of equal radius centered at `(-b/2, 0)` and `(b/2, 0)`

    Creating a pair does not check the geometry, so pairs with invalid parameters can
    be used to explore how the flux model degenerates. Use :meth:`check_data` or
    :attr:`is_valid` to test whether the geometry is sensible.
    """

    __slots__ = ["radius", "separation"]

    def __init__(self, radius: float, separation: float):
        """
        Args:
            radius (float):
                Radius `a` of both droplets
            separation (float):
                Distance `b` between the centers of the droplets
        """
        self.radius = float(radius)
        self.separation = float(separation)

    @classmethod
    def from_separation(
        cls, radius: float, separation: float, min_gap: float = 1e-6
    ) -> DropletPair:
        """Create a pair of droplets that do not overlap

        Args:
            radius (float):
                Radius of both droplets
            separation (float):
                Requested distance between the centers of the droplets, which is
                increased if the droplets would overlap
            min_gap (float):
                Minimal distance between the interfaces of the two droplets
        """
        min_separation = 2 * radius + min_gap
        if separation < min_separation:
            logger = logging.getLogger(cls.__name__)
            logger.info(f"Increase separation from {separation} to {min_separation}")
            separation = min_separation
        return cls(radius, separation)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.radius == other.radius and self.separation == other.separation

    def __str__(self):
        name = self.__class__.__name__
        return f"{name}(radius={self.radius}, separation={self.separation})"

    __repr__ = __str__

    def copy(self, **kwargs) -> DropletPair:
        r"""return a copy of the current pair

        Args:
            \**kwargs: Additional arguments can be used to change `radius` or
                `separation` of the returned pair.
        """
        kwargs.setdefault("radius", self.radius)
        kwargs.setdefault("separation", self.separation)
        return self.__class__(**kwargs)

    def check_data(self):
        """method that checks the validity and consistency of the geometry"""
        check_parameters(self.radius, self.separation)

    @property
    def is_valid(self) -> bool:
        """bool: whether the geometry describes a sensible droplet pair"""
        try:
            self.check_data()
        except ValueError:
            return False
        return True

    @property
    def overlaps(self) -> bool:
        """bool: whether the footprints of the two droplets overlap"""
        return self.separation < 2 * self.radius

    @property
    def centers(self) -> tuple[float, float]:
        """tuple: x-coordinates of the two droplet centers"""
        return -0.5 * self.separation, +0.5 * self.separation

    @property
    def shielding_constant(self) -> float:
        """float: the total flux `F` of the pair"""
        return float(shielding_constant(self.radius, self.separation))

    @property
    def footprint_bounds(self) -> Bounds:
        """tuple: the rectangle `(xmin, xmax, ymin, ymax)` enclosing both droplets"""
        a, b = self.radius, self.separation
        return (-0.5 * b - a, 0.5 * b + a, -a, a)

    def get_viewing_window(self, margin: float = 0.6) -> Bounds:
        """Return a region that shows both droplets with some space around them

        Args:
            margin (float):
                Size of the space around the droplets in units of the radius

        Returns:
            tuple: The rectangle `(xmin, xmax, ymin, ymax)`
        """
        xmin, xmax, ymin, ymax = self.footprint_bounds
        dist = margin * self.radius
        return (xmin - dist, xmax + dist, ymin - dist, ymax + dist)

    def flux_at(self, x, y):
        """Return the flux at the given points

        Args:
            x (float or :class:`~numpy.ndarray`): x-coordinates of the points
            y (float or :class:`~numpy.ndarray`): y-coordinates of the points

        Returns:
            float or :class:`~numpy.ndarray`: The flux, which is `nan` outside the
            droplets
        """
        flux = get_flux_pair(x, y, self.radius, self.separation)
        if flux.ndim == 0:
            return float(flux)
        return flux

    def get_flux(
        self,
        resolution: tuple[int, int] = DEFAULT_RESOLUTION,
        bounds: Bounds | None = None,
        out: np.ndarray | None = None,
        *,
        strict: bool = False,
    ) -> FloatArray:
        """Calculate the flux on a regular grid

        Args:
            resolution (tuple):
                The number of support points `(nx, ny)` along the two axes
            bounds (tuple):
                The region `(xmin, xmax, ymin, ymax)` covered by the grid. If omitted,
                the region returned by :meth:`get_viewing_window` is used.
            out (:class:`~numpy.ndarray`, optional):
                Array of `nx * ny` doubles that is filled with the result
            strict (bool):
                Whether to raise :class:`ValueError` for invalid parameters

        Returns:
            :class:`~numpy.ndarray`: The flux in row-major order as described in
            :func:`~dropletflux.flux.fill_flux_pair`
        """
        nx, ny = resolution
        if bounds is None:
            bounds = self.get_viewing_window()
        return fill_flux_pair(
            self.radius, self.separation, nx, ny, *bounds, out=out, strict=strict
        )

    def get_flux_field(self, grid: CartesianGrid, label: str = "Flux") -> ScalarField:
        """Calculate the flux at the cell centers of a grid

        Args:
            grid (:class:`~pde.grids.cartesian.CartesianGrid`):
                The two-dimensional grid
            label (str):
                The label of the returned field

        Returns:
            :class:`~pde.fields.scalar.ScalarField`: The flux field, which is `nan`
            in cells whose centers lie outside the droplets
        """
        if not isinstance(grid, CartesianGrid) or grid.dim != 2:
            raise ValueError("Flux can only be calculated on 2d Cartesian grids")
        coords = grid.cell_coords
        data = get_flux_pair(coords[..., 0], coords[..., 1], self.radius, self.separation)
        return ScalarField(grid, data, label=label)

    @plot_on_axes()
    def plot(
        self,
        ax,
        resolution: tuple[int, int] = DEFAULT_RESOLUTION,
        bounds: Bounds | None = None,
        **kwargs,
    ) -> PlotReference:
        """Plot the flux field of the droplet pair

        Args:
            {PLOT_ARGS}
            resolution (tuple):
                The number of support points along the two axes
            bounds (tuple):
                The plotted region `(xmin, xmax, ymin, ymax)`
            **kwargs:
                Additional keyword arguments are passed to
                :func:`~dropletflux.visualization.plot_flux_image`, e.g., to set
                the clipping, the color map, or the number of contour lines.

        Returns:
            :class:`~pde.tools.plotting.PlotReference`: Information about the plot
        """
        from .visualization import plot_flux_image

        image = plot_flux_image(ax, self, resolution, bounds, **kwargs)
        parameters = {"resolution": resolution, "bounds": bounds}
        return PlotReference(ax, image, parameters)
