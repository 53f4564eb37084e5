"""
.. codeauthor:: David Zwicker <david.zwicker@ds.mpg.de>
"""

import logging
import math

import numpy as np
import pytest

from pde.grids import CartesianGrid, PolarSymGrid, UnitGrid

from dropletflux import DropletPair, fill_flux_pair, shielding_constant


def test_droplet_pair():
    """test basic properties of a droplet pair"""
    pair = DropletPair(1, 2)
    assert pair.radius == 1
    assert pair.separation == 2
    assert isinstance(pair.radius, float)
    assert pair.centers == (-1, 1)
    assert pair.shielding_constant == pytest.approx(3)
    assert pair.footprint_bounds == (-2, 2, -1, 1)
    assert pair.get_viewing_window(margin=1) == (-3, 3, -2, 2)
    assert pair.is_valid
    assert not pair.overlaps
    assert isinstance(str(pair), str)
    assert isinstance(repr(pair), str)

    assert DropletPair(1, 1.5).overlaps

    pair2 = pair.copy()
    assert pair == pair2
    assert pair is not pair2
    assert pair.copy(separation=3) == DropletPair(1, 3)
    assert pair != DropletPair(1, 3)


@pytest.mark.parametrize("radius, separation", [(0, 1), (1, 0), (2, 1), (1, 1)])
def test_invalid_pair(radius, separation):
    """test droplet pairs with invalid geometry"""
    pair = DropletPair(radius, separation)
    assert not pair.is_valid
    with pytest.raises(ValueError):
        pair.check_data()
    with pytest.raises(ValueError):
        pair.get_flux((10, 10), strict=True)


def test_invalid_pair_flux():
    """test that invalid pairs result in nan without raising"""
    pair = DropletPair(2, 1)
    assert math.isnan(pair.shielding_constant)
    assert np.all(np.isnan(pair.get_flux((20, 10))))
    assert math.isnan(pair.flux_at(-0.5, 0))


def test_from_separation(caplog):
    """test creating droplet pairs that do not overlap"""
    assert DropletPair.from_separation(1, 3) == DropletPair(1, 3)

    with caplog.at_level(logging.INFO):
        pair = DropletPair.from_separation(1, 1.5, min_gap=0.01)
    assert pair.separation == pytest.approx(2.01)
    assert not pair.overlaps
    assert "Increase separation" in caplog.text


def test_flux_at():
    """test evaluating the flux of a pair at points"""
    pair = DropletPair(1, 2)
    F = shielding_constant(1.0, 2.0)
    value = pair.flux_at(-1, 0)
    assert isinstance(value, float)
    assert value == pytest.approx(2 / np.pi * (1 - F * np.sqrt(3) / (4 * np.pi)))
    assert pair.flux_at(1, 0) == value
    assert math.isnan(pair.flux_at(0, 0))

    values = pair.flux_at([-1, 0, 1], 0)
    assert values.shape == (3,)
    assert values[0] == values[2] == value
    assert np.isnan(values[1])


def test_get_flux():
    """test calculating the flux on a grid"""
    pair = DropletPair(1, 2.25)
    bounds = (-3.2, 3.2, -1.8, 1.8)
    flux = pair.get_flux((70, 35), bounds)
    np.testing.assert_array_equal(
        flux, fill_flux_pair(1, 2.25, 70, 35, -3.2, 3.2, -1.8, 1.8)
    )

    out = np.empty(70 * 35)
    assert pair.get_flux((70, 35), bounds, out=out) is out
    np.testing.assert_array_equal(out, flux)

    # default bounds enclose both droplets
    flux = pair.get_flux((40, 20)).reshape(20, 40)
    assert np.all(np.isnan(flux[0, :]))
    assert np.all(np.isnan(flux[:, 0]))
    assert np.isfinite(flux).any()


def test_get_flux_field():
    """test calculating the flux on a py-pde grid"""
    pair = DropletPair(1, 2.5)
    grid = CartesianGrid([[-3, 3], [-2, 2]], [30, 20])
    field = pair.get_flux_field(grid)
    assert field.grid is grid
    assert field.label == "Flux"
    assert field.data.shape == (30, 20)

    coords = grid.cell_coords
    x, y = coords[..., 0], coords[..., 1]
    outside = ((x + 1.25) ** 2 + y**2 >= 1) & ((x - 1.25) ** 2 + y**2 >= 1)
    assert np.all(np.isnan(field.data[outside]))
    assert np.all(np.isfinite(field.data[~outside]))

    field = pair.get_flux_field(UnitGrid([4, 4]), label="J")
    assert field.label == "J"

    with pytest.raises(ValueError):
        pair.get_flux_field(PolarSymGrid(3, 4))
    with pytest.raises(ValueError):
        pair.get_flux_field(UnitGrid([4]))


def test_plotting():
    """test plotting droplet pairs"""
    pair = DropletPair(1, 2.25)
    pair.plot(resolution=(40, 20))
    pair.plot(resolution=(40, 20), bounds=(-4, 4, -2, 2), contours=5, log_scale=False)
    DropletPair(2, 1).plot(resolution=(20, 10), contours=5)
