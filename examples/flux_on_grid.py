#!/usr/bin/env python3

import numpy as np

from dropletflux import fill_flux_pair, get_grid_coordinates

# two droplets of radius 1 whose centers are 2.25 apart
a, b = 1.0, 2.25
nx, ny = 64, 32
bounds = (-3.2, 3.2, -1.8, 1.8)

# the caller owns the output buffer
out = np.empty(nx * ny)
fill_flux_pair(a, b, nx, ny, *bounds, out=out)

xs, ys = get_grid_coordinates(nx, ny, *bounds)
flux = out.reshape(ny, nx)
inside = np.isfinite(flux)
print(f"{inside.sum()} of {flux.size} points lie on the droplets")
print(f"Flux ranges from {flux[inside].min():.3g} to {flux[inside].max():.3g}")
