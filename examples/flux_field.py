#!/usr/bin/env python3

from pde import CartesianGrid

from dropletflux import DropletPair

pair = DropletPair(radius=1, separation=2.5)
pair.check_data()  # raises ValueError for invalid geometries

# evaluate the flux at the cell centers of a py-pde grid
grid = CartesianGrid([[-3, 3], [-2, 2]], [60, 40])
field = pair.get_flux_field(grid)
field.plot(title="Flux of a droplet pair")
