#!/usr/bin/env python3

from dropletflux import DropletPair

# keep the droplets apart even if the separation is chosen too small
pair = DropletPair.from_separation(radius=1, separation=1.9)
print(pair, "with total flux", pair.shielding_constant)

# show the clipped, logarithmically scaled flux with contour lines
pair.plot(resolution=(350, 175), clip=0.97, contours=10)
