"""Functions and classes for calculating the evaporative flux of droplet pairs.

.. codeauthor:: David Zwicker <david.zwicker@ds.mpg.de>
"""

from .version import __version__  # noqa: F401

from .flux import (  # noqa: F401
    check_parameters,
    evaluate_flux,
    fill_flux_pair,
    get_flux_pair,
    get_grid_coordinates,
    shielding_constant,
)
from .pair import DropletPair  # noqa: F401
