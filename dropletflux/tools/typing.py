"""Miscellaneous types.

.. codeauthor:: David Zwicker <david.zwicker@ds.mpg.de>
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

FloatArray = NDArray[np.floating]
Bounds = tuple[float, float, float, float]
"""tuple: bounds `(xmin, xmax, ymin, ymax)` of a rectangular sampling region"""
