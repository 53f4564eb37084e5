"""Miscellaneous functions.

.. autosummary::
   :nosignatures:

   enable_scalar_args

.. codeauthor:: David Zwicker <david.zwicker@ds.mpg.de>
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import numpy as np

from pde.tools.misc import number_array

TFunc = TypeVar("TFunc", bound=Callable[..., Any])


def enable_scalar_args(func: TFunc) -> TFunc:
    """Decorator that makes vectorized functions work with scalars.

    All positional arguments are turned into arrays, which are broadcasted against
    each other before they are passed on. If the broadcasted arguments are scalars,
    they are promoted to arrays with a single entry and the result is unboxed again.
    Keyword arguments are passed on unchanged. Note that the dtype of the returned
    value will always be double even if the function is called with an integer.

    Args:
        func: The function being decorated

    Returns:
        The decorated function
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        arrays = [number_array(arg, dtype=np.double, copy=None) for arg in args]
        arrays = np.broadcast_arrays(*arrays)
        if arrays[0].ndim == 0:
            return func(*(arr[None] for arr in arrays), **kwargs)[0]
        return func(*arrays, **kwargs)

    return wrapper  # type: ignore
