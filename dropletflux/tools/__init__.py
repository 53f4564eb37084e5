"""Tools used across the package.

.. autosummary::
   :nosignatures:

   ~misc.enable_scalar_args

.. codeauthor:: David Zwicker <david.zwicker@ds.mpg.de>
"""
