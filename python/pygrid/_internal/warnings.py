"""pygrid warning categories.

These exist so users can filter/suppress pygrid warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class PyGridWarning(UserWarning):
    """Base warning category for all pygrid user-facing warnings."""


class PyGridBoundsWarning(PyGridWarning):
    """An end bound was outside the grid and has been clamped."""
