"""
Mid-World Logistics - Source Package

This package contains the Lambda entry points (``inventory``, ``transport``)
and the ``midworld`` service package they delegate to.
"""

__version__ = "1.0.0"

# Package metadata
__all__ = [
    "__version__",
]
