"""sri-validator core package.

This package provides the reusable validation logic behind the
``sri-validator`` command and the CI wrapper scripts.
"""

__all__ = [
    "core",
]
