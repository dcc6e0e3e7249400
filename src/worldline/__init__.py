"""worldline package bootstrap.

Exposes the package version; the public types live in :mod:`worldline.core`.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
