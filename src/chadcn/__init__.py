"""
chadcn - installer for the chadcn UI component registry.

Copies component source files into a consuming project, resolving
inter-component dependencies and rewriting imports to the project's aliases.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    ChadcnError,
    InvalidComponentNameError,
    NotInitializedError,
    PackageInstallError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ChadcnError",
    "InvalidComponentNameError",
    "NotInitializedError",
    "PackageInstallError",
]
