"""
Error types for chadcn configuration, registry lookups, and installation.
"""

from __future__ import annotations

from collections.abc import Sequence


class ChadcnError(Exception):
    """Base exception for all chadcn errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotInitializedError(ChadcnError):
    """
    Raised when a command needs a project config and none was found.

    A malformed config file is reported the same way as a missing one.
    """

    def __init__(self, project_root: object):
        self.project_root = project_root
        super().__init__(f"chadcn is not initialized in {project_root}")


class UnknownComponentError(ChadcnError):
    """Raised when a single component lookup misses the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown component: {name}")


class InvalidComponentNameError(ChadcnError):
    """
    Raised when user-supplied component names are not in the registry.

    Carries every offending name, not just the first one.
    """

    def __init__(self, invalid: Sequence[str], available: Sequence[str]):
        self.invalid = list(invalid)
        self.available = list(available)
        super().__init__(f"Invalid component(s): {', '.join(self.invalid)}")


class RegistryIntegrityError(ChadcnError):
    """
    Raised when the catalog references something it does not define.

    Examples:
    - Duplicate component or theme names
    - A dependency naming a component outside the catalog
    """

    pass


class TemplateUnavailableError(ChadcnError):
    """Raised when neither the embedded snapshot nor the remote source has a file."""

    def __init__(self, component: str, path: str, reason: str = ""):
        self.component = component
        self.path = path
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Template unavailable for {component} ({path}){detail}")


class ConfigParseError(ChadcnError):
    """Raised when a config file exists but cannot be read or validated."""

    def __init__(self, path: object, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config file {path}: {reason}")


class PackageInstallError(ChadcnError):
    """Raised when the package manager subprocess fails."""

    def __init__(self, command: Sequence[str], reason: str):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"Failed to run {' '.join(self.command)}: {reason}")


class InitError(ChadcnError):
    """Raised when project initialization fails to write its files."""

    pass
