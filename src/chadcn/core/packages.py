"""
npm package requirements and package manager invocation.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import PackageInstallError
from .registry import Registry

logger = logging.getLogger(__name__)

# Needed by the cn() helper every component imports
BASELINE_PACKAGES = ("clsx", "tailwind-merge", "class-variance-authority")


@dataclass(frozen=True)
class PackageManager:
    """A package manager and the subcommand it uses to add packages."""

    name: str
    add_command: str

    def install_command(self, packages: Sequence[str]) -> list[str]:
        return [self.name, self.add_command, *packages]


NPM = PackageManager("npm", "install")
PNPM = PackageManager("pnpm", "add")
YARN = PackageManager("yarn", "add")
BUN = PackageManager("bun", "add")

# Checked in order; first lockfile found wins
LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PNPM),
    ("yarn.lock", YARN),
    ("bun.lockb", BUN),
    ("bun.lock", BUN),
    ("package-lock.json", NPM),
)


def detect_package_manager(project_root: Path) -> PackageManager:
    """Pick the package manager from lockfiles, defaulting to npm."""
    for lockfile, manager in LOCKFILES:
        if (project_root / lockfile).is_file():
            logger.debug("Found %s, using %s", lockfile, manager.name)
            return manager
    return NPM


def required_packages(registry: Registry, components: Iterable[str]) -> list[str]:
    """
    Union of the components' npm dependencies and the baseline packages.

    Sorted, so the result does not depend on component order.
    """
    packages = set(BASELINE_PACKAGES)
    for name in components:
        packages.update(registry.require(name).package_dependencies)
    return sorted(packages)


def install_packages(
    project_root: Path,
    packages: Sequence[str],
    manager: PackageManager | None = None,
) -> list[str]:
    """
    Run the package manager to install packages.

    Returns:
        The command that was run

    Raises:
        PackageInstallError: if the executable is missing or exits non-zero
    """
    manager = manager or detect_package_manager(project_root)
    cmd = manager.install_command(packages)
    logger.info("Running %s in %s", " ".join(cmd), project_root)

    try:
        subprocess.run(cmd, cwd=project_root, capture_output=True, text=True, check=True)
    except FileNotFoundError as e:
        raise PackageInstallError(cmd, f"{manager.name} not found") from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or e.stdout or "").strip().splitlines()
        reason = detail[-1] if detail else f"exit code {e.returncode}"
        raise PackageInstallError(cmd, reason) from e

    return cmd
