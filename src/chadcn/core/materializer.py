"""
Writing component files into a project.

FileMaterializer applies the conflict rule (skip existing files unless
overwrite is set) and returns what it did as a MaterializeReport instead of
printing, so callers decide how to present it.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ChadcnError
from .templates import ComponentFile

logger = logging.getLogger(__name__)


@dataclass
class MaterializeReport:
    """
    Outcome of writing a batch of files.

    Attributes:
        added: Files written (created or overwritten)
        skipped: Files left alone because they already existed
    """

    added: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    def merge(self, other: MaterializeReport) -> None:
        self.added.extend(other.added)
        self.skipped.extend(other.skipped)

    @property
    def total(self) -> int:
        return len(self.added) + len(self.skipped)


def write_atomic(path: Path, content: str) -> None:
    """Write content so readers see either the old file or the complete new one."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class FileMaterializer:
    """Writes ComponentFiles below a target directory."""

    def __init__(self, target_dir: Path):
        self.target_dir = target_dir

    def target_path(self, file: ComponentFile) -> Path:
        """
        Where a file lands.

        Raises:
            ChadcnError: if the declared path would escape the target directory
        """
        path = (self.target_dir / file.name).resolve()
        root = self.target_dir.resolve()
        if path != root and root not in path.parents:
            raise ChadcnError(f"Refusing to write outside {self.target_dir}: {file.name}")
        return path

    def write(self, files: Iterable[ComponentFile], overwrite: bool = False) -> MaterializeReport:
        """
        Write files, skipping ones that already exist unless overwrite is set.

        Files are written one at a time; a failure part-way leaves the files
        already written in place.
        """
        report = MaterializeReport()
        for file in files:
            path = self.target_path(file)
            if path.exists() and not overwrite:
                logger.debug("Skipping existing file %s", path)
                report.skipped.append(path)
                continue

            write_atomic(path, file.content)
            logger.debug("Wrote %s", path)
            report.added.append(path)
        return report
