"""
Add pipeline - validation, dependency resolution and materialization.

This module holds the decision logic behind `chadcn add` without any
prompting or printing:

    plan = plan_add(registry, ["toolbar"])      # validate + resolve
    plan.extras                                  # -> ["tooltip"]
    runner = AddRunner(registry, config, project_root)
    result = runner.run(plan, target_dir, overwrite=False)
    result.added_components, result.packages

The CLI layer decides whether to confirm extras, how to show the result and
whether to install packages.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .config import ProjectConfig, alias_to_path
from .errors import ChadcnError
from .materializer import FileMaterializer, MaterializeReport
from .packages import required_packages
from .registry import Registry
from .resolver import extra_dependencies, resolve_dependencies
from .rewriter import ImportRewriter, RegexImportRewriter
from .templates import ComponentFile, TemplateProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddPlan:
    """
    What an add will install.

    Attributes:
        requested: Components the user asked for (deduplicated, in order)
        resolved: Dependency-closed install order
        extras: Resolved components the user did not ask for
    """

    requested: tuple[str, ...]
    resolved: tuple[str, ...]
    extras: tuple[str, ...]

    @property
    def needs_confirmation(self) -> bool:
        return bool(self.extras)


def plan_add(
    registry: Registry,
    requested: Sequence[str],
    all_components: bool = False,
) -> AddPlan:
    """
    Validate requested names and resolve their dependencies.

    Raises:
        InvalidComponentNameError: listing every unknown name
        ChadcnError: if nothing was requested
    """
    names = registry.names() if all_components else list(dict.fromkeys(requested))
    if not names:
        raise ChadcnError("No components selected")

    registry.validate(names)
    resolved = resolve_dependencies(registry, names)
    extras = extra_dependencies(resolved, names)
    logger.debug("Resolved %s -> %s (extras: %s)", names, resolved, extras)
    return AddPlan(requested=tuple(names), resolved=tuple(resolved), extras=tuple(extras))


def resolve_target_dir(
    project_root: Path, config: ProjectConfig, path_override: str | None = None
) -> Path:
    """Directory components are written to: --path if given, else the components alias."""
    if path_override:
        return project_root / path_override
    return alias_to_path(project_root, config.aliases.components)


@dataclass
class ComponentOutcome:
    """Per-component materialization result."""

    name: str
    report: MaterializeReport
    placeholders: list[str] = field(default_factory=list)


@dataclass
class AddResult:
    """
    Result of an add run.

    Components appear in resolved order, whatever order fetches completed in.
    """

    target_dir: Path
    components: list[ComponentOutcome] = field(default_factory=list)
    packages: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def added_files(self) -> list[Path]:
        return [path for outcome in self.components for path in outcome.report.added]

    @property
    def skipped_files(self) -> list[Path]:
        return [path for outcome in self.components for path in outcome.report.skipped]

    @property
    def added_components(self) -> list[str]:
        return [outcome.name for outcome in self.components if outcome.report.added]

    @property
    def skipped_components(self) -> list[str]:
        return [outcome.name for outcome in self.components if outcome.report.skipped]

    @property
    def placeholders(self) -> list[tuple[str, str]]:
        return [
            (outcome.name, path) for outcome in self.components for path in outcome.placeholders
        ]

    def summary(self) -> str:
        lines = [f"Added {len(self.added_files)} file(s)"]
        if self.skipped_files:
            lines.append(f"Skipped {len(self.skipped_files)} existing file(s)")
        if self.placeholders:
            lines.append(f"Placeholders: {len(self.placeholders)}")
        return "\n".join(lines)


class AddRunner:
    """
    Materializes an AddPlan into a project.

    For each resolved component, in order: fetch templates, rewrite imports,
    write files under the conflict rule.
    """

    def __init__(
        self,
        registry: Registry,
        config: ProjectConfig,
        project_root: Path,
        provider: TemplateProvider | None = None,
        rewriter: ImportRewriter | None = None,
        max_workers: int = 4,
    ):
        """
        Initialize the runner.

        Args:
            registry: Component catalog
            config: Loaded project config (aliases drive import rewriting)
            project_root: Root of the consuming project
            provider: Template source (defaults to embedded/remote/placeholder)
            rewriter: Import rewriter (defaults to RegexImportRewriter)
            max_workers: Parallel template fetches; 1 disables threading
        """
        self.registry = registry
        self.config = config
        self.project_root = project_root
        self.provider = provider or TemplateProvider(registry)
        self.rewriter = rewriter or RegexImportRewriter()
        self.max_workers = max_workers

    def run(
        self,
        plan: AddPlan,
        target_dir: Path,
        overwrite: bool = False,
        progress: Callable[[str], None] | None = None,
    ) -> AddResult:
        """
        Fetch, rewrite and write every component in the plan.

        Args:
            plan: Output of plan_add()
            target_dir: Directory component files are written below
            overwrite: Replace files that already exist
            progress: Optional callback receiving status messages

        Returns:
            AddResult with per-component reports and the npm packages to install
        """
        result = AddResult(target_dir=target_dir)

        if self.registry.theme(self.config.theme) is None:
            message = f"Unknown theme '{self.config.theme}' in config"
            logger.warning(message)
            result.add_warning(message)

        if progress:
            progress("Fetching components...")
        fetched = self.provider.fetch_many(plan.resolved, max_workers=self.max_workers)

        materializer = FileMaterializer(target_dir)
        for name in plan.resolved:
            if progress:
                progress(f"Writing {name}...")
            files = [self._rewrite(file) for file in fetched[name]]
            report = materializer.write(files, overwrite=overwrite)

            outcome = ComponentOutcome(name=name, report=report)
            written = set(report.added)
            for file in files:
                if file.is_placeholder and materializer.target_path(file) in written:
                    outcome.placeholders.append(file.name)
                    result.add_warning(
                        f"{name}: {file.name} could not be fetched, wrote a placeholder"
                    )
            result.components.append(outcome)

        result.packages = required_packages(self.registry, plan.resolved)
        logger.debug(result.summary())
        return result

    def _rewrite(self, file: ComponentFile) -> ComponentFile:
        return file.with_content(self.rewriter.rewrite(file.content, self.config))
