"""Core chadcn functionality: registry, resolution, templates, config, materialization."""

from .config import ConfigStore, ProjectConfig, detect_project, require_config
from .errors import (
    ChadcnError,
    ConfigParseError,
    InitError,
    InvalidComponentNameError,
    NotInitializedError,
    PackageInstallError,
    RegistryIntegrityError,
    TemplateUnavailableError,
    UnknownComponentError,
)
from .materializer import FileMaterializer, MaterializeReport
from .registry import ComponentDefinition, Registry, ThemeDefinition, build_registry
from .resolver import resolve_dependencies
from .rewriter import ImportRewriter, RegexImportRewriter
from .runner import AddPlan, AddResult, AddRunner, plan_add
from .templates import ComponentFile, TemplateProvider

__all__ = [
    "ChadcnError",
    "ConfigParseError",
    "InitError",
    "InvalidComponentNameError",
    "NotInitializedError",
    "PackageInstallError",
    "RegistryIntegrityError",
    "TemplateUnavailableError",
    "UnknownComponentError",
    "ComponentDefinition",
    "ThemeDefinition",
    "Registry",
    "build_registry",
    "resolve_dependencies",
    "ComponentFile",
    "TemplateProvider",
    "ImportRewriter",
    "RegexImportRewriter",
    "ConfigStore",
    "ProjectConfig",
    "detect_project",
    "require_config",
    "FileMaterializer",
    "MaterializeReport",
    "AddPlan",
    "AddResult",
    "AddRunner",
    "plan_add",
]
