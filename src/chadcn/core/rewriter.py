"""
Import path rewriting for installed component sources.

Component sources reference the shared utils module and sibling components
with the registry's own conventions:

    import { cn } from '../../lib/utils';
    import { cn } from '@/lib/utils';
    import { Tooltip } from '../Tooltip';
    import { Button } from '@/components/ui/Button';

After rewriting, those specifiers use the project's configured aliases:

    import { cn } from '~/utils/cn';
    import { Tooltip } from '~/ui/Tooltip';

RegexImportRewriter works on the text line by line, matching only quoted
specifiers inside `from '...'`, `import '...'` and `import('...')`. It is not
a parser: unusual formatting (e.g. a specifier split across lines) is left
untouched. Callers depend only on the ImportRewriter protocol.
"""

from __future__ import annotations

import re
from typing import Protocol

from .config import ProjectConfig

# Leading clause + quoted specifier; group "spec" is the path itself
_SPECIFIER_PATTERN = re.compile(
    r"(?P<lead>\bfrom\s+|\bimport\s+|\bimport\s*\(\s*)"
    r"""(?P<quote>['"])(?P<spec>[^'"\n]+)(?P=quote)"""
)

UTILS_SPECIFIERS = frozenset({"@/lib/utils", "../../lib/utils", "../lib/utils"})

# "@/components/ui/Button" or "@/components/ui/Button/Button"
_ALIAS_COMPONENT = re.compile(r"^@/components/ui/(?P<rest>[^'\"]+)$")

# "../Tooltip" or "../Tooltip/Tooltip" (PascalCase sibling directory)
_RELATIVE_COMPONENT = re.compile(r"^\.\./(?P<rest>[A-Z][A-Za-z0-9]*(?:/[A-Za-z0-9_.-]+)*)$")


def _looks_internal(alias: str) -> bool:
    return bool(_ALIAS_COMPONENT.match(alias) or _RELATIVE_COMPONENT.match(alias))


class ImportRewriter(Protocol):
    """Anything that maps registry import conventions onto project aliases."""

    def rewrite(self, content: str, config: ProjectConfig) -> str: ...


class RegexImportRewriter:
    """Pattern-based rewriter for utils and sibling component imports."""

    def rewrite(self, content: str, config: ProjectConfig) -> str:
        utils_alias = config.aliases.utils.rstrip("/")
        components_alias = config.aliases.components.rstrip("/")

        def replace(match: re.Match[str]) -> str:
            spec = match.group("spec")
            new_spec = self._map_specifier(spec, utils_alias, components_alias)
            if new_spec == spec:
                return match.group(0)
            quote = match.group("quote")
            return f"{match.group('lead')}{quote}{new_spec}{quote}"

        return _SPECIFIER_PATTERN.sub(replace, content)

    @staticmethod
    def _map_specifier(spec: str, utils_alias: str, components_alias: str) -> str:
        if spec in UTILS_SPECIFIERS:
            return utils_alias

        match = _ALIAS_COMPONENT.match(spec) or _RELATIVE_COMPONENT.match(spec)
        if match is None or spec == utils_alias:
            return spec

        # Output under an alias that itself looks internal would match again
        if _looks_internal(components_alias) and spec.startswith(components_alias + "/"):
            return spec
        return f"{components_alias}/{match.group('rest')}"


def rewrite_imports(content: str, config: ProjectConfig) -> str:
    """Rewrite with the default rewriter."""
    return RegexImportRewriter().rewrite(content, config)
