"""Tests for import rewriting."""

from __future__ import annotations

import pytest

from chadcn.core.config import AliasSettings, ProjectConfig, TailwindSettings
from chadcn.core.rewriter import RegexImportRewriter, rewrite_imports


def config_with(components: str, utils: str) -> ProjectConfig:
    return ProjectConfig(
        tailwind=TailwindSettings(css="src/index.css"),
        aliases=AliasSettings(components=components, utils=utils),
    )


@pytest.fixture
def custom_config() -> ProjectConfig:
    return config_with("~/ui", "~/utils/cn")


class TestUtilsImports:
    @pytest.mark.parametrize(
        "source",
        [
            "import { cn } from '../../lib/utils';",
            "import { cn } from '../lib/utils';",
            "import { cn } from '@/lib/utils';",
        ],
    )
    def test_known_specifiers(self, source: str, custom_config: ProjectConfig) -> None:
        assert rewrite_imports(source, custom_config) == "import { cn } from '~/utils/cn';"

    def test_double_quotes_kept(self, custom_config: ProjectConfig) -> None:
        source = 'import { cn } from "../../lib/utils";'
        assert rewrite_imports(source, custom_config) == 'import { cn } from "~/utils/cn";'

    def test_default_aliases(self, project_config: ProjectConfig) -> None:
        source = "import { cn } from '../../lib/utils';"
        assert rewrite_imports(source, project_config) == "import { cn } from '@/lib/utils';"


class TestComponentImports:
    def test_relative_sibling(self, custom_config: ProjectConfig) -> None:
        source = "import { Tooltip } from '../Tooltip';"
        assert rewrite_imports(source, custom_config) == "import { Tooltip } from '~/ui/Tooltip';"

    def test_relative_sibling_file(self, custom_config: ProjectConfig) -> None:
        source = "import { Tooltip } from '../Tooltip/Tooltip';"
        expected = "import { Tooltip } from '~/ui/Tooltip/Tooltip';"
        assert rewrite_imports(source, custom_config) == expected

    def test_registry_alias(self, custom_config: ProjectConfig) -> None:
        source = "import { Button } from '@/components/ui/Button';"
        assert rewrite_imports(source, custom_config) == "import { Button } from '~/ui/Button';"

    def test_dynamic_import(self, custom_config: ProjectConfig) -> None:
        source = "const Lazy = React.lazy(() => import('../ScrollArea'));"
        expected = "const Lazy = React.lazy(() => import('~/ui/ScrollArea'));"
        assert rewrite_imports(source, custom_config) == expected


class TestUntouched:
    @pytest.mark.parametrize(
        "source",
        [
            "import * as React from 'react';",
            "import { cva } from 'class-variance-authority';",
            "import './styles.css';",
            "import { helper } from '../helpers';",
            "export { Toolbar } from './Toolbar';",
            "const path = '../../lib/utils';",
        ],
    )
    def test_other_specifiers(self, source: str, custom_config: ProjectConfig) -> None:
        assert rewrite_imports(source, custom_config) == source

    def test_bytes_outside_specifiers_preserved(self, custom_config: ProjectConfig) -> None:
        source = (
            "'use client';\r\n"
            "import { cn }   from  '../../lib/utils' ;\r\n"
            "\r\n"
            "export const x = cn('a', \"b\");\r\n"
        )
        result = rewrite_imports(source, custom_config)
        assert result == source.replace("../../lib/utils", "~/utils/cn")


class TestIdempotence:
    def test_rewrite_twice(self, custom_config: ProjectConfig) -> None:
        source = (
            "import { cn } from '../../lib/utils';\n"
            "import { Tooltip } from '../Tooltip';\n"
            "import { Button } from '@/components/ui/Button';\n"
        )
        rewriter = RegexImportRewriter()
        once = rewriter.rewrite(source, custom_config)
        assert rewriter.rewrite(once, custom_config) == once

    def test_default_aliases_stable(self, project_config: ProjectConfig) -> None:
        source = "import { Button } from '@/components/ui/Button';\n"
        assert rewrite_imports(source, project_config) == source

    def test_relative_looking_aliases(self) -> None:
        config = config_with("../Components", "../Utils")
        source = "import { cn } from '../../lib/utils';\nimport { A } from '../Alpha';\n"
        once = rewrite_imports(source, config)
        assert rewrite_imports(once, config) == once

    def test_internal_path_under_alias_prefix(self) -> None:
        config = config_with("@/components", "@/lib/utils")
        source = "import { Button } from '@/components/ui/Button';\n"

        once = rewrite_imports(source, config)

        assert once == "import { Button } from '@/components/Button';\n"
        assert rewrite_imports(once, config) == once
