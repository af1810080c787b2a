"""Tests for add planning and materialization."""

from __future__ import annotations

from pathlib import Path

import pytest

from chadcn.core.config import ProjectConfig
from chadcn.core.errors import ChadcnError, InvalidComponentNameError
from chadcn.core.registry import Registry
from chadcn.core.runner import AddRunner, plan_add, resolve_target_dir
from chadcn.core.templates import TemplateProvider


class TestPlanAdd:
    def test_no_extras(self, registry: Registry) -> None:
        plan = plan_add(registry, ["button"])

        assert plan.requested == ("button",)
        assert plan.resolved == ("button",)
        assert not plan.needs_confirmation

    def test_extras_need_confirmation(self, registry: Registry) -> None:
        plan = plan_add(registry, ["toolbar"])

        assert plan.resolved == ("tooltip", "toolbar")
        assert plan.extras == ("tooltip",)
        assert plan.needs_confirmation

    def test_requesting_dependency_explicitly(self, registry: Registry) -> None:
        plan = plan_add(registry, ["toolbar", "tooltip"])

        assert plan.extras == ()

    def test_duplicates_removed(self, registry: Registry) -> None:
        assert plan_add(registry, ["button", "button"]).requested == ("button",)

    def test_all_components(self, registry: Registry) -> None:
        plan = plan_add(registry, [], all_components=True)

        assert set(plan.resolved) == set(registry.names())
        assert plan.extras == ()

    def test_invalid_names(self, registry: Registry) -> None:
        with pytest.raises(InvalidComponentNameError) as exc_info:
            plan_add(registry, ["button", "nonexistent-widget"])

        assert exc_info.value.invalid == ["nonexistent-widget"]

    def test_nothing_requested(self, registry: Registry) -> None:
        with pytest.raises(ChadcnError, match="No components"):
            plan_add(registry, [])


class TestResolveTargetDir:
    def test_alias(self, js_project: Path, project_config: ProjectConfig) -> None:
        target = resolve_target_dir(js_project, project_config)
        assert target == js_project / "src" / "components" / "ui"

    def test_override(self, js_project: Path, project_config: ProjectConfig) -> None:
        target = resolve_target_dir(js_project, project_config, "app/widgets")
        assert target == js_project / "app" / "widgets"


@pytest.fixture
def runner(registry: Registry, project_config: ProjectConfig, js_project: Path) -> AddRunner:
    provider = TemplateProvider(registry, fetcher=lambda url: None)
    return AddRunner(registry, project_config, js_project, provider=provider, max_workers=1)


class TestAddRunner:
    def test_writes_and_rewrites(self, runner: AddRunner, js_project: Path) -> None:
        target = js_project / "src" / "components" / "ui"

        result = runner.run(plan_add(runner.registry, ["button"]), target)

        button = target / "Button" / "Button.tsx"
        assert result.added_files == [button]
        assert result.added_components == ["button"]
        content = button.read_text()
        assert "from '@/lib/utils'" in content
        assert "../../lib/utils" not in content

    def test_resolved_order_and_packages(self, runner: AddRunner, js_project: Path) -> None:
        target = js_project / "ui"

        result = runner.run(plan_add(runner.registry, ["toolbar"]), target)

        assert [c.name for c in result.components] == ["tooltip", "toolbar"]
        assert "@radix-ui/react-toggle-group" in result.packages
        assert "clsx" in result.packages
        assert (target / "Toolbar" / "Toolbar.tsx").is_file()
        assert (target / "Tooltip" / "Tooltip.tsx").is_file()

    def test_placeholders_reported(self, runner: AddRunner, js_project: Path) -> None:
        target = js_project / "ui"

        result = runner.run(plan_add(runner.registry, ["tooltip"]), target)

        assert ("tooltip", "Tooltip/Tooltip.tsx") in result.placeholders
        assert any("placeholder" in warning for warning in result.warnings)

    def test_second_run_skips(self, runner: AddRunner, js_project: Path) -> None:
        target = js_project / "ui"
        plan = plan_add(runner.registry, ["button"])
        runner.run(plan, target)
        button = target / "Button" / "Button.tsx"
        button.write_text("edited")

        result = runner.run(plan, target)

        assert result.added_files == []
        assert result.skipped_files == [button]
        assert result.skipped_components == ["button"]
        assert button.read_text() == "edited"

    def test_skipped_placeholder_not_reported(self, runner: AddRunner, js_project: Path) -> None:
        target = js_project / "ui"
        plan = plan_add(runner.registry, ["tooltip"])
        runner.run(plan, target)

        result = runner.run(plan, target)

        assert result.placeholders == []

    def test_overwrite(self, runner: AddRunner, js_project: Path) -> None:
        target = js_project / "ui"
        plan = plan_add(runner.registry, ["button"])
        runner.run(plan, target)
        button = target / "Button" / "Button.tsx"
        button.write_text("edited")

        result = runner.run(plan, target, overwrite=True)

        assert result.added_files == [button]
        assert button.read_text() != "edited"

    def test_unknown_theme_warns(
        self, registry: Registry, project_config: ProjectConfig, js_project: Path
    ) -> None:
        config = project_config.model_copy(update={"theme": "no-such-theme"})
        provider = TemplateProvider(registry, fetcher=lambda url: None)
        runner = AddRunner(registry, config, js_project, provider=provider)

        result = runner.run(plan_add(registry, ["button"]), js_project / "ui")

        assert any("no-such-theme" in warning for warning in result.warnings)
        assert result.added_components == ["button"]

    def test_progress_callback(self, runner: AddRunner, js_project: Path) -> None:
        messages: list[str] = []

        plan = plan_add(runner.registry, ["button"])
        runner.run(plan, js_project / "ui", progress=messages.append)

        assert "Writing button..." in messages
