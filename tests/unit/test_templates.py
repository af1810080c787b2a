"""Tests for template acquisition."""

from __future__ import annotations

import threading
from unittest.mock import MagicMock, patch

import httpx
import pytest

from chadcn.core.registry import ComponentDefinition, Registry
from chadcn.core.templates import (
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_REGISTRY_URL,
    ComponentFile,
    TemplateProvider,
    TemplateSource,
    fetch_remote,
    get_fetch_timeout,
    get_registry_url,
    load_embedded_templates,
    placeholder_content,
)

# Bound before the autouse offline fixture patches the module attribute
_real_fetch_remote = fetch_remote


@pytest.fixture
def small_registry() -> Registry:
    return Registry(
        [
            ComponentDefinition(name="alpha", files=("Alpha/Alpha.tsx", "Alpha/index.ts")),
            ComponentDefinition(name="beta", files=("Beta/Beta.tsx",)),
            ComponentDefinition(name="gamma", files=("Gamma/Gamma.tsx",)),
        ]
    )


class TestEmbeddedSnapshot:
    def test_loads_bundled_snapshot(self) -> None:
        templates = load_embedded_templates()
        assert "button" in templates
        assert "Button/Button.tsx" in templates["button"]

    def test_snapshot_files_are_declared(self, registry: Registry) -> None:
        for name, files in load_embedded_templates().items():
            component = registry.require(name)
            assert set(files) <= set(component.files), name


class TestFetchTiers:
    def test_embedded_first(self, small_registry: Registry) -> None:
        fetcher = MagicMock(return_value="remote")
        provider = TemplateProvider(
            small_registry,
            embedded={"beta": {"Beta/Beta.tsx": "embedded"}},
            fetcher=fetcher,
        )

        files = provider.fetch("beta")

        assert files == [ComponentFile("Beta/Beta.tsx", "embedded", TemplateSource.EMBEDDED)]
        fetcher.assert_not_called()

    def test_remote_when_not_embedded(self, small_registry: Registry) -> None:
        fetcher = MagicMock(return_value="remote body")
        provider = TemplateProvider(
            small_registry, embedded={}, base_url="https://example.test/c/", fetcher=fetcher
        )

        files = provider.fetch("beta")

        fetcher.assert_called_once_with("https://example.test/c/Beta/Beta.tsx")
        assert files[0].content == "remote body"
        assert files[0].source is TemplateSource.REMOTE

    def test_placeholder_when_remote_misses(self, small_registry: Registry) -> None:
        provider = TemplateProvider(small_registry, embedded={}, fetcher=lambda url: None)

        files = provider.fetch("alpha")

        assert [f.name for f in files] == ["Alpha/Alpha.tsx", "Alpha/index.ts"]
        assert all(f.is_placeholder for f in files)
        assert "Alpha/index.ts" in files[1].content
        assert files[1].content.rstrip().endswith("export {};")

    def test_placeholder_when_fetcher_raises(self, small_registry: Registry) -> None:
        def failing(url: str) -> str:
            raise httpx.ConnectError("refused")

        provider = TemplateProvider(small_registry, embedded={}, fetcher=failing)

        files = provider.fetch("beta")

        assert files[0].is_placeholder

    def test_one_file_per_declared_path(self, small_registry: Registry) -> None:
        provider = TemplateProvider(
            small_registry,
            embedded={"alpha": {"Alpha/Alpha.tsx": "x"}},
            fetcher=lambda url: None,
        )

        files = provider.fetch("alpha")

        assert [f.source for f in files] == [TemplateSource.EMBEDDED, TemplateSource.PLACEHOLDER]

    def test_default_fetch_uses_fetch_remote(self, small_registry: Registry) -> None:
        provider = TemplateProvider(small_registry, embedded={}, base_url="https://x.test")

        with patch("chadcn.core.templates.fetch_remote", return_value="body") as mock_fetch:
            files = provider.fetch("beta")

        mock_fetch.assert_called_once_with("https://x.test/Beta/Beta.tsx", timeout=provider.timeout)
        assert files[0].content == "body"


class TestFetchMany:
    def test_preserves_requested_order(self, small_registry: Registry) -> None:
        gate = threading.Event()

        def fetcher(url: str) -> str:
            # gamma answers first, alpha last
            if "Alpha" in url:
                gate.wait(timeout=2)
            elif "Gamma" in url:
                gate.set()
            return url

        provider = TemplateProvider(small_registry, embedded={}, fetcher=fetcher)

        result = provider.fetch_many(["alpha", "beta", "gamma"], max_workers=3)

        assert list(result) == ["alpha", "beta", "gamma"]
        assert result["gamma"][0].content.endswith("Gamma/Gamma.tsx")

    def test_sequential_when_single_worker(self, small_registry: Registry) -> None:
        provider = TemplateProvider(small_registry, embedded={}, fetcher=lambda url: "x")

        result = provider.fetch_many(["beta", "alpha"], max_workers=1)

        assert list(result) == ["beta", "alpha"]


class TestFetchRemote:
    def _client(self, response=None, error=None) -> MagicMock:
        client = MagicMock()
        client.__enter__.return_value = client
        if error is not None:
            client.get.side_effect = error
        else:
            client.get.return_value = response
        return client

    def test_returns_body_on_success(self) -> None:
        url = "https://example.test/Button/Button.tsx"
        response = httpx.Response(200, text="body", request=httpx.Request("GET", url))

        with patch("chadcn.core.templates.httpx.Client", return_value=self._client(response)):
            assert _real_fetch_remote(url) == "body"

    def test_returns_none_on_404(self) -> None:
        url = "https://example.test/missing.tsx"
        response = httpx.Response(404, request=httpx.Request("GET", url))

        with patch("chadcn.core.templates.httpx.Client", return_value=self._client(response)):
            assert _real_fetch_remote(url) is None

    def test_returns_none_on_timeout(self) -> None:
        client = self._client(error=httpx.ReadTimeout("slow"))

        with patch("chadcn.core.templates.httpx.Client", return_value=client):
            assert _real_fetch_remote("https://example.test/x.tsx", timeout=0.1) is None

    def test_returns_none_on_invalid_url(self) -> None:
        client = self._client(error=httpx.InvalidURL("Invalid non-printable ASCII character"))

        with patch("chadcn.core.templates.httpx.Client", return_value=client):
            assert _real_fetch_remote("https://bad\x00host/x.tsx") is None


class TestEnvironment:
    def test_registry_url_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CHADCN_REGISTRY_URL", raising=False)
        assert get_registry_url() == DEFAULT_REGISTRY_URL

    def test_registry_url_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHADCN_REGISTRY_URL", "https://mirror.test/components/")
        assert get_registry_url() == "https://mirror.test/components"

    def test_timeout_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHADCN_FETCH_TIMEOUT", "2.5")
        assert get_fetch_timeout() == 2.5

    def test_invalid_timeout_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHADCN_FETCH_TIMEOUT", "soon")
        assert get_fetch_timeout() == DEFAULT_FETCH_TIMEOUT


def test_placeholder_mentions_path() -> None:
    content = placeholder_content("Tooltip/Tooltip.tsx")
    assert "Tooltip/Tooltip.tsx" in content
