"""
Component source acquisition.

For every file a component declares, TemplateProvider tries three sources
in order:

1. the embedded snapshot bundled with the package (data/component-templates.json)
2. a remote fetch from the component registry URL
3. a generated placeholder that tells the user where to get the file

fetch() therefore always returns one ComponentFile per declared path.
Placeholders are logged as warnings and flagged on the returned file so the
caller can report degraded output.

The snapshot is regenerated from the component sources with
scripts/generate_templates.py.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from importlib import resources

import httpx

from .errors import TemplateUnavailableError
from .registry import Registry

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_URL = (
    "https://raw.githubusercontent.com/chadcn/chadcn/main/packages/components/src/components"
)
DEFAULT_FETCH_TIMEOUT = 10.0

EMBEDDED_TEMPLATES_FILE = "component-templates.json"

# (url) -> text, or None when the remote source has nothing usable
Fetcher = Callable[[str], str | None]

EmbeddedTemplates = Mapping[str, Mapping[str, str]]


class TemplateSource(str, Enum):
    """Where a ComponentFile's content came from."""

    EMBEDDED = "embedded"
    REMOTE = "remote"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class ComponentFile:
    """
    A single file payload for a component.

    Attributes:
        name: Relative path as declared by the component (e.g. "Button/Button.tsx")
        content: File text (before or after import rewriting)
        source: Which tier produced the content
    """

    name: str
    content: str
    source: TemplateSource = TemplateSource.EMBEDDED

    @property
    def is_placeholder(self) -> bool:
        return self.source is TemplateSource.PLACEHOLDER

    def with_content(self, content: str) -> ComponentFile:
        return ComponentFile(name=self.name, content=content, source=self.source)


def load_embedded_templates() -> dict[str, dict[str, str]]:
    """
    Load the bundled component snapshot.

    Returns an empty mapping if the snapshot is missing or unreadable; the
    provider then falls back to remote fetches for everything.
    """
    try:
        resource = resources.files("chadcn") / "data" / EMBEDDED_TEMPLATES_FILE
        data = json.loads(resource.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Embedded component templates unavailable: %s", e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Embedded component templates have unexpected shape, ignoring")
        return {}
    return data


def get_registry_url() -> str:
    """Remote base URL, overridable with CHADCN_REGISTRY_URL."""
    return os.environ.get("CHADCN_REGISTRY_URL", DEFAULT_REGISTRY_URL).rstrip("/")


def get_fetch_timeout() -> float:
    raw = os.environ.get("CHADCN_FETCH_TIMEOUT")
    if not raw:
        return DEFAULT_FETCH_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid CHADCN_FETCH_TIMEOUT=%r", raw)
        return DEFAULT_FETCH_TIMEOUT


def fetch_remote(url: str, timeout: float = DEFAULT_FETCH_TIMEOUT) -> str | None:
    """
    GET a template file.

    Transport errors, timeouts, invalid URLs and non-2xx responses yield None.
    """
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.text
    except httpx.TimeoutException:
        logger.debug("Timed out after %ss fetching %s", timeout, url)
        return None
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Fetch failed for %s: %s", url, e)
        return None


def placeholder_content(path: str) -> str:
    """Stub file for a template that could not be obtained."""
    return f"""// {path}
// This file could not be fetched automatically.
// Copy it from @chadcn/ui/src/components/{path}
// Or install @chadcn/ui directly: npm install @chadcn/ui

export {{}};
"""


class TemplateProvider:
    """
    Produces file payloads for components.

    Example:
        provider = TemplateProvider(build_registry())
        for file in provider.fetch("button"):
            print(file.name, file.source)
    """

    def __init__(
        self,
        registry: Registry,
        embedded: EmbeddedTemplates | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        fetcher: Fetcher | None = None,
    ):
        """
        Initialize the provider.

        Args:
            registry: Catalog giving each component's declared files
            embedded: Snapshot mapping (loaded from the package if not provided)
            base_url: Remote base URL (CHADCN_REGISTRY_URL or the default if not provided)
            timeout: Remote fetch timeout in seconds
            fetcher: Replacement for the HTTP fetch, mainly for tests
        """
        self.registry = registry
        self._embedded = embedded
        self.base_url = (base_url or get_registry_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_fetch_timeout()
        self._fetcher = fetcher

    @property
    def embedded(self) -> EmbeddedTemplates:
        if self._embedded is None:
            self._embedded = load_embedded_templates()
        return self._embedded

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def fetch(self, component_name: str) -> list[ComponentFile]:
        """
        Get every declared file of a component.

        Never raises for unavailable templates; those become placeholders.
        """
        component = self.registry.require(component_name)
        return [self._fetch_file(component_name, path) for path in component.files]

    def fetch_many(
        self, component_names: Sequence[str], max_workers: int = 4
    ) -> dict[str, list[ComponentFile]]:
        """
        Fetch several components concurrently.

        The result preserves the order of component_names regardless of
        completion order.
        """
        if max_workers <= 1 or len(component_names) <= 1:
            return {name: self.fetch(name) for name in component_names}

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(self.fetch, component_names))
        return dict(zip(component_names, results, strict=True))

    def _fetch_file(self, component_name: str, path: str) -> ComponentFile:
        content = self.embedded.get(component_name, {}).get(path)
        if content is not None:
            return ComponentFile(name=path, content=content, source=TemplateSource.EMBEDDED)

        try:
            content = self._fetch_remote(component_name, path)
        except TemplateUnavailableError as e:
            logger.warning("%s; writing placeholder", e.message)
            return ComponentFile(
                name=path, content=placeholder_content(path), source=TemplateSource.PLACEHOLDER
            )
        return ComponentFile(name=path, content=content, source=TemplateSource.REMOTE)

    def _fetch_remote(self, component_name: str, path: str) -> str:
        url = self.url_for(path)
        logger.debug("Fetching %s from %s", path, url)
        if self._fetcher is None:
            content = fetch_remote(url, timeout=self.timeout)
        else:
            try:
                content = self._fetcher(url)
            except (httpx.HTTPError, OSError) as e:
                raise TemplateUnavailableError(component_name, path, str(e)) from e
        if content is None:
            raise TemplateUnavailableError(component_name, path, f"not found at {url}")
        return content
