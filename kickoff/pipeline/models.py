"""Data model for the scaffolding pipeline.

Releases and templates are parsed from their remote JSON payloads into
frozen dataclasses. RunContext is the one mutable record threaded through
every stage of a run.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from packaging.version import InvalidVersion, Version


def parse_major(version: str) -> int:
    """Return the major component of a version string.

    Accepts an optional leading "v", as printed by ``node -v``.

    Raises:
        ValueError: If packaging cannot parse the string as a version
    """
    try:
        return Version(version.strip()).major
    except InvalidVersion as e:
        raise ValueError(f"Not a semantic version: {version!r}") from e


@dataclass(frozen=True)
class ReleaseInfo:
    """One published Node.js release from the release index.

    Attributes:
        version: Version string, e.g. "v20.10.0"
        date: Release date (YYYY-MM-DD)
        is_lts: True if the release belongs to an LTS line
        lts_name: LTS codename (e.g. "Iron"), or None
        files: Platform artifacts published for the release
        npm, v8, uv, zlib, openssl, modules: Bundled component versions
        security: True if the release is a security release
    """

    version: str
    date: str = ""
    is_lts: bool = False
    lts_name: str | None = None
    files: tuple[str, ...] = ()
    npm: str | None = None
    v8: str | None = None
    uv: str | None = None
    zlib: str | None = None
    openssl: str | None = None
    modules: str | None = None
    security: bool = False

    @property
    def major(self) -> int:
        return parse_major(self.version)

    @classmethod
    def from_dict(cls, data: Any) -> ReleaseInfo:
        """Build a release from one entry of the index.

        The upstream ``lts`` field is ``false`` or the codename string.

        Raises:
            ValueError: If the entry is not an object with a string version
        """
        if not isinstance(data, dict):
            raise ValueError(f"Release entry must be an object, got {type(data).__name__}")
        version = data.get("version")
        if not isinstance(version, str) or not version:
            raise ValueError("Release entry has no version")

        lts = data.get("lts", False)
        lts_name = lts if isinstance(lts, str) and lts else None

        def _optional_str(key: str) -> str | None:
            value = data.get(key)
            return None if value is None else str(value)

        return cls(
            version=version,
            date=str(data.get("date", "")),
            is_lts=bool(lts),
            lts_name=lts_name,
            files=tuple(str(f) for f in data.get("files") or ()),
            npm=_optional_str("npm"),
            v8=_optional_str("v8"),
            uv=_optional_str("uv"),
            zlib=_optional_str("zlib"),
            openssl=_optional_str("openssl"),
            modules=_optional_str("modules"),
            security=bool(data.get("security", False)),
        )


@dataclass(frozen=True)
class VersionCatalog:
    """Ordered list of releases, newest first as published upstream."""

    releases: tuple[ReleaseInfo, ...] = ()

    def __iter__(self) -> Iterator[ReleaseInfo]:
        return iter(self.releases)

    def __len__(self) -> int:
        return len(self.releases)

    @classmethod
    def from_json(cls, payload: Any) -> VersionCatalog:
        """Parse the release index payload.

        Raises:
            ValueError: If the payload is not a list of release objects
        """
        if not isinstance(payload, list):
            raise ValueError(f"Release index must be a list, got {type(payload).__name__}")
        return cls(releases=tuple(ReleaseInfo.from_dict(item) for item in payload))

    def latest_lts(self) -> ReleaseInfo | None:
        """First LTS release in catalog order, or None if there is none."""
        return next((r for r in self.releases if r.is_lts), None)


@dataclass(frozen=True)
class TemplateDescriptor:
    """One installable template from the manifest."""

    name: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> TemplateDescriptor:
        """Build a descriptor from a manifest entry.

        The identifier is read from ``name`` (or ``value``), the text
        from ``desc`` (or ``description``).

        Raises:
            ValueError: If the entry has no identifier
        """
        if not isinstance(data, dict):
            raise ValueError(f"Template entry must be an object, got {type(data).__name__}")
        name = data.get("name") or data.get("value")
        if not isinstance(name, str) or not name:
            raise ValueError("Template entry has no name")
        description = data.get("desc") or data.get("description") or ""
        return cls(name=name, description=str(description))


@dataclass(frozen=True)
class TemplateCatalog:
    """Ordered list of templates. Names should be unique; lookups use the first match."""

    templates: tuple[TemplateDescriptor, ...] = ()

    def __iter__(self) -> Iterator[TemplateDescriptor]:
        return iter(self.templates)

    def __len__(self) -> int:
        return len(self.templates)

    @classmethod
    def from_json(cls, payload: Any) -> TemplateCatalog:
        """Parse the template manifest payload.

        Raises:
            ValueError: If the payload is not a list of template objects
        """
        if not isinstance(payload, list):
            raise ValueError(f"Template manifest must be a list, got {type(payload).__name__}")
        return cls(templates=tuple(TemplateDescriptor.from_dict(item) for item in payload))

    def find(self, name: str) -> TemplateDescriptor | None:
        """Exact, case-sensitive lookup by name."""
        return next((t for t in self.templates if t.name == name), None)

    def names(self) -> list[str]:
        return [t.name for t in self.templates]


class PipelineState(Enum):
    """Progress of a pipeline run."""

    INIT = "init"
    VERSIONS_FETCHED = "versions_fetched"
    RUNTIME_RECONCILED = "runtime_reconciled"
    TEMPLATES_FETCHED = "templates_fetched"
    TEMPLATE_SELECTED = "template_selected"
    PULLED = "pulled"
    FAILED = "failed"


@dataclass
class RunContext:
    """State accumulated by one pipeline run.

    Created empty; each stage only writes its own fields.
    """

    # Stage 1: release catalog
    version_catalog: VersionCatalog | None = None
    lts_version: str | None = None
    lts_major: int | None = None

    # Stage 2: local runtime
    current_version: str | None = None
    current_major: int | None = None
    runtime_install_attempted: bool = False
    runtime_install_error: str | None = None

    # Stage 3-4: templates
    template_catalog: TemplateCatalog | None = None
    selected_template: str | None = None
    prompted_for_template: bool = False

    # Stage 5: destination
    destination_dir: str | None = None
    prompted_for_directory: bool = False

    state: PipelineState = PipelineState.INIT
    failed_stage: PipelineState | None = None
    completed_states: list[PipelineState] = field(default_factory=list)

    def advance(self, state: PipelineState) -> None:
        """Record that a stage finished."""
        self.state = state
        self.completed_states.append(state)

    def fail(self) -> None:
        """Mark the run as failed after the last completed stage."""
        self.failed_stage = self.state
        self.state = PipelineState.FAILED


__all__ = [
    "PipelineState",
    "ReleaseInfo",
    "RunContext",
    "TemplateCatalog",
    "TemplateDescriptor",
    "VersionCatalog",
    "parse_major",
]
