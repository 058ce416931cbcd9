"""Core data models for license-cli.

This module defines the typed dataclasses and enumerations passed between
the steps of a generation run:

- **Catalog-related**: LicenseDescriptor
- **Session-related**: LicenseFileName, Answers
- **Outcome-related**: RenderResult, GenerationOutcome
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class LicenseFileName(enum.Enum):
    """Name variants offered for the generated license file."""

    BARE = "LICENSE"
    MARKDOWN = "LICENSE.md"
    TEXT = "LICENSE.txt"


# ---------------------------------------------------------------------------
# Catalog-related models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LicenseDescriptor:
    """A supported license: short identifier, display title and description."""

    id: str
    title: str
    description: str


# ---------------------------------------------------------------------------
# Session-related models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Answers:
    """Values collected during one interactive session."""

    license: str
    name: str
    year: int
    file_name: str
    path: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Answers:
        """Build answers from a prompt response mapping."""
        return cls(
            license=str(data["license"]).lower(),
            name=str(data["name"]),
            year=int(data["year"]),
            file_name=str(data["file_name"]),
            path=str(data["path"]),
        )


# ---------------------------------------------------------------------------
# Outcome-related models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenderResult:
    """Outcome of rendering a license template.

    ``text`` holds the rendered license when the template could be loaded;
    otherwise it is ``None`` and ``error`` describes what went wrong.
    """

    license_id: str
    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return isinstance(self.text, str)


@dataclass(frozen=True)
class GenerationOutcome:
    """Result of a completed (non-cancelled) generation run."""

    answers: Answers
    render: RenderResult
    output_path: Path | None = None


# ---------------------------------------------------------------------------
# Exports
# ---------------------------------------------------------------------------

__all__ = [
    "Answers",
    "GenerationOutcome",
    "LicenseDescriptor",
    "LicenseFileName",
    "RenderResult",
]
