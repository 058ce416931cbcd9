"""License catalog loading and lookup.

The catalog is packaged as ``data/licenses.yaml``. It is parsed and
validated once per process and shared read-only afterwards.
"""

from __future__ import annotations

import functools
import importlib.resources
from collections.abc import Iterable
from typing import Any

import yaml

from license_cli.models import LicenseDescriptor

__all__ = [
    "CatalogError",
    "get_catalog",
    "get_license",
    "license_ids",
    "parse_catalog",
    "preselect_license",
]

_CATALOG_RESOURCE = ("data", "licenses.yaml")
_ENTRY_KEYS = frozenset(("id", "title", "description"))


class CatalogError(ValueError):
    """Raised when the license catalog fails validation."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = [error for error in errors if error]
        details = "\n".join(f"- {error}" for error in self.errors)
        message = "Invalid license catalog"
        if details:
            message = f"{message}\n{details}"
        super().__init__(message)


@functools.cache
def get_catalog() -> tuple[LicenseDescriptor, ...]:
    """Return the packaged license catalog in display order."""
    resource = importlib.resources.files("license_cli").joinpath(*_CATALOG_RESOURCE)
    return parse_catalog(resource.read_text(encoding="utf-8"))


def parse_catalog(raw: str) -> tuple[LicenseDescriptor, ...]:
    """Parse and validate catalog YAML text."""
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise CatalogError([f"YAML parse error: {str(exc).strip()}"]) from exc

    if not isinstance(data, dict) or not isinstance(data.get("licenses"), list):
        raise CatalogError(["Top-level document must be a mapping with a 'licenses' list."])

    entries: list[Any] = data["licenses"]
    if not entries:
        raise CatalogError(["'licenses' must contain at least one entry."])

    errors: list[str] = []
    seen: set[str] = set()
    descriptors: list[LicenseDescriptor] = []
    for index, entry in enumerate(entries):
        label = f"licenses[{index}]"
        if not isinstance(entry, dict):
            errors.append(f"{label} must be a mapping")
            continue
        missing = sorted(_ENTRY_KEYS - entry.keys())
        if missing:
            errors.append(f"{label} is missing keys: {', '.join(missing)}")
            continue
        if not all(isinstance(entry[key], str) and entry[key].strip() for key in _ENTRY_KEYS):
            errors.append(f"{label} values must be non-empty strings")
            continue
        license_id = entry["id"].strip()
        if license_id != license_id.lower():
            errors.append(f"{label}.id must be lowercase: {license_id}")
            continue
        if license_id in seen:
            errors.append(f"Duplicate license id: {license_id}")
            continue
        seen.add(license_id)
        descriptors.append(
            LicenseDescriptor(
                id=license_id,
                title=entry["title"].strip(),
                description=entry["description"].strip(),
            )
        )

    if errors:
        raise CatalogError(errors)
    return tuple(descriptors)


def license_ids() -> list[str]:
    """Return catalog identifiers in display order."""
    return [descriptor.id for descriptor in get_catalog()]


def get_license(license_id: str) -> LicenseDescriptor:
    """Return the descriptor for *license_id*.

    Raises:
        KeyError: If the identifier is not in the catalog.
    """
    for descriptor in get_catalog():
        if descriptor.id == license_id:
            return descriptor
    raise KeyError(license_id)


def preselect_license(value: object) -> str | None:
    """Return the catalog id whose title matches a manifest license value.

    Matching is case-insensitive on the manifest side. Anything that is not
    a string, or does not match a title, yields ``None``.
    """
    if not isinstance(value, str) or not value:
        return None
    wanted = value.lower()
    for descriptor in get_catalog():
        if descriptor.title == wanted:
            return descriptor.id
    return None
