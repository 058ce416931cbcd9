"""package.json reading and license field updates."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

__all__ = [
    "DEFAULT_MANIFEST",
    "ManifestError",
    "manifest_author",
    "read_manifest",
    "update_manifest_license",
]

log = logging.getLogger(__name__)

DEFAULT_MANIFEST = Path("package.json")


class ManifestError(ValueError):
    """Raised when the manifest is not a valid JSON object."""


def read_manifest(path: Path = DEFAULT_MANIFEST, field: str | None = None) -> Any:
    """Load the manifest at *path*.

    Returns the whole parsed document, or the value of *field* (``None``
    when absent) if one is requested.

    Raises:
        FileNotFoundError: If the manifest does not exist.
        ManifestError: If the file is not valid JSON or not a JSON object.
    """
    data = _load(path)
    if field is not None:
        return data.get(field)
    return data


def manifest_author(manifest: dict[str, Any]) -> str:
    """Return the author name from a manifest, or an empty string.

    ``author`` may be a plain string or an object with a ``name`` key.
    """
    author = manifest.get("author")
    if isinstance(author, str):
        return author
    if isinstance(author, dict):
        name = author.get("name")
        if isinstance(name, str):
            return name
    return ""


def update_manifest_license(license_id: str, path: Path = DEFAULT_MANIFEST) -> Path:
    """Re-read the manifest, set its ``license`` field and write it back.

    All other keys keep their order. The file is written with 2-space
    indentation and keeps a trailing newline if it had one.
    """
    resolved = path.resolve()
    raw = _read_text(resolved)
    data = _parse(raw, resolved)
    data["license"] = license_id
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if raw.endswith("\n"):
        text += "\n"
    resolved.write_text(text, encoding="utf-8")
    log.debug("Set license=%s in %s", license_id, resolved)
    return resolved


def _load(path: Path) -> dict[str, Any]:
    resolved = path.resolve()
    return _parse(_read_text(resolved), resolved)


def _read_text(resolved: Path) -> str:
    if not resolved.is_file():
        msg = f"Manifest not found: {resolved}"
        raise FileNotFoundError(msg)
    return resolved.read_text(encoding="utf-8")


def _parse(raw: str, resolved: Path) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Invalid manifest {resolved}: {exc}"
        raise ManifestError(msg) from exc
    if not isinstance(data, dict):
        msg = f"Invalid manifest (expected JSON object): {resolved}"
        raise ManifestError(msg)
    return data
