"""License template loading and placeholder substitution."""

from __future__ import annotations

import importlib.resources
import logging
import os
from importlib.resources.abc import Traversable
from pathlib import Path

from license_cli.models import RenderResult

__all__ = [
    "NAME_PLACEHOLDER",
    "YEAR_PLACEHOLDER",
    "load_template",
    "render_license",
    "resolve_templates_dir",
]

log = logging.getLogger(__name__)

NAME_PLACEHOLDER = "{{.Name}}"
YEAR_PLACEHOLDER = "{{.Year}}"

_ENV_VAR = "LICENSE_CLI_TEMPLATES"
_TEMPLATE_SUFFIX = ".tmpl"


def resolve_templates_dir(cli_value: Path | None = None) -> Path | None:
    """Return the template directory override, if any.

    The ``--templates`` flag wins over the ``LICENSE_CLI_TEMPLATES``
    environment variable. ``None`` means the packaged templates are used.
    """
    if cli_value is not None:
        return cli_value
    env_value = os.environ.get(_ENV_VAR, "").strip()
    return Path(env_value) if env_value else None


def load_template(license_id: str, templates_dir: Path | None = None) -> str:
    """Read the raw ``<license_id>.tmpl`` template text.

    Raises:
        FileNotFoundError: If no template exists for *license_id*.
        OSError: If the template cannot be read.
    """
    filename = f"{license_id}{_TEMPLATE_SUFFIX}"
    resource: Traversable | Path
    if templates_dir is None:
        resource = importlib.resources.files("license_cli").joinpath("templates", filename)
    else:
        resource = templates_dir / filename
    if not resource.is_file():
        msg = f"Template not found for license '{license_id}': {filename}"
        raise FileNotFoundError(msg)
    return resource.read_text(encoding="utf-8")


def render_license(
    license_id: str,
    name: str,
    year: int,
    templates_dir: Path | None = None,
) -> RenderResult:
    """Render the template for *license_id* with *name* and *year*.

    Only the first occurrence of each placeholder is replaced. Template
    load failures are logged and reported through the returned result.
    """
    try:
        template = load_template(license_id, templates_dir)
    except OSError as exc:
        log.error("Could not load license template: %s", exc)
        return RenderResult(license_id=license_id, error=str(exc))

    text = template.replace(NAME_PLACEHOLDER, name, 1).replace(YEAR_PLACEHOLDER, str(year), 1)
    return RenderResult(license_id=license_id, text=text)
