"""Generation flow: manifest -> questions -> render -> update -> write."""

from __future__ import annotations

import datetime as _dt
import logging
from collections.abc import Callable
from pathlib import Path

from license_cli.catalog import preselect_license
from license_cli.manifest import DEFAULT_MANIFEST, read_manifest, update_manifest_license
from license_cli.models import Answers, GenerationOutcome
from license_cli.prompter import Prompter
from license_cli.questions import ask_questions, build_questions, cleanup
from license_cli.render import render_license
from license_cli.writer import write_license

__all__ = ["generate"]

log = logging.getLogger(__name__)


def generate(
    prompter: Prompter,
    manifest_path: Path = DEFAULT_MANIFEST,
    *,
    today: _dt.date | None = None,
    templates_dir: Path | None = None,
    on_cancel: Callable[[], None] = cleanup,
) -> GenerationOutcome | None:
    """Run one interactive generation session.

    Returns ``None`` when the user cancelled; nothing is written in that
    case. Otherwise the manifest's ``license`` field is updated, and the
    license file is written when the template rendered.

    Raises:
        FileNotFoundError: If the manifest does not exist.
        ManifestError: If the manifest cannot be parsed.
        OSError: If the license file cannot be written.
    """
    manifest = read_manifest(manifest_path)
    preselected = preselect_license(manifest.get("license"))
    if preselected is not None:
        log.debug("Using license '%s' from %s", preselected, manifest_path)

    questions = build_questions(manifest, today)
    response = ask_questions(questions, prompter, on_cancel)
    if response is None:
        return None

    answers = Answers.from_mapping({"license": preselected, **response})
    render = render_license(answers.license, answers.name, answers.year, templates_dir)

    # The manifest is updated even when rendering failed.
    update_manifest_license(answers.license, manifest_path)

    if render.text is None:
        log.warning("No license file written for '%s'", answers.license)
        return GenerationOutcome(answers=answers, render=render)

    path = write_license(answers, render.text)
    return GenerationOutcome(answers=answers, render=render, output_path=path)
