"""License file output."""

from __future__ import annotations

import logging
from pathlib import Path

from license_cli.models import Answers

__all__ = ["output_path", "write_license"]

log = logging.getLogger(__name__)


def output_path(answers: Answers) -> Path:
    """Return the absolute path the license file will be written to."""
    return (Path(answers.path) / answers.file_name).resolve()


def write_license(answers: Answers, text: str) -> Path:
    """Write *text* to the answered directory and file name.

    An existing file is overwritten. The directory is not created.

    Returns:
        The resolved absolute path of the written file.
    """
    target = output_path(answers)
    target.write_text(text, encoding="utf-8")
    log.debug("Wrote %d characters to %s", len(text), target)
    return target
