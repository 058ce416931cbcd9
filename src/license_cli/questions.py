"""Interactive question set.

The questions asked in a session depend on the manifest: the license
picker is only shown when the manifest does not already name a known
license. Questions are plain data and are asked in order through a
``Prompter``.
"""

from __future__ import annotations

import datetime as _dt
import enum
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from license_cli.catalog import get_catalog, preselect_license
from license_cli.manifest import manifest_author
from license_cli.models import LicenseFileName
from license_cli.prompter import Choice, PromptCancelled, Prompter, Validator

__all__ = [
    "FUTURE_YEAR_MESSAGE",
    "MISSING_PATH_MESSAGE",
    "NOT_A_DIRECTORY_MESSAGE",
    "Question",
    "QuestionKind",
    "ask_questions",
    "build_questions",
    "cleanup",
    "file_name_choices",
    "license_choices",
    "validate_path",
    "validate_year",
]

log = logging.getLogger(__name__)

FUTURE_YEAR_MESSAGE = "Year can't be in the future"
MISSING_PATH_MESSAGE = "Path does not exist"
NOT_A_DIRECTORY_MESSAGE = "Path is not a directory"

_FILE_NAME_DESCRIPTIONS = {
    LicenseFileName.BARE: "No file extension (LICENSE)",
    LicenseFileName.MARKDOWN: "Markdown File",
    LicenseFileName.TEXT: "Text File",
}


class QuestionKind(enum.Enum):
    """Widget used to ask a question."""

    SELECT = "select"
    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True)
class Question:
    """A single interactive question and how to answer it."""

    name: str
    kind: QuestionKind
    message: str
    default: Any
    choices: tuple[Choice, ...] = ()
    validate: Validator | None = field(default=None, compare=False)


def validate_year(year: int, today: _dt.date | None = None) -> str | None:
    """Reject years after the current one."""
    current = (today or _dt.date.today()).year
    if year > current:
        return FUTURE_YEAR_MESSAGE
    return None


def validate_path(path: str) -> str | None:
    """Reject paths that are missing or are not directories at validation time."""
    target = Path(path)
    if not target.exists():
        return MISSING_PATH_MESSAGE
    if not target.is_dir():
        return NOT_A_DIRECTORY_MESSAGE
    return None


def license_choices() -> tuple[Choice, ...]:
    return tuple(
        Choice(title=item.title, value=item.id, description=item.description)
        for item in get_catalog()
    )


def file_name_choices() -> tuple[Choice, ...]:
    return tuple(
        Choice(title=variant.value, value=variant.value, description=description)
        for variant, description in _FILE_NAME_DESCRIPTIONS.items()
    )


def build_questions(manifest: dict[str, Any], today: _dt.date | None = None) -> list[Question]:
    """Return the ordered questions for a session.

    The license question is appended last, and only when the manifest's
    ``license`` value does not match a catalog title.
    """
    day = today or _dt.date.today()
    questions = [
        Question(
            name="name",
            kind=QuestionKind.TEXT,
            message="What is your name?",
            default=manifest_author(manifest),
        ),
        Question(
            name="year",
            kind=QuestionKind.NUMBER,
            message="License Year?",
            default=day.year,
            validate=lambda value: validate_year(value, day),
        ),
        Question(
            name="file_name",
            kind=QuestionKind.SELECT,
            message="What's your extension?",
            default=LicenseFileName.BARE.value,
            choices=file_name_choices(),
        ),
        Question(
            name="path",
            kind=QuestionKind.TEXT,
            message="Where do you want to save the file?",
            default="./",
            validate=validate_path,
        ),
    ]
    if preselect_license(manifest.get("license")) is None:
        choices = license_choices()
        questions.append(
            Question(
                name="license",
                kind=QuestionKind.SELECT,
                message="Pick a license",
                default=choices[0].value,
                choices=choices,
            )
        )
    return questions


def cleanup() -> None:
    """Cancellation callback; a cancelled session has nothing to undo."""


def ask_questions(
    questions: Sequence[Question],
    prompter: Prompter,
    on_cancel: Callable[[], None] = cleanup,
) -> dict[str, Any] | None:
    """Ask *questions* in order and return answers keyed by question name.

    Returns ``None`` after calling *on_cancel* if the user cancels.
    """
    answers: dict[str, Any] = {}
    for question in questions:
        try:
            answers[question.name] = _ask(question, prompter)
        except PromptCancelled:
            log.debug("Session cancelled at question '%s'", question.name)
            on_cancel()
            return None
    return answers


def _ask(question: Question, prompter: Prompter) -> Any:
    if question.kind is QuestionKind.SELECT:
        return prompter.select(question.message, question.choices, question.default)
    if question.kind is QuestionKind.NUMBER:
        return prompter.number(question.message, question.default, question.validate)
    return prompter.text(question.message, question.default, question.validate)
