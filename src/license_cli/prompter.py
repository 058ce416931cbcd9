"""Interactive prompt collaborators.

``Prompter`` is the interface the question set talks to: ask a question,
get a typed answer back, or learn that the user cancelled. ``RichPrompter``
implements it on top of ``rich.prompt``; ``ScriptedPrompter`` replays
canned answers for tests and non-interactive callers.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TextIO, runtime_checkable

from rich.console import Console
from rich.prompt import IntPrompt, InvalidResponse, Prompt
from rich.table import Table
from rich.text import TextType

__all__ = [
    "ACCEPT_DEFAULT",
    "CANCEL",
    "Choice",
    "PromptCancelled",
    "Prompter",
    "RichPrompter",
    "ScriptedPrompter",
    "Validator",
]

Validator = Callable[[Any], "str | None"]


class PromptCancelled(Exception):
    """Raised when the user aborts an interactive question."""


@dataclass(frozen=True)
class Choice:
    """One option of a select question."""

    title: str
    value: str
    description: str = ""


@runtime_checkable
class Prompter(Protocol):
    """Asks questions and returns typed answers."""

    def select(self, message: str, choices: Sequence[Choice], default: str) -> str:
        """Return the value of the chosen option."""
        ...

    def text(self, message: str, default: str, validate: Validator | None = None) -> str:
        """Return free-text input."""
        ...

    def number(self, message: str, default: int, validate: Validator | None = None) -> int:
        """Return integer input."""
        ...


class _LineInputMixin:
    """Make stream input behave like terminal input.

    A blank line accepts the default and end-of-stream raises ``EOFError``.
    """

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: TextType,
        password: bool,
        stream: TextIO | None = None,
    ) -> str:
        value: str = super().get_input(console, prompt, password, stream=stream)  # type: ignore[misc]
        if stream is None:
            return value
        if value == "":
            raise EOFError
        return value.rstrip("\r\n")


class _SelectPrompt(_LineInputMixin, Prompt):
    pass


class _ValidatedPrompt(_LineInputMixin, Prompt):
    def __init__(self, prompt: str, *, validate: Validator | None, **kwargs: Any) -> None:
        super().__init__(prompt, **kwargs)
        self._validate = validate

    def process_response(self, value: str) -> str:
        result = super().process_response(value)
        _check(self._validate, result)
        return result


class _ValidatedIntPrompt(_LineInputMixin, IntPrompt):
    validate_error_message = "[prompt.invalid]Please enter a valid number"

    def __init__(self, prompt: str, *, validate: Validator | None, **kwargs: Any) -> None:
        super().__init__(prompt, **kwargs)
        self._validate = validate

    def process_response(self, value: str) -> int:
        result = super().process_response(value)
        _check(self._validate, result)
        return result


def _check(validate: Validator | None, value: Any) -> None:
    if validate is None:
        return
    error = validate(value)
    if error:
        raise InvalidResponse(f"[prompt.invalid]{error}")


class RichPrompter:
    """Prompter backed by ``rich.prompt``.

    Invalid answers print the validation message and ask again. Ctrl-C and
    end-of-input are reported as ``PromptCancelled``. *stream* replaces
    standard input, which is mainly useful in tests.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self._console = console or Console()
        self._stream = stream

    @property
    def console(self) -> Console:
        return self._console

    def select(self, message: str, choices: Sequence[Choice], default: str) -> str:
        values = [choice.value for choice in choices]
        show_inline = len(choices) <= 4
        if not show_inline:
            self._console.print(_choice_table(choices))
        prompt = _SelectPrompt(
            message,
            console=self._console,
            choices=values,
            show_choices=show_inline,
        )
        return self._ask(prompt, default)

    def text(self, message: str, default: str, validate: Validator | None = None) -> str:
        prompt = _ValidatedPrompt(message, console=self._console, validate=validate)
        return self._ask(prompt, default)

    def number(self, message: str, default: int, validate: Validator | None = None) -> int:
        prompt = _ValidatedIntPrompt(message, console=self._console, validate=validate)
        return self._ask(prompt, default)

    def _ask(self, prompt: Prompt | IntPrompt, default: Any) -> Any:
        try:
            return prompt(default=default, stream=self._stream)
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptCancelled from exc


def _choice_table(choices: Sequence[Choice]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("License", style="cyan")
    table.add_column("Description")
    for choice in choices:
        table.add_row(choice.title, choice.description)
    return table


ACCEPT_DEFAULT: Any = object()
"""Scripted response meaning "press enter and take the default"."""

CANCEL: Any = object()
"""Scripted response meaning "the user aborted here"."""


class ScriptedPrompter:
    """Deterministic prompter that replays a list of responses.

    Responses are consumed in order. Invalid responses are recorded in
    ``errors`` and the same question consumes the next response, mirroring
    an interactive re-ask. Running out of responses counts as cancellation.
    """

    def __init__(self, responses: Sequence[Any]) -> None:
        self._responses = list(responses)
        self.asked: list[str] = []
        self.errors: list[str] = []

    def select(self, message: str, choices: Sequence[Choice], default: str) -> str:
        values = {choice.value for choice in choices}

        def _in_choices(value: Any) -> str | None:
            return None if value in values else "Please select one of the available options"

        return str(self._answer(message, default, _in_choices))

    def text(self, message: str, default: str, validate: Validator | None = None) -> str:
        return str(self._answer(message, default, validate))

    def number(self, message: str, default: int, validate: Validator | None = None) -> int:
        return int(self._answer(message, default, validate))

    def _answer(self, message: str, default: Any, validate: Validator | None) -> Any:
        self.asked.append(message)
        while True:
            if not self._responses:
                raise PromptCancelled
            response = self._responses.pop(0)
            if response is CANCEL:
                raise PromptCancelled
            if response is ACCEPT_DEFAULT:
                return default
            error = validate(response) if validate is not None else None
            if error:
                self.errors.append(error)
                continue
            return response
