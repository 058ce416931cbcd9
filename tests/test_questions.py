"""Tests for the interactive question set."""

from __future__ import annotations

import datetime as dt
from pathlib import Path
from unittest import mock

import pytest

from license_cli.prompter import ACCEPT_DEFAULT, CANCEL, ScriptedPrompter
from license_cli.questions import (
    FUTURE_YEAR_MESSAGE,
    MISSING_PATH_MESSAGE,
    NOT_A_DIRECTORY_MESSAGE,
    QuestionKind,
    ask_questions,
    build_questions,
    file_name_choices,
    license_choices,
    validate_path,
    validate_year,
)

TODAY = dt.date(2024, 6, 1)


class TestValidateYear:
    def test_current_year_accepted(self) -> None:
        assert validate_year(2024, TODAY) is None

    def test_past_year_accepted(self) -> None:
        assert validate_year(1999, TODAY) is None

    def test_future_year_rejected(self) -> None:
        assert validate_year(2025, TODAY) == FUTURE_YEAR_MESSAGE

    def test_defaults_to_today(self) -> None:
        this_year = dt.date.today().year
        assert validate_year(this_year) is None
        assert validate_year(this_year + 1) == FUTURE_YEAR_MESSAGE


class TestValidatePath:
    def test_existing_directory(self, tmp_path: Path) -> None:
        assert validate_path(str(tmp_path)) is None

    def test_current_directory(self) -> None:
        assert validate_path("./") is None

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert validate_path(str(tmp_path / "nope")) == MISSING_PATH_MESSAGE

    def test_regular_file_rejected(self, tmp_path: Path) -> None:
        target = tmp_path / "LICENSE"
        target.write_text("", encoding="utf-8")
        assert validate_path(str(target)) == NOT_A_DIRECTORY_MESSAGE


class TestBuildQuestions:
    def test_known_license_skips_license_question(self) -> None:
        questions = build_questions({"license": "MIT", "author": "Jane"}, TODAY)
        assert [q.name for q in questions] == ["name", "year", "file_name", "path"]

    @pytest.mark.parametrize("manifest", [{}, {"license": "Proprietary"}, {"license": None}])
    def test_license_question_appended_last(self, manifest: dict[str, object]) -> None:
        questions = build_questions(manifest, TODAY)

        assert [q.name for q in questions] == ["name", "year", "file_name", "path", "license"]
        license_question = questions[-1]
        assert license_question.kind is QuestionKind.SELECT
        assert license_question.default == "unlicense"
        assert license_question.choices == license_choices()

    def test_author_default_from_string(self) -> None:
        questions = build_questions({"author": "Jane Doe"}, TODAY)
        assert questions[0].default == "Jane Doe"

    def test_author_default_from_object(self) -> None:
        questions = build_questions({"author": {"name": "Jane Doe"}}, TODAY)
        assert questions[0].default == "Jane Doe"

    def test_author_default_empty(self) -> None:
        assert build_questions({}, TODAY)[0].default == ""

    def test_year_question(self) -> None:
        year = build_questions({}, TODAY)[1]
        assert year.kind is QuestionKind.NUMBER
        assert year.default == 2024
        assert year.validate is not None
        assert year.validate(2025) == FUTURE_YEAR_MESSAGE
        assert year.validate(2024) is None

    def test_file_name_question(self) -> None:
        file_name = build_questions({}, TODAY)[2]
        assert file_name.default == "LICENSE"
        assert [c.value for c in file_name.choices] == ["LICENSE", "LICENSE.md", "LICENSE.txt"]
        assert file_name.choices == file_name_choices()

    def test_path_question(self) -> None:
        path = build_questions({}, TODAY)[3]
        assert path.default == "./"
        assert path.validate is not None
        assert path.validate("./") is None


class TestAskQuestions:
    def test_collects_answers_in_order(self, tmp_path: Path) -> None:
        prompter = ScriptedPrompter(["Jane", 2020, "LICENSE.md", str(tmp_path), "mit"])

        answers = ask_questions(build_questions({}, TODAY), prompter)

        assert answers == {
            "name": "Jane",
            "year": 2020,
            "file_name": "LICENSE.md",
            "path": str(tmp_path),
            "license": "mit",
        }
        assert prompter.asked[-1] == "Pick a license"

    def test_defaults(self) -> None:
        prompter = ScriptedPrompter([ACCEPT_DEFAULT] * 5)

        answers = ask_questions(build_questions({"author": "Jane"}, TODAY), prompter)

        assert answers == {
            "name": "Jane",
            "year": 2024,
            "file_name": "LICENSE",
            "path": "./",
            "license": "unlicense",
        }

    def test_future_year_is_reasked(self) -> None:
        prompter = ScriptedPrompter(["Jane", 2030, 2024, ACCEPT_DEFAULT, ACCEPT_DEFAULT])

        answers = ask_questions(build_questions({"license": "mit"}, TODAY), prompter)

        assert answers is not None
        assert answers["year"] == 2024
        assert prompter.errors == [FUTURE_YEAR_MESSAGE]

    def test_missing_path_is_reasked(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "missing")
        prompter = ScriptedPrompter(["Jane", 2024, "LICENSE", missing, str(tmp_path)])

        answers = ask_questions(build_questions({"license": "mit"}, TODAY), prompter)

        assert answers is not None
        assert answers["path"] == str(tmp_path)
        assert prompter.errors == [MISSING_PATH_MESSAGE]

    def test_file_path_is_reasked(self, tmp_path: Path) -> None:
        existing = tmp_path / "package.json"
        existing.write_text("{}", encoding="utf-8")
        prompter = ScriptedPrompter(["Jane", 2024, "LICENSE", str(existing), str(tmp_path)])

        answers = ask_questions(build_questions({"license": "mit"}, TODAY), prompter)

        assert answers is not None
        assert answers["path"] == str(tmp_path)
        assert prompter.errors == [NOT_A_DIRECTORY_MESSAGE]

    def test_cancel_calls_callback_and_returns_none(self) -> None:
        on_cancel = mock.Mock()
        prompter = ScriptedPrompter([CANCEL])

        answers = ask_questions(build_questions({}, TODAY), prompter, on_cancel)

        assert answers is None
        on_cancel.assert_called_once_with()
        assert prompter.asked == ["What is your name?"]

    def test_cancel_midway(self) -> None:
        on_cancel = mock.Mock()
        prompter = ScriptedPrompter(["Jane", 2024, CANCEL])

        assert ask_questions(build_questions({}, TODAY), prompter, on_cancel) is None
        on_cancel.assert_called_once_with()
