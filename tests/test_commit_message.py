"""
Tests for the commit message checker.
"""

import pytest

from check_commit_message import ALLOWED_TYPES, check_message, main


class TestCheckMessage:
    """Conventional Commits rules."""

    @pytest.mark.parametrize(
        "message",
        [
            "feat: add step-up SIP calculator",
            "fix(tax): cap 80D deductions at the limit",
            "refactor(loan)!: rename term argument to months",
            "docs: describe CLI exit codes\n\nExplain the 0/1/2 convention.\n\nRefs: #42",
        ],
    )
    def test_valid_messages(self, message):
        assert check_message(message) == ([], [])

    def test_unknown_type(self):
        errors, _ = check_message("feature: add step-up SIP calculator")
        assert any("type must be one of" in e for e in errors)

    def test_header_too_long(self):
        errors, _ = check_message("feat: " + "x" * 100)
        assert any("header must not be longer than 100" in e for e in errors)

    def test_subject_too_short(self):
        errors, _ = check_message("fix: typo")
        assert errors == ["subject must not be shorter than 10 characters"]

    def test_missing_type(self):
        errors, _ = check_message("add step-up SIP calculator")
        assert errors == ["header must look like 'type(scope): subject'"]

    def test_missing_blank_line_is_a_warning(self):
        errors, warnings = check_message("feat: add step-up SIP calculator\nbody text")
        assert errors == []
        assert warnings == ["body/footer must have a leading blank line"]

    def test_footer_line_too_long(self):
        message = "feat: add step-up SIP calculator\n\nbody\n\nRefs: " + "y" * 120
        errors, _ = check_message(message)
        assert errors == ["footer lines must not be longer than 100 characters"]

    def test_long_body_line_allowed(self):
        message = "feat: add step-up SIP calculator\n\n" + "z" * 150
        assert check_message(message) == ([], [])

    def test_git_comments_ignored(self):
        message = "chore: bump dependency pins\n# Please enter the commit message\n"
        assert check_message(message) == ([], [])

    def test_empty(self):
        assert check_message("\n# only a comment\n")[0] == ["message may not be empty"]

    def test_allowed_types(self):
        assert ALLOWED_TYPES == (
            "build", "chore", "ci", "docs", "feat", "fix", "perf", "refactor", "style", "test",
        )


class TestMain:
    """Hook entry point reads the message file."""

    def test_exit_codes(self, tmp_path, capsys):
        good = tmp_path / "good"
        good.write_text("test: cover swp duration cap\n", encoding="utf-8")
        bad = tmp_path / "bad"
        bad.write_text("oops\n", encoding="utf-8")

        assert main([str(good)]) == 0
        assert main([str(bad)]) == 1
        assert "error:" in capsys.readouterr().err
