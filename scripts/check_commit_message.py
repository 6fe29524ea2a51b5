#!/usr/bin/env python3
"""
Check that a commit message follows the Conventional Commits format.

Used as a ``commit-msg`` hook: it receives the path of the message file and
exits non-zero when an error-level rule fails. Warnings are printed but do
not block the commit.

Rules:
    - type must be one of ALLOWED_TYPES (error)
    - header at most 100 characters (error)
    - subject at least 10 characters (error)
    - blank line between header and body/footer (warning)
    - footer lines at most 100 characters (error)
"""

import argparse
import re
import sys

ALLOWED_TYPES = (
    "build",
    "chore",
    "ci",
    "docs",
    "feat",
    "fix",
    "perf",
    "refactor",
    "style",
    "test",
)
HEADER_MAX_LENGTH = 100
SUBJECT_MIN_LENGTH = 10
FOOTER_MAX_LENGTH = 100

HEADER_PATTERN = re.compile(
    r"^(?P<type>\w+)(?:\((?P<scope>[^()]*)\))?(?P<breaking>!)?: (?P<subject>.*)$"
)
FOOTER_TOKEN_PATTERN = re.compile(r"^(BREAKING[ -]CHANGE|[\w-]+)(: | #)")


def _strip_comments(message: str) -> list[str]:
    """Drop git comment lines and trailing blank lines."""
    lines = [line.rstrip() for line in message.splitlines() if not line.startswith("#")]
    while lines and not lines[-1]:
        lines.pop()
    return lines


def _footer_lines(lines: list[str]) -> list[str]:
    """Return the trailing paragraph if it starts with a footer token."""
    if len(lines) < 3:
        return []
    start = len(lines)
    while start > 1 and lines[start - 1]:
        start -= 1
    paragraph = lines[start:]
    if start <= 1 or not paragraph or not FOOTER_TOKEN_PATTERN.match(paragraph[0]):
        return []
    return paragraph


def check_message(message: str) -> tuple[list[str], list[str]]:
    """
    Check a commit message against the rules.

    Args:
        message: Full commit message text

    Returns:
        Tuple of (errors, warnings), each a list of human-readable strings
    """
    errors: list[str] = []
    warnings: list[str] = []

    lines = _strip_comments(message)
    if not lines or not lines[0]:
        return ["message may not be empty"], warnings

    header = lines[0]
    if len(header) > HEADER_MAX_LENGTH:
        errors.append(
            f"header must not be longer than {HEADER_MAX_LENGTH} characters, "
            f"current length is {len(header)}"
        )

    match = HEADER_PATTERN.match(header)
    if match is None:
        errors.append("header must look like 'type(scope): subject'")
    else:
        if match.group("type") not in ALLOWED_TYPES:
            errors.append(
                f"type must be one of [{', '.join(ALLOWED_TYPES)}], "
                f"got {match.group('type')!r}"
            )
        subject = match.group("subject").strip()
        if len(subject) < SUBJECT_MIN_LENGTH:
            errors.append(
                f"subject must not be shorter than {SUBJECT_MIN_LENGTH} characters"
            )

    if len(lines) > 1 and lines[1]:
        warnings.append("body/footer must have a leading blank line")

    for line in _footer_lines(lines):
        if len(line) > FOOTER_MAX_LENGTH:
            errors.append(
                f"footer lines must not be longer than {FOOTER_MAX_LENGTH} characters"
            )
            break

    return errors, warnings


def main(argv=None) -> int:
    """Main function."""
    parser = argparse.ArgumentParser(description="Check a Conventional Commits message")
    parser.add_argument("message_file", help="Path to the commit message file")
    args = parser.parse_args(argv)

    with open(args.message_file, encoding="utf-8") as f:
        errors, warnings = check_message(f.read())

    for warning in warnings:
        print(f"warning: {warning}")
    for error in errors:
        print(f"error: {error}", file=sys.stderr)

    if errors:
        print(f"Found {len(errors)} problem(s) in the commit message.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
