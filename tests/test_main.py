"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from passforge.main import app


@pytest.fixture
def runner():
    return CliRunner()


def listed_passwords(output: str) -> list[str]:
    """Pull the passwords out of ' 1. <password> | <label> | ...' lines."""
    passwords = []
    for line in output.splitlines():
        head, sep, _ = line.partition(" | ")
        if sep and ". " in head:
            passwords.append(head.split(". ", 1)[1])
    return passwords


def test_standard(runner):
    result = runner.invoke(app, ["standard", "--length", "20", "--count", "3"])

    assert result.exit_code == 0, result.output
    passwords = listed_passwords(result.output)
    assert len(passwords) == 3
    assert all(len(p) == 20 for p in passwords)


def test_standard_digits_only(runner):
    result = runner.invoke(
        app,
        [
            "standard",
            "--no-lowercase",
            "--no-uppercase",
            "--no-special",
            "--min-digits",
            "4",
        ],
    )

    assert result.exit_code == 0, result.output
    (password,) = listed_passwords(result.output)
    assert password.isdigit()


def test_standard_invalid_request(runner):
    result = runner.invoke(
        app,
        ["standard", "--length", "4", "--min-lowercase", "3", "--min-uppercase", "3"],
    )

    assert result.exit_code == 1
    assert "Requirements exceed password length" in result.output


def test_memorable(runner):
    result = runner.invoke(
        app, ["memorable", "--words", "3", "--separator", ".", "--no-numbers"]
    )

    assert result.exit_code == 0, result.output
    (password,) = listed_passwords(result.output)
    assert len(password.split(".")) == 3


def test_complex(runner):
    result = runner.invoke(app, ["complex", "--count", "2", "--min-length", "20"])

    assert result.exit_code == 0, result.output
    passwords = listed_passwords(result.output)
    assert len(passwords) == 2
    assert all(len(p) >= 20 for p in passwords)


def test_build(runner):
    result = runner.invoke(
        app, ["build", "text:ab", "number:min=7,max=7,padding=2", "--variants", "2"]
    )

    assert result.exit_code == 0, result.output
    assert listed_passwords(result.output) == ["ab07", "ab07"]


def test_build_rejects_malformed_component(runner):
    result = runner.invoke(app, ["build", "number:min=x"])

    assert result.exit_code == 1
    assert "Invalid component" in result.output


def test_multiple(runner):
    result = runner.invoke(app, ["multiple", "--count", "4", "--type", "memorable"])

    assert result.exit_code == 0, result.output
    assert len(listed_passwords(result.output)) == 4


@pytest.mark.parametrize(
    ("kind", "length"), [("standard", 16), ("short", 8), ("long", 24)]
)
def test_quick(runner, kind, length):
    result = runner.invoke(app, ["quick", kind, "--count", "2"])

    assert result.exit_code == 0, result.output
    assert [len(p) for p in listed_passwords(result.output)] == [length, length]


def test_level(runner):
    result = runner.invoke(app, ["level", "9", "--count", "2"])

    assert result.exit_code == 0, result.output
    assert "Maximum - very long and complex" in result.output
    assert [len(p) for p in listed_passwords(result.output)] == [24, 24]
    assert "Composition:" in result.output


def test_level_out_of_range(runner):
    result = runner.invoke(app, ["level", "11"])

    assert result.exit_code == 1
    assert "Complexity must be 1-10" in result.output


def test_levels(runner):
    result = runner.invoke(app, ["levels"])

    assert result.exit_code == 0
    assert len(result.output.strip().splitlines()) == 10


def test_check(runner):
    result = runner.invoke(app, ["check", "Password123!"])

    assert result.exit_code == 0
    assert "Password strength: Weak" in result.output
    assert "Avoid common passwords" in result.output


def test_check_prompts_when_no_argument(runner):
    result = runner.invoke(app, ["check"], input="Tr0ub4dor&3\n")

    assert result.exit_code == 0, result.output
    assert "Password strength: Strong" in result.output


def test_save_writes_file(runner, output_dir):
    result = runner.invoke(app, ["standard", "--count", "2", "--save"])

    assert result.exit_code == 0, result.output
    lines = (output_dir / "passwords.txt").read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Generated passwords (")
    passwords = listed_passwords(result.output)
    assert lines[2:] == [f"{i}. {p}" for i, p in enumerate(passwords, start=1)]


def test_menu_check_then_exit(runner):
    result = runner.invoke(app, ["menu"], input="6\nPassword123!\n0\n")

    assert result.exit_code == 0, result.output
    assert "Avoid common passwords" in result.output
    assert "Goodbye" in result.output


def test_menu_reprompts_on_invalid_number(runner):
    result = runner.invoke(app, ["menu"], input="8\n42\nabc\n5\n2\nn\n0\n")

    assert result.exit_code == 0, result.output
    assert "Value must be between 1 and 10" in result.output
    assert "Please enter a valid number" in result.output
    assert "Selected level: Good" in result.output


def test_menu_builder(runner, output_dir):
    # text "ab", number 5..5 padded to 3, finish, save the first variant
    result = runner.invoke(
        app,
        ["menu"],
        input="4\n1\nab\n4\n5\n5\n3\n6\ny\n1\n0\n",
    )

    assert result.exit_code == 0, result.output
    assert "ab005" in result.output
    content = (output_dir / "password.txt").read_text(encoding="utf-8")
    assert content.splitlines()[1] == "ab005"


def test_no_command_starts_menu(runner):
    result = runner.invoke(app, [], input="0\n")

    assert result.exit_code == 0, result.output
    assert "PASSWORD GENERATOR" in result.output


def test_multiple_rejects_words_for_standard(runner):
    result = runner.invoke(app, ["multiple", "--type", "standard", "--words", "3"])

    assert result.exit_code == 1
    assert "--words only applies" in result.output


def test_multiple_complex_word_count(runner):
    result = runner.invoke(
        app, ["multiple", "--count", "2", "--type", "complex", "--words", "2"]
    )

    assert result.exit_code == 0, result.output
    assert len(listed_passwords(result.output)) == 2
