from enum import StrEnum
from typing import Callable, List, Optional

from loguru import logger
import typer

from passforge.builder import build_password, parse_component
from passforge.charsets import CharacterClass
from passforge.complexity import (
    MAX_LEVEL,
    MIN_LEVEL,
    complexity_levels,
    describe_level,
    generate_by_complexity,
)
from passforge.config import config, setup_logging
from passforge.entities import (
    SCORE_CEILING,
    AnyComponent,
    ClassQuota,
    ComponentParseError,
    GenerationRequest,
    InvalidLevelError,
    InvalidRequestError,
    NumberComponent,
    RandomCharsComponent,
    SeparatorComponent,
    StrengthReport,
    TextComponent,
    WordComponent,
)
from passforge.generator import generate_password
from passforge.human_readable_pw import (
    generate_complex_memorable_password,
    generate_memorable_password,
)
from passforge.strength import analyze_password
from passforge.utils import save_password_to_file, save_passwords_to_file


app = typer.Typer(
    add_help_option=True,
    help="Generate passwords and passphrases and check their strength.",
)


class PasswordType(StrEnum):
    STANDARD = "standard"
    MEMORABLE = "memorable"
    COMPLEX = "complex"


class QuickType(StrEnum):
    STANDARD = "standard"
    SHORT = "short"
    LONG = "long"
    MEMORABLE = "memorable"
    COMPLEX = "complex"


_QUICK_GENERATORS: dict[QuickType, Callable[[], str]] = {
    QuickType.STANDARD: lambda: generate_password(GenerationRequest(length=16)),
    QuickType.SHORT: lambda: generate_password(GenerationRequest(length=8)),
    QuickType.LONG: lambda: generate_password(GenerationRequest(length=24)),
    QuickType.MEMORABLE: lambda: generate_memorable_password(),
    QuickType.COMPLEX: lambda: generate_complex_memorable_password(),
}

_SEPARATOR_PRESETS: list[list[str]] = [
    ["-"],
    ["_"],
    ["."],
    ["!"],
    ["@"],
    ["#"],
    ["-", "_", ".", "!", "@", "#"],
]


def echo_error(message: object) -> None:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)


def summary_line(password: str, report: StrengthReport) -> str:
    return (
        f"{password} | {report.label} | Length: {report.length}"
        f" | Score: {report.score}/{SCORE_CEILING}"
    )


def echo_numbered(passwords: List[str]) -> None:
    for i, password in enumerate(passwords, start=1):
        typer.echo(f"{i:2d}. {summary_line(password, analyze_password(password))}")


def echo_generated(password: str) -> None:
    report = analyze_password(password)
    typer.echo(f"\nGenerated password: {summary_line(password, report)}")


def echo_report(password: str, report: StrengthReport) -> None:
    def mark(flag: bool) -> str:
        return "yes" if flag else "no"

    typer.echo(f"\nPASSWORD ANALYSIS: '{password}'")
    typer.echo("=" * 50)
    typer.echo(f"Password strength: {report.label}")
    typer.echo(f"Length: {report.length} characters")
    typer.echo(f"Score: {report.score}/{SCORE_CEILING}")
    typer.echo(f"Unique characters: {report.unique_chars}")
    typer.echo("\nPassword composition:")
    typer.echo(f"   - Lowercase letters: {mark(report.has_lowercase)}")
    typer.echo(f"   - Uppercase letters: {mark(report.has_uppercase)}")
    typer.echo(f"   - Digits: {mark(report.has_digits)}")
    typer.echo(f"   - Special characters: {mark(report.has_special)}")
    if report.feedback:
        typer.echo("\nRecommendations:")
        for tip in report.feedback:
            typer.echo(f"   - {tip}")


def save_all(passwords: List[str]) -> None:
    try:
        if len(passwords) == 1:
            path = save_password_to_file(passwords[0])
        else:
            path = save_passwords_to_file(passwords)
    except OSError as e:
        logger.exception("Failed to save passwords")
        echo_error(f"could not save: {e}")
        raise typer.Exit(code=1)
    typer.echo(f"Saved {len(passwords)} password(s) to '{path}'")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override PASSFORGE_LOG_LEVEL"
    ),
):
    if log_level:
        setup_logging(log_level)
    if ctx.invoked_subcommand is None:
        run_menu()


@app.command("standard", help="Random password with per-class minimums.")
def standard(
    length: int = typer.Option(12, "--length", "-l", min=4, max=128),
    lowercase: bool = typer.Option(True, "--lowercase/--no-lowercase"),
    uppercase: bool = typer.Option(True, "--uppercase/--no-uppercase"),
    digits: bool = typer.Option(True, "--digits/--no-digits"),
    special: bool = typer.Option(True, "--special/--no-special"),
    exclude_ambiguous: bool = typer.Option(
        False, "--exclude-ambiguous", help="Drop i, l, 1, L, o, 0, O"
    ),
    min_lowercase: int = typer.Option(1, min=0),
    min_uppercase: int = typer.Option(1, min=0),
    min_digits: int = typer.Option(1, min=0),
    min_special: int = typer.Option(1, min=0),
    count: int = typer.Option(1, "--count", "-n", min=1, max=50),
    save: bool = typer.Option(False, "--save", help="Write the result to a file"),
):
    request = GenerationRequest(
        length=length,
        lowercase=ClassQuota(enabled=lowercase, minimum=min_lowercase),
        uppercase=ClassQuota(enabled=uppercase, minimum=min_uppercase),
        digits=ClassQuota(enabled=digits, minimum=min_digits),
        special=ClassQuota(enabled=special, minimum=min_special),
        exclude_ambiguous=exclude_ambiguous,
    )
    try:
        passwords = [generate_password(request) for _ in range(count)]
    except InvalidRequestError as e:
        echo_error(e)
        raise typer.Exit(code=1)

    echo_numbered(passwords)
    if save:
        save_all(passwords)


@app.command("memorable", help="Words joined by a separator, e.g. River-Storm-Jade042.")
def memorable(
    words: int = typer.Option(4, "--words", "-w", min=2, max=8),
    separator: str = typer.Option("-", "--separator", "-s"),
    numbers: bool = typer.Option(True, "--numbers/--no-numbers"),
    capitalize: bool = typer.Option(True, "--capitalize/--no-capitalize"),
    min_word_length: int = typer.Option(3, min=1, max=15),
    max_word_length: int = typer.Option(8, min=1, max=20),
    count: int = typer.Option(1, "--count", "-n", min=1, max=50),
    save: bool = typer.Option(False, "--save"),
):
    passwords = [
        generate_memorable_password(
            num_words=words,
            separator=separator,
            add_numbers=numbers,
            capitalize=capitalize,
            word_min_length=min_word_length,
            word_max_length=max_word_length,
        )
        for _ in range(count)
    ]
    echo_numbered(passwords)
    if save:
        save_all(passwords)


@app.command("complex", help="Passphrase with transformed words, symbols and digits.")
def complex_(
    words: int = typer.Option(3, "--words", "-w", min=2, max=6),
    special: bool = typer.Option(True, "--special/--no-special"),
    numbers: bool = typer.Option(True, "--numbers/--no-numbers"),
    transform: bool = typer.Option(True, "--transform/--no-transform"),
    min_length: int = typer.Option(16, "--min-length", min=1, max=50),
    count: int = typer.Option(config.variants, "--count", "-n", min=1, max=50),
    save: bool = typer.Option(False, "--save"),
):
    passwords = [
        generate_complex_memorable_password(
            num_words=words,
            add_special_chars=special,
            add_numbers=numbers,
            transform_words=transform,
            min_length=min_length,
        )
        for _ in range(count)
    ]
    echo_numbered(passwords)
    if save:
        save_all(passwords)


@app.command(
    "build",
    help="Build passwords from components, e.g. word:capitalize=true number:padding=3",
)
def build(
    components: List[str] = typer.Argument(..., help="kind[:key=value,...]"),
    variants: int = typer.Option(config.variants, "--variants", "-n", min=1, max=50),
    save: bool = typer.Option(False, "--save"),
):
    try:
        parsed = [parse_component(text) for text in components]
    except ComponentParseError as e:
        echo_error(e)
        raise typer.Exit(code=1)

    passwords = [build_password(parsed) for _ in range(variants)]
    echo_numbered(passwords)
    if save:
        save_all(passwords)


@app.command("multiple", help="Several passwords of one type.")
def multiple(
    count: int = typer.Option(5, "--count", "-n", min=1, max=50),
    kind: PasswordType = typer.Option(PasswordType.STANDARD, "--type", "-t"),
    length: int = typer.Option(12, "--length", "-l", min=4, max=128),
    words: Optional[int] = typer.Option(
        None, "--words", "-w", min=2, max=8, help="Word count for passphrase types"
    ),
    save: bool = typer.Option(False, "--save"),
):
    if kind == PasswordType.STANDARD and words is not None:
        echo_error("--words only applies to memorable and complex passwords")
        raise typer.Exit(code=1)

    match kind:
        case PasswordType.STANDARD:
            request = GenerationRequest(length=length)
            passwords = [generate_password(request) for _ in range(count)]
        case PasswordType.MEMORABLE:
            passwords = [
                generate_memorable_password(num_words=words or 4) for _ in range(count)
            ]
        case PasswordType.COMPLEX:
            passwords = [
                generate_complex_memorable_password(num_words=words or 3)
                for _ in range(count)
            ]
    echo_numbered(passwords)
    if save:
        save_all(passwords)


@app.command(
    "quick",
    help="Generate with preset settings: standard (16 chars), short (8), long (24),"
    " memorable or complex.",
)
def quick(
    kind: QuickType = typer.Argument(QuickType.STANDARD),
    count: int = typer.Option(3, "--count", "-n", min=1, max=10),
    save: bool = typer.Option(False, "--save"),
):
    passwords = [_QUICK_GENERATORS[kind]() for _ in range(count)]
    echo_numbered(passwords)
    if save:
        save_all(passwords)


@app.command("level", help="Generate by complexity level (1-10).")
def level(
    value: int = typer.Argument(5, help="Complexity level"),
    count: int = typer.Option(3, "--count", "-n", min=1, max=10),
    save: bool = typer.Option(False, "--save"),
):
    try:
        typer.echo(f"Selected level: {describe_level(value)}")
        passwords = [generate_by_complexity(value) for _ in range(count)]
    except InvalidLevelError as e:
        echo_error(e)
        raise typer.Exit(code=1)

    for i, password in enumerate(passwords, start=1):
        report = analyze_password(password)
        typer.echo(f"{i:2d}. {summary_line(password, report)}")
        typer.echo(f"    Composition: {', '.join(report.composition)}")
    if save:
        save_all(passwords)


@app.command("levels", help="List the complexity levels.")
def levels():
    for entry in complexity_levels():
        typer.echo(f"{entry.level:2d}. {entry.description}")


@app.command("check", help="Analyze the strength of a password.")
def check(
    password: Optional[str] = typer.Argument(
        None, help="Password to check; prompted for (hidden) when omitted"
    ),
):
    if password is None:
        password = typer.prompt("Enter password to check", hide_input=True)
    if not password:
        echo_error("password cannot be empty")
        raise typer.Exit(code=1)
    echo_report(password, analyze_password(password))


@app.command("menu", help="Interactive menu.")
def menu():
    run_menu()


# Interactive menu


def ask_number(
    prompt: str, min_val: int = 1, max_val: int = 100, default: int | None = None
) -> int:
    while True:
        raw = typer.prompt(
            prompt,
            default=None if default is None else str(default),
            show_default=default is not None,
        )
        try:
            value = int(raw)
        except ValueError:
            typer.echo("Please enter a valid number")
            continue
        if min_val <= value <= max_val:
            return value
        typer.echo(f"Value must be between {min_val} and {max_val}")


def ask_yes_no(prompt: str, default: bool = True) -> bool:
    return typer.confirm(prompt, default=default)


def ask_string(prompt: str, default: str = "") -> str:
    return typer.prompt(prompt, default=default, show_default=bool(default))


def _offer_save(passwords: List[str]) -> None:
    if not passwords or not ask_yes_no("\nSave to file?", default=False):
        return
    try:
        if len(passwords) == 1:
            path = save_password_to_file(passwords[0])
        else:
            choice = ask_number(
                f"Choose password to save (1-{len(passwords)}, 0 = all)",
                0,
                len(passwords),
                0,
            )
            if choice:
                path = save_password_to_file(passwords[choice - 1])
            else:
                path = save_passwords_to_file(passwords)
    except OSError as e:
        logger.exception("Failed to save passwords")
        echo_error(f"could not save: {e}")
        return
    typer.echo(f"Saved to '{path}'")


def _menu_standard() -> None:
    typer.echo("\n--- STANDARD PASSWORD ---")
    length = ask_number("Password length", 4, 128, 12)
    use_upper = ask_yes_no("Use uppercase letters (A-Z)?")
    use_lower = ask_yes_no("Use lowercase letters (a-z)?")
    use_digits = ask_yes_no("Use digits (0-9)?")
    use_special = ask_yes_no("Use special characters (!@#$%^&*)?")
    if not any((use_upper, use_lower, use_digits, use_special)):
        typer.echo("At least one character type must be selected. Enabling all types.")
        use_upper = use_lower = use_digits = use_special = True
    exclude_ambiguous = ask_yes_no(
        "Exclude ambiguous characters (i,l,1,L,o,0,O)?", default=False
    )

    def minimum(enabled: bool, name: str) -> int:
        return ask_number(f"Minimum {name}", 0, length // 2, 1) if enabled else 0

    request = GenerationRequest(
        length=length,
        uppercase=ClassQuota(
            enabled=use_upper, minimum=minimum(use_upper, "uppercase letters")
        ),
        lowercase=ClassQuota(
            enabled=use_lower, minimum=minimum(use_lower, "lowercase letters")
        ),
        digits=ClassQuota(enabled=use_digits, minimum=minimum(use_digits, "digits")),
        special=ClassQuota(
            enabled=use_special, minimum=minimum(use_special, "special characters")
        ),
        exclude_ambiguous=exclude_ambiguous,
    )
    try:
        password = generate_password(request)
    except InvalidRequestError as e:
        echo_error(e)
        return
    echo_generated(password)
    _offer_save([password])


def _menu_memorable() -> None:
    typer.echo("\n--- MEMORABLE PASSWORD ---")
    num_words = ask_number("Number of words", 2, 8, 4)
    typer.echo("Separator: 1. Hyphen (-)  2. Underscore (_)  3. Dot (.)  4. None")
    separator = ["-", "_", ".", ""][ask_number("Choose option", 1, 4, 1) - 1]
    capitalize = ask_yes_no("Capitalize first letters?")
    add_numbers = ask_yes_no("Add numbers at the end?")
    word_min = ask_number("Minimum word length", 3, 10, 4)
    word_max = ask_number("Maximum word length", word_min, 15, 8)
    password = generate_memorable_password(
        num_words, separator, add_numbers, capitalize, word_min, word_max
    )
    echo_generated(password)
    _offer_save([password])


def _menu_complex() -> None:
    typer.echo("\n--- COMPLEX MEMORABLE PASSWORD ---")
    num_words = ask_number("Number of words", 2, 6, 3)
    add_special = ask_yes_no("Add special characters?")
    add_numbers = ask_yes_no("Add numbers?")
    transform = ask_yes_no("Apply word transformations (case, letter to digit)?")
    min_length = ask_number("Minimum password length", 12, 50, 16)
    passwords = [
        generate_complex_memorable_password(
            num_words, add_special, add_numbers, transform, min_length
        )
        for _ in range(config.variants)
    ]
    echo_numbered(passwords)
    _offer_save(passwords)


def _ask_component() -> AnyComponent | None | bool:
    """Return a component, None to skip, True to finish or False to cancel."""
    typer.echo(
        "1. Text  2. Random word  3. Random characters  4. Number  5. Separator"
        "  6. Finish  0. Cancel"
    )
    match ask_number("Your choice", 0, 6):
        case 0:
            return False
        case 6:
            return True
        case 1:
            text = ask_string("Enter text")
            return TextComponent(value=text) if text else None
        case 2:
            min_len = ask_number("Minimum word length", 2, 15, 4)
            max_len = ask_number("Maximum word length", min_len, 20, 8)
            typer.echo(
                "1. No changes  2. Capitalize  3. Uppercase  4. Lowercase  5. Random case"
            )
            transform = ask_number("Choose transformation", 1, 5, 2)
            return WordComponent(
                min_length=min_len,
                max_length=max_len,
                capitalize=transform == 2,
                uppercase=transform == 3,
                lowercase=transform == 4,
                random_case=transform == 5,
                replacements=ask_yes_no(
                    "Add letter to number replacements (a->4, e->3, etc)?",
                    default=False,
                ),
            )
        case 3:
            length = ask_number("Length", 1, 20, 4)
            wanted = [
                (CharacterClass.LOWERCASE, "Lowercase letters?", True),
                (CharacterClass.UPPERCASE, "Uppercase letters?", True),
                (CharacterClass.DIGITS, "Digits?", True),
                (CharacterClass.SPECIAL, "Special characters?", False),
            ]
            types = [cls for cls, prompt, dflt in wanted if ask_yes_no(prompt, dflt)]
            return RandomCharsComponent(length=length, types=types) if types else None
        case 4:
            min_val = ask_number("Minimum value", 0, 999999, 0)
            max_val = ask_number("Maximum value", min_val, 999999, 999)
            padding = ask_number("Pad with zeros to length (0 = no padding)", 0, 10, 0)
            return NumberComponent(min=min_val, max=max_val, padding=padding)
        case _:
            typer.echo(
                "1. -  2. _  3. .  4. !  5. @  6. #  7. Random from all  8. Custom"
            )
            sep_choice = ask_number("Choice", 1, 8, 7)
            if sep_choice == 8:
                options = ask_string("Enter possible separators (space-separated)")
                return SeparatorComponent(options=options.split())
            return SeparatorComponent(options=_SEPARATOR_PRESETS[sep_choice - 1])


def _menu_builder() -> None:
    typer.echo("\n--- CUSTOM PASSWORD BUILDER ---")
    components: List[AnyComponent] = []
    while True:
        typer.echo(f"\n--- Component #{len(components) + 1} ---")
        result = _ask_component()
        if result is False:
            return
        if result is True:
            break
        if result is not None:
            components.append(result)
            typer.echo(f"Component added! Total components: {len(components)}")

    if not components:
        typer.echo("No components added")
        return
    passwords = [build_password(components) for _ in range(config.variants)]
    echo_numbered(passwords)
    _offer_save(passwords)


def _menu_multiple() -> None:
    typer.echo("\n--- MULTIPLE PASSWORDS ---")
    count = ask_number("Number of passwords to generate", 1, 50, 5)
    typer.echo("1. Standard  2. Memorable  3. Complex memorable")
    match ask_number("Choose type", 1, 3, 1):
        case 1:
            length = ask_number("Password length", 4, 128, 12)
            request = GenerationRequest(length=length)
            passwords = [generate_password(request) for _ in range(count)]
        case 2:
            num_words = ask_number("Number of words", 2, 8, 4)
            passwords = [generate_memorable_password(num_words) for _ in range(count)]
        case _:
            num_words = ask_number("Number of words", 2, 6, 3)
            passwords = [
                generate_complex_memorable_password(num_words) for _ in range(count)
            ]
    echo_numbered(passwords)
    _offer_save(passwords)


def _menu_check() -> None:
    password = ask_string("Enter password to check")
    if not password:
        typer.echo("Password cannot be empty")
        return
    echo_report(password, analyze_password(password))


def _menu_quick() -> None:
    typer.echo(
        "1. Standard (16)  2. Short (8)  3. Long (24)  4. Memorable  5. Complex memorable"
    )
    kind = list(QuickType)[ask_number("Choose type", 1, 5, 1) - 1]
    count = ask_number("Number of passwords", 1, 10, 3)
    passwords = [_QUICK_GENERATORS[kind]() for _ in range(count)]
    echo_numbered(passwords)
    _offer_save(passwords)


def _menu_level() -> None:
    for entry in complexity_levels():
        typer.echo(f"{entry.level:2d}. {entry.description}")
    value = ask_number("Choose complexity level", MIN_LEVEL, MAX_LEVEL, 5)
    typer.echo(f"\nSelected level: {describe_level(value)}")
    count = ask_number("Number of password variants", 1, 10, 3)
    passwords = [generate_by_complexity(value) for _ in range(count)]
    for i, password in enumerate(passwords, start=1):
        report = analyze_password(password)
        typer.echo(f"{i:2d}. {summary_line(password, report)}")
        typer.echo(f"    Composition: {', '.join(report.composition)}")
    _offer_save(passwords)


_MENU: dict[str, tuple[str, Callable[[], None]]] = {
    "1": ("Standard password", _menu_standard),
    "2": ("Memorable password", _menu_memorable),
    "3": ("Complex memorable password", _menu_complex),
    "4": ("Custom password builder", _menu_builder),
    "5": ("Multiple passwords", _menu_multiple),
    "6": ("Check password strength", _menu_check),
    "7": ("Quick generation", _menu_quick),
    "8": ("Generate by complexity level", _menu_level),
}


def run_menu() -> None:
    typer.echo("Welcome to passforge!")
    while True:
        typer.echo("\n" + "=" * 50)
        typer.echo("           PASSWORD GENERATOR")
        typer.echo("=" * 50)
        for key, (label, _) in _MENU.items():
            typer.echo(f"{key}. {label}")
        typer.echo("0. Exit")
        typer.echo("=" * 50)

        choice = ask_string("\nChoose action (0-8)").strip()
        if choice == "0":
            typer.echo("\nGoodbye! Keep your passwords safe!")
            return
        if choice not in _MENU:
            typer.echo("Invalid choice. Please try again.")
            continue
        _MENU[choice][1]()


if __name__ == "__main__":
    app()
