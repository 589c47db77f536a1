"""Assemble a password from an ordered list of typed components."""

from typing import Any

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from passforge.charsets import pool_for
import passforge.config  # noqa: F401  (installs the loguru sinks)
from passforge.entities import (
    AnyComponent,
    Component,
    ComponentKind,
    ComponentParseError,
    ComponentSequence,
    NumberComponent,
    RandomCharsComponent,
    SeparatorComponent,
    TextComponent,
    WordComponent,
)
from passforge.rng import RandomSource, choice, coin, resolve
from passforge.wordlist import random_word


# Unconditional, lowercase-only; the complex passphrase leet pass differs.
_WORD_REPLACEMENTS = str.maketrans({"a": "4", "e": "3", "i": "1", "o": "0", "s": "5"})

_component_adapter: TypeAdapter[AnyComponent] = TypeAdapter(Component)


def _render_word(component: WordComponent, source: RandomSource) -> str:
    word = random_word(component.min_length, component.max_length, rng=source)

    if component.capitalize:
        word = word[:1].upper() + word[1:]
    elif component.uppercase:
        word = word.upper()
    elif component.lowercase:
        word = word.lower()
    elif component.random_case:
        word = "".join(c.upper() if coin(source) else c.lower() for c in word)

    if component.replacements:
        word = word.translate(_WORD_REPLACEMENTS)
    return word


def _render_random_chars(component: RandomCharsComponent, source: RandomSource) -> str:
    pool = pool_for(component.types)
    if not pool:
        return ""
    return "".join(choice(pool, source) for _ in range(component.length))


def _render_number(component: NumberComponent, source: RandomSource) -> str:
    number = source.randint(component.min, component.max)
    if component.padding > 0:
        return f"{number:0{component.padding}d}"
    return str(number)


def render_component(component: AnyComponent, source: RandomSource) -> str:
    match component:
        case TextComponent():
            return component.value
        case WordComponent():
            return _render_word(component, source)
        case RandomCharsComponent():
            return _render_random_chars(component, source)
        case NumberComponent():
            return _render_number(component, source)
        case SeparatorComponent():
            return choice(component.options, source)
        case _:
            raise TypeError(f"Unknown component: {component!r}")


def build_password(
    components: ComponentSequence, *, rng: RandomSource | None = None
) -> str:
    """Render `components` in order and concatenate the results.

    Every call draws fresh randomness, so the same sequence can be reused
    to produce independent passwords.
    """
    source = resolve(rng)
    password = "".join(render_component(c, source) for c in components)
    logger.debug(
        "Built password from {count} components ({kinds})",
        count=len(components),
        kinds=",".join(str(c.kind) for c in components),
    )
    return password


def parse_component(text: str) -> AnyComponent:
    """
    Parse the textual component form used on the command line.

    Examples:
        text:hello
        word:min_length=4,max_length=6,capitalize=true
        chars:length=6,types=lowercase+digits
        number:min=1,max=99,padding=2
        separator:options=- _ !

    Raises ComponentParseError for unknown kinds or keys and for values that
    do not validate (e.g. `number:min=abc`).
    """
    kind, _, rest = text.partition(":")
    kind = kind.strip().lower()

    data: dict[str, Any] = {"kind": kind}
    if kind == ComponentKind.TEXT:
        data["value"] = rest
    elif rest.strip():
        for item in rest.split(","):
            key, sep, value = item.partition("=")
            key = key.strip()
            if not sep or not key:
                raise ComponentParseError(
                    f"Expected key=value in component '{text}', got '{item}'"
                )
            data[key] = value.strip()

    if "types" in data:
        data["types"] = [t for t in data["types"].split("+") if t]
    if "options" in data:
        data["options"] = data["options"].split()

    try:
        return _component_adapter.validate_python(data)
    except ValidationError as e:
        raise ComponentParseError(f"Invalid component '{text}': {e}") from e
