from enum import StrEnum
from types import MappingProxyType
from typing import Mapping, Sequence


class CharacterClass(StrEnum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGITS = "digits"
    SPECIAL = "special"


LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Visually confusable characters, subtracted from any class on request
AMBIGUOUS = "il1Lo0O"

# Used to pad complex passphrases up to a minimum length
PADDING_SPECIAL = "!@#$%^&*"


def _validated(tables: Mapping[str, str]) -> Mapping[str, str]:
    for name, chars in tables.items():
        if not chars:
            raise ValueError(f"Character table '{name}' must not be empty")
    return MappingProxyType(dict(tables))


_CLASS_CHARSETS: Mapping[str, str] = _validated(
    {
        CharacterClass.LOWERCASE: LOWERCASE,
        CharacterClass.UPPERCASE: UPPERCASE,
        CharacterClass.DIGITS: DIGITS,
        CharacterClass.SPECIAL: SPECIAL,
    }
)
_validated({"ambiguous": AMBIGUOUS, "padding": PADDING_SPECIAL})


def charset(char_class: CharacterClass) -> str:
    return _CLASS_CHARSETS[char_class]


def remove_ambiguous(chars: str) -> str:
    return "".join(c for c in chars if c not in AMBIGUOUS)


def usable_charset(char_class: CharacterClass, exclude_ambiguous: bool = False) -> str:
    """Characters of `char_class`, minus the ambiguous set if requested."""
    chars = charset(char_class)
    return remove_ambiguous(chars) if exclude_ambiguous else chars


def pool_for(
    classes: Sequence[CharacterClass],
    exclude_ambiguous: bool = False,
) -> str:
    """Union of the usable sets of `classes`, each class counted once."""
    seen: list[CharacterClass] = []
    for char_class in classes:
        if char_class not in seen:
            seen.append(char_class)
    return "".join(usable_charset(c, exclude_ambiguous) for c in seen)
