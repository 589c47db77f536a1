# Memorable passphrases built from the word corpus.
from __future__ import annotations

from typing import List, Tuple

from loguru import logger

from passforge.charsets import DIGITS, PADDING_SPECIAL
import passforge.config  # noqa: F401  (installs the loguru sinks)
from passforge.rng import RandomSource, choice, coin, resolve
from passforge.wordlist import random_word


# Letter families tried, in order, by the complex generator's leet pass
_LEET_FAMILIES: Tuple[Tuple[str, str], ...] = (
    ("a", "4"),
    ("e", "3"),
    ("i", "1"),
    ("o", "0"),
    ("s", "5"),
    ("t", "7"),
)

_PLAIN_SEPARATORS: Tuple[str, ...] = ("", "-", "_")
_SPECIAL_SEPARATORS: Tuple[str, ...] = (".", "!", "@", "#")

_COMPLEX_WORD_WINDOW: Tuple[int, int] = (4, 8)


def generate_memorable_password(
    num_words: int = 4,
    separator: str = "-",
    add_numbers: bool = True,
    capitalize: bool = True,
    word_min_length: int = 3,
    word_max_length: int = 8,
    *,
    rng: RandomSource | None = None,
) -> str:
    """
    Join `num_words` corpus words with `separator`, e.g. "River-Storm-Jade-Moon042".

    - Words come from the [word_min_length, word_max_length] window, or from
      the whole corpus if the window is empty.
    - `add_numbers` appends a zero-padded three digit number.
    """
    source = resolve(rng)
    words: List[str] = []
    for _ in range(num_words):
        word = random_word(word_min_length, word_max_length, rng=source)
        if capitalize:
            word = word[:1].upper() + word[1:]
        words.append(word)

    password = separator.join(words)
    if add_numbers:
        password += f"{source.randint(0, 999):03d}"
    return password


def _transform_word(word: str, source: RandomSource) -> str:
    match source.randint(0, 3):
        case 0:
            return word[:1].upper() + word[1:]
        case 1:
            return word.upper()
        case 2:
            return word.lower()
        case _:
            if len(word) > 4:
                return word[:1].upper() + word[1:]
            return word.upper()


def _leet_once(word: str, source: RandomSource) -> str:
    # Only the first family that wins its coin flip is substituted.
    for letter, digit in _LEET_FAMILIES:
        if coin(source):
            return word.replace(letter, digit).replace(letter.upper(), digit)
    return word


def _pick_separator(add_special_chars: bool, source: RandomSource) -> str:
    if add_special_chars and source.randint(0, 2) < 2:
        return choice(_SPECIAL_SEPARATORS, source)
    return choice(_PLAIN_SEPARATORS, source)


def _insert_number(password: str, source: RandomSource) -> str:
    number = f"{source.randint(0, 9999):02d}"
    match choice(("start", "middle", "end"), source):
        case "start":
            return number + password
        case "end":
            return password + number
        case _:
            mid = len(password) // 2
            return password[:mid] + number + password[mid:]


def generate_complex_memorable_password(
    num_words: int = 3,
    add_special_chars: bool = True,
    add_numbers: bool = True,
    transform_words: bool = True,
    min_length: int = 16,
    *,
    rng: RandomSource | None = None,
) -> str:
    """
    Generate a passphrase with mixed-case words, leet digits, varied
    separators and an embedded number, padded up to `min_length`.

    With special characters disabled the padding uses digits, so the minimum
    length always holds.
    """
    source = resolve(rng)
    min_word, max_word = _COMPLEX_WORD_WINDOW

    words: List[str] = []
    for _ in range(num_words):
        word = random_word(min_word, max_word, rng=source)
        if transform_words:
            word = _transform_word(word, source)
            if source.randint(0, 2) == 0:
                word = _leet_once(word, source)
        words.append(word)

    parts: List[str] = []
    for i, word in enumerate(words):
        parts.append(word)
        if i < len(words) - 1:
            parts.append(_pick_separator(add_special_chars, source))
    password = "".join(parts)

    if add_numbers:
        password = _insert_number(password, source)

    padding_pool = PADDING_SPECIAL if add_special_chars else DIGITS
    padded = 0
    while len(password) < min_length:
        position = source.randint(0, len(password))
        password = (
            password[:position] + choice(padding_pool, source) + password[position:]
        )
        padded += 1

    if padded:
        logger.debug(
            "Padded complex passphrase with {padded} characters to reach {min_length}",
            padded=padded,
            min_length=min_length,
        )
    return password
