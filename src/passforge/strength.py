import re
from typing import List, Tuple

from passforge.charsets import DIGITS, LOWERCASE, SPECIAL, UPPERCASE
from passforge.entities import StrengthLabel, StrengthReport


FEEDBACK_TOO_SHORT = "Too short"
FEEDBACK_CHARACTER_TYPES = "Use different character types"
FEEDBACK_REPEATED = "Too many repeated characters"
FEEDBACK_SEQUENCES = "Avoid simple sequences"
FEEDBACK_COMMON = "Avoid common passwords"

# Checked in order against the lowercased password; the first hit counts.
_PATTERNS: Tuple[re.Pattern[str], ...] = (
    re.compile(r"(.)\1{2,}"),
    re.compile(r"012|123|234|345|456|567|678|789|890"),
    re.compile(
        r"abc|bcd|cde|def|efg|fgh|ghi|hij|ijk|jkl|klm|lmn|mno|nop|opq|pqr|qrs|rst"
        r"|stu|tuv|uvw|vwx|wxy|xyz"
    ),
    re.compile(
        r"qwe|wer|ert|rty|tyu|yui|uio|iop|asd|sdf|dfg|fgh|ghj|hjk|jkl|zxc|xcv|cvb"
        r"|vbn|bnm"
    ),
)

COMMON_PASSWORDS: Tuple[str, ...] = (
    "password",
    "123456",
    "qwerty",
    "admin",
    "login",
    "welcome",
)

_LABEL_THRESHOLDS: Tuple[Tuple[int, StrengthLabel], ...] = (
    (10, StrengthLabel.EXCELLENT),
    (8, StrengthLabel.VERY_STRONG),
    (6, StrengthLabel.STRONG),
    (4, StrengthLabel.MEDIUM),
    (2, StrengthLabel.WEAK),
)


def _length_points(length: int) -> int:
    if length >= 16:
        return 3
    if length >= 12:
        return 2
    if length >= 8:
        return 1
    return 0


def has_simple_sequence(password: str) -> bool:
    lowered = password.lower()
    return any(pattern.search(lowered) for pattern in _PATTERNS)


def contains_common_password(password: str) -> bool:
    lowered = password.lower()
    return any(common in lowered for common in COMMON_PASSWORDS)


def strength_label(score: int) -> StrengthLabel:
    for threshold, label in _LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return StrengthLabel.VERY_WEAK


def analyze_password(password: str) -> StrengthReport:
    """
    Score `password` heuristically.

    Points come from length (up to 3), one per character class present and
    character uniqueness (up to 2). Simple sequences cost 2 and common
    passwords cost 3. The score never drops below 0 and has no upper clamp;
    15 is the nominal ceiling used for display.
    """
    score = 0
    feedback: List[str] = []
    length = len(password)

    length_points = _length_points(length)
    score += length_points
    if not length_points:
        feedback.append(FEEDBACK_TOO_SHORT)

    has_lowercase = any(c in LOWERCASE for c in password)
    has_uppercase = any(c in UPPERCASE for c in password)
    has_digits = any(c in DIGITS for c in password)
    has_special = any(c in SPECIAL for c in password)

    char_types = sum((has_lowercase, has_uppercase, has_digits, has_special))
    score += char_types
    if char_types < 3:
        feedback.append(FEEDBACK_CHARACTER_TYPES)

    unique_chars = len(set(password))
    ratio = unique_chars / length if length else 0.0
    if ratio >= 0.8:
        score += 2
    elif ratio >= 0.6:
        score += 1
    elif length:
        feedback.append(FEEDBACK_REPEATED)

    if has_simple_sequence(password):
        score -= 2
        feedback.append(FEEDBACK_SEQUENCES)

    if contains_common_password(password):
        score -= 3
        feedback.append(FEEDBACK_COMMON)

    score = max(0, score)

    return StrengthReport(
        score=score,
        label=strength_label(score),
        length=length,
        has_lowercase=has_lowercase,
        has_uppercase=has_uppercase,
        has_digits=has_digits,
        has_special=has_special,
        unique_chars=unique_chars,
        feedback=feedback,
    )
