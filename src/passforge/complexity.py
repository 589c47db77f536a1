from loguru import logger

import passforge.config  # noqa: F401  (installs the loguru sinks)
from passforge.entities import (
    ClassQuota,
    ComplexityLevel,
    GenerationRequest,
    InvalidLevelError,
)
from passforge.generator import generate_password
from passforge.rng import RandomSource


MIN_LEVEL = 1
MAX_LEVEL = 10

_DESCRIPTIONS: dict[int, str] = {
    1: "Very Simple - lowercase only (9 chars)",
    2: "Simple - letters and digits (10 chars)",
    3: "Basic - letters and digits, no ambiguous (13 chars)",
    4: "Medium - all types, no ambiguous (14 chars)",
    5: "Good - all character types (17 chars)",
    6: "Strong - all types, more requirements (18 chars)",
    7: "Very Strong - increased length (18 chars)",
    8: "Excellent - high requirements (20 chars)",
    9: "Maximum - very long and complex (24 chars)",
    10: "Extreme - maximum protection (28 chars)",
}


def _quota(enabled: bool, minimum: int) -> ClassQuota:
    return ClassQuota(enabled=enabled, minimum=minimum if enabled else 0)


def _check_level(level: int) -> None:
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise InvalidLevelError(
            f"Complexity must be {MIN_LEVEL}-{MAX_LEVEL}, got {level}"
        )


def level_to_params(level: int) -> GenerationRequest:
    """Map a complexity level (1-10) to generator parameters.

    Length, enabled classes and per-class minimums never decrease as the
    level goes up.
    """
    _check_level(level)

    if level <= 2:
        mixed = level >= 2
        return GenerationRequest(
            length=8 + level,
            lowercase=_quota(True, 2),
            uppercase=_quota(mixed, 1),
            digits=_quota(mixed, 1),
            special=_quota(False, 0),
            exclude_ambiguous=True,
        )
    if level <= 4:
        return GenerationRequest(
            length=10 + level,
            lowercase=_quota(True, 2),
            uppercase=_quota(True, 1),
            digits=_quota(True, 1),
            special=_quota(level >= 4, 1),
            exclude_ambiguous=level <= 3,
        )
    if level <= 6:
        return GenerationRequest(
            length=12 + level,
            lowercase=_quota(True, 2),
            uppercase=_quota(True, 2),
            digits=_quota(True, 2),
            special=_quota(True, 1),
        )
    if level <= 8:
        return GenerationRequest(
            length=16 + (level - 6) * 2,
            lowercase=_quota(True, 3),
            uppercase=_quota(True, 2),
            digits=_quota(True, 2),
            special=_quota(True, 2),
        )
    return GenerationRequest(
        length=20 + (level - 8) * 4,
        lowercase=_quota(True, 4),
        uppercase=_quota(True, 3),
        digits=_quota(True, 3),
        special=_quota(True, 3),
    )


def describe_level(level: int) -> str:
    _check_level(level)
    return _DESCRIPTIONS[level]


def complexity_level(level: int) -> ComplexityLevel:
    return ComplexityLevel(
        level=level, description=describe_level(level), request=level_to_params(level)
    )


def complexity_levels() -> list[ComplexityLevel]:
    return [complexity_level(level) for level in range(MIN_LEVEL, MAX_LEVEL + 1)]


def generate_by_complexity(level: int, *, rng: RandomSource | None = None) -> str:
    request = level_to_params(level)
    logger.debug(f"Generating password for complexity level {level}")
    return generate_password(request, rng=rng)
