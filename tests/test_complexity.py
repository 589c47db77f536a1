import pytest

from passforge.charsets import AMBIGUOUS, CharacterClass
from passforge.complexity import (
    complexity_level,
    complexity_levels,
    describe_level,
    generate_by_complexity,
    level_to_params,
)
from passforge.entities import ComplexityLevel, InvalidLevelError


LOWER = CharacterClass.LOWERCASE
UPPER = CharacterClass.UPPERCASE
DIGITS = CharacterClass.DIGITS
SPECIAL = CharacterClass.SPECIAL


@pytest.mark.parametrize(
    ("level", "length", "enabled", "exclude_ambiguous", "minimums"),
    [
        (1, 9, [LOWER], True, (2, 0, 0, 0)),
        (2, 10, [LOWER, UPPER, DIGITS], True, (2, 1, 1, 0)),
        (3, 13, [LOWER, UPPER, DIGITS], True, (2, 1, 1, 0)),
        (4, 14, [LOWER, UPPER, DIGITS, SPECIAL], False, (2, 1, 1, 1)),
        (5, 17, [LOWER, UPPER, DIGITS, SPECIAL], False, (2, 2, 2, 1)),
        (6, 18, [LOWER, UPPER, DIGITS, SPECIAL], False, (2, 2, 2, 1)),
        (7, 18, [LOWER, UPPER, DIGITS, SPECIAL], False, (3, 2, 2, 2)),
        (8, 20, [LOWER, UPPER, DIGITS, SPECIAL], False, (3, 2, 2, 2)),
        (9, 24, [LOWER, UPPER, DIGITS, SPECIAL], False, (4, 3, 3, 3)),
        (10, 28, [LOWER, UPPER, DIGITS, SPECIAL], False, (4, 3, 3, 3)),
    ],
)
def test_level_to_params_table(level, length, enabled, exclude_ambiguous, minimums):
    params = level_to_params(level)

    assert params.length == length
    assert params.enabled_classes() == enabled
    assert params.exclude_ambiguous is exclude_ambiguous
    assert (
        params.minimum_for(LOWER),
        params.minimum_for(UPPER),
        params.minimum_for(DIGITS),
        params.minimum_for(SPECIAL),
    ) == minimums


@pytest.mark.parametrize("level", [0, 11, -3, 100])
def test_level_out_of_range_raises(level):
    with pytest.raises(InvalidLevelError):
        level_to_params(level)
    with pytest.raises(InvalidLevelError):
        describe_level(level)


def test_levels_never_get_weaker():
    requests = [level_to_params(level) for level in range(1, 11)]

    for lower, higher in zip(requests, requests[1:]):
        assert higher.length >= lower.length
        assert set(lower.enabled_classes()) <= set(higher.enabled_classes())
        for char_class in CharacterClass:
            assert higher.minimum_for(char_class) >= lower.minimum_for(char_class)

    assert requests[-1].length > requests[0].length


def test_descriptions_match_lengths():
    for level in range(1, 11):
        assert f"({level_to_params(level).length} chars)" in describe_level(level)


def test_complexity_levels_lists_all_ten():
    levels = complexity_levels()

    assert [entry.level for entry in levels] == list(range(1, 11))
    assert all(isinstance(entry, ComplexityLevel) for entry in levels)
    assert complexity_level(5).description.startswith("Good")


@pytest.mark.parametrize("level", range(1, 11))
def test_generate_by_complexity(level, rng):
    params = level_to_params(level)
    for _ in range(10):
        password = generate_by_complexity(level, rng=rng)
        assert len(password) == params.length
        if params.exclude_ambiguous:
            assert not set(password) & set(AMBIGUOUS)


def test_generate_by_complexity_invalid_level():
    with pytest.raises(InvalidLevelError):
        generate_by_complexity(11)
