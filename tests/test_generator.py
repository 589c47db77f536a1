"""Tests for the constrained password generator."""

import random

import pytest

from passforge.charsets import AMBIGUOUS, CharacterClass, charset, usable_charset
from passforge.entities import ClassQuota, GenerationRequest, InvalidRequestError
from passforge.generator import generate_password, generate_passwords


OFF = ClassQuota(enabled=False, minimum=0)


def count_in(password: str, chars: str) -> int:
    return sum(c in chars for c in password)


@pytest.mark.parametrize(
    "gen_request",
    [
        GenerationRequest(),
        GenerationRequest(length=4),
        GenerationRequest(length=64, exclude_ambiguous=True),
        GenerationRequest(
            length=10,
            lowercase=ClassQuota(minimum=3),
            uppercase=OFF,
            digits=ClassQuota(minimum=5),
            special=OFF,
        ),
        GenerationRequest(
            length=8,
            lowercase=ClassQuota(minimum=2),
            uppercase=ClassQuota(minimum=2),
            digits=ClassQuota(minimum=2),
            special=ClassQuota(minimum=2),
        ),
        GenerationRequest(length=20, lowercase=OFF, uppercase=OFF, digits=OFF),
    ],
)
def test_generated_password_meets_length_and_quotas(gen_request, rng):
    for _ in range(50):
        password = generate_password(gen_request, rng=rng)

        assert len(password) == gen_request.length
        for char_class, quota in gen_request.quotas():
            if quota.enabled:
                pool = usable_charset(char_class, gen_request.exclude_ambiguous)
                assert count_in(password, pool) >= quota.minimum
            else:
                assert count_in(password, charset(char_class)) == 0


def test_exclude_ambiguous_never_yields_ambiguous_characters(rng):
    gen_request = GenerationRequest(length=128, exclude_ambiguous=True)
    for _ in range(20):
        password = generate_password(gen_request, rng=rng)
        assert not set(password) & set(AMBIGUOUS)


def test_minimums_equal_to_length_yield_exact_class_counts(fixed_rng):
    gen_request = GenerationRequest(
        length=4,
        lowercase=ClassQuota(minimum=1),
        uppercase=ClassQuota(minimum=1),
        digits=ClassQuota(minimum=1),
        special=ClassQuota(minimum=1),
    )
    source = fixed_rng(0)

    password = generate_password(gen_request, rng=source)

    assert password == "aA0!"
    assert source.shuffles == 1


def test_default_request_is_twelve_characters():
    password = generate_password()

    assert len(password) == 12
    for char_class in CharacterClass:
        assert count_in(password, charset(char_class)) >= 1


def test_same_seed_same_password():
    gen_request = GenerationRequest(length=24)
    first = generate_password(gen_request, rng=random.Random(7))
    second = generate_password(gen_request, rng=random.Random(7))
    assert first == second


def test_generate_passwords_returns_count(rng):
    passwords = generate_passwords(5, GenerationRequest(length=16), rng=rng)
    assert len(passwords) == 5
    assert all(len(p) == 16 for p in passwords)


@pytest.mark.parametrize(
    ("gen_request", "message"),
    [
        (GenerationRequest(length=3), "too short"),
        (
            GenerationRequest(
                length=12, lowercase=OFF, uppercase=OFF, digits=OFF, special=OFF
            ),
            "No character types",
        ),
        (
            GenerationRequest(
                length=6,
                lowercase=ClassQuota(minimum=2),
                uppercase=ClassQuota(minimum=2),
                digits=ClassQuota(minimum=2),
                special=ClassQuota(minimum=1),
            ),
            "exceed",
        ),
    ],
)
def test_invalid_requests_raise(gen_request, message):
    with pytest.raises(InvalidRequestError, match=message):
        generate_password(gen_request)


def test_disabled_class_minimum_is_ignored(rng):
    gen_request = GenerationRequest(
        length=4,
        lowercase=ClassQuota(minimum=4),
        uppercase=ClassQuota(enabled=False, minimum=10),
        digits=OFF,
        special=OFF,
    )
    assert gen_request.total_minimum() == 4
    assert gen_request.minimum_for(CharacterClass.UPPERCASE) == 0
    assert generate_password(gen_request, rng=rng).islower()
