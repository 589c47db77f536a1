import random
from typing import Any, MutableSequence

import pytest

from passforge.config import config


class FixedRandom:
    """Random source that always answers `value`, clamped into range."""

    def __init__(self, value: int = 0):
        self.value = value
        self.shuffles = 0

    def randint(self, a: int, b: int) -> int:
        return max(a, min(b, self.value))

    def shuffle(self, x: MutableSequence[Any]) -> None:
        self.shuffles += 1


@pytest.fixture
def rng():
    """Seeded source so failures are reproducible."""
    return random.Random(20240601)


@pytest.fixture
def fixed_rng():
    def make(value: int = 0) -> FixedRandom:
        return FixedRandom(value)

    return make


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "output_dir", tmp_path)
    return tmp_path


class ScriptedRandom:
    """Random source that replays `answers` in order."""

    def __init__(self, *answers: int):
        self.answers = iter(answers)

    def randint(self, a: int, b: int) -> int:
        return next(self.answers)

    def shuffle(self, x: MutableSequence[Any]) -> None:
        pass


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
