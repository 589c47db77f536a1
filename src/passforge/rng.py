from __future__ import annotations

import secrets
from typing import Any, MutableSequence, Protocol, Sequence, TypeVar


T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with inclusive uniform integers and an in-place shuffle.

    `random.Random` and `secrets.SystemRandom` both qualify.
    """

    def randint(self, a: int, b: int) -> int: ...

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


_system_random = secrets.SystemRandom()


def resolve(rng: RandomSource | None) -> RandomSource:
    return _system_random if rng is None else rng


def choice(seq: Sequence[T], rng: RandomSource) -> T:
    if not seq:
        raise IndexError("Cannot choose from an empty sequence")
    return seq[rng.randint(0, len(seq) - 1)]


def coin(rng: RandomSource) -> bool:
    return rng.randint(0, 1) == 0
