from typing import List

from loguru import logger

from passforge.charsets import pool_for, usable_charset
import passforge.config  # noqa: F401  (installs the loguru sinks)
from passforge.entities import GenerationRequest
from passforge.rng import RandomSource, choice, resolve


def generate_password(
    request: GenerationRequest | None = None, *, rng: RandomSource | None = None
) -> str:
    """
    Generate a password of exactly `request.length` characters.

    Each enabled class first contributes its `minimum` characters, the rest is
    drawn from the union of all enabled classes, and the whole buffer is then
    shuffled so the required characters land on unbiased positions.

    Raises InvalidRequestError for lengths below 4, when no class is enabled,
    or when the minimums add up to more than the length.
    """
    if request is None:
        request = GenerationRequest()
    request.check()
    source = resolve(rng)

    chars: List[str] = []
    for char_class, quota in request.quotas():
        if not quota.enabled:
            continue
        pool = usable_charset(char_class, request.exclude_ambiguous)
        chars.extend(choice(pool, source) for _ in range(quota.minimum))

    union = pool_for(request.enabled_classes(), request.exclude_ambiguous)
    filler = request.length - len(chars)
    chars.extend(choice(union, source) for _ in range(filler))

    source.shuffle(chars)

    logger.debug(
        "Generated password: length={length}, classes={classes}, required={required}, filler={filler}",
        length=request.length,
        classes=[str(c) for c in request.enabled_classes()],
        required=request.total_minimum(),
        filler=filler,
    )
    return "".join(chars)


def generate_passwords(
    count: int,
    request: GenerationRequest | None = None,
    *,
    rng: RandomSource | None = None,
) -> List[str]:
    return [generate_password(request, rng=rng) for _ in range(count)]
