from typing import Tuple

from loguru import logger

import passforge.config  # noqa: F401  (installs the loguru sinks)
from passforge.rng import RandomSource, choice, resolve


# Dictionary words for passphrases and word components.
WORDS: Tuple[str, ...] = (
    "apple",
    "mountain",
    "river",
    "sunset",
    "forest",
    "ocean",
    "thunder",
    "crystal",
    "dragon",
    "phoenix",
    "wizard",
    "castle",
    "garden",
    "rainbow",
    "butterfly",
    "diamond",
    "golden",
    "silver",
    "storm",
    "cloud",
    "moon",
    "star",
    "fire",
    "water",
    "earth",
    "wind",
    "light",
    "shadow",
    "dream",
    "magic",
    "knight",
    "sword",
    "shield",
    "crown",
    "tower",
    "bridge",
    "flower",
    "tiger",
    "eagle",
    "wolf",
    "bear",
    "lion",
    "shark",
    "falcon",
    "panther",
    "ruby",
    "emerald",
    "sapphire",
    "topaz",
    "pearl",
    "jade",
    "amber",
    "coral",
    "hammer",
    "blade",
    "arrow",
    "spear",
    "axe",
    "bow",
    "staff",
    "wand",
    "winter",
    "summer",
    "spring",
    "autumn",
    "frost",
    "blaze",
    "mist",
    "dawn",
)

if not WORDS:
    raise ValueError("Word corpus must not be empty")


def words_in_window(min_length: int, max_length: int) -> Tuple[str, ...]:
    return tuple(w for w in WORDS if min_length <= len(w) <= max_length)


def random_word(
    min_length: int = 3, max_length: int = 10, *, rng: RandomSource | None = None
) -> str:
    """Draw a word whose length is within [min_length, max_length].

    Falls back to the whole corpus when nothing fits the window.
    """
    suitable = words_in_window(min_length, max_length)
    if not suitable:
        logger.debug(
            "No words between {min_length} and {max_length} letters, using full corpus",
            min_length=min_length,
            max_length=max_length,
        )
        suitable = WORDS
    return choice(suitable, resolve(rng))
