import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def shuffle_array(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Shuffled copy of ``items``; the input is left untouched."""
    out = list(items)
    (rng or random).shuffle(out)
    return out


def shuffle_word(word: str, rng: Optional[random.Random] = None) -> List[str]:
    """Upper-cased letters of ``word`` in random order."""
    return shuffle_array(list(word.upper()), rng)
