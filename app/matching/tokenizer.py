"""N-gram extraction from normalized text."""

import re
from typing import Iterable, Set

_PUNCTUATION = re.compile(r"[^\w\s]")


def split_words(text: str) -> list:
    """Strip punctuation and split text into lower-case words."""
    if not text:
        return []
    return _PUNCTUATION.sub("", text.lower()).split()


def get_ngrams(text: str, sizes: Iterable[int] = (1,)) -> Set[str]:
    """Extract every contiguous word n-gram of the requested sizes.

    Grams of each size are joined with a single space and unioned into one
    set. A size larger than the word count contributes nothing, and
    non-positive sizes are ignored.

    Args:
        text: Normalized text
        sizes: N-gram sizes to produce

    Returns:
        Set of grams (iteration order is not meaningful)

    Example:
        >>> sorted(get_ngrams("react nodejs sql", {2}))
        ['nodejs sql', 'react nodejs']
    """
    words = split_words(text)
    grams: Set[str] = set()

    for size in set(sizes):
        if size < 1:
            continue
        for start in range(len(words) - size + 1):
            grams.add(" ".join(words[start:start + size]))

    return grams
