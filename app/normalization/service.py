"""Text normalization for skill matching.

This module implements the canonicalization applied to resume and job
description text before tokenization:
1. Lower-case the whole string
2. Collapse whitespace runs to a single space
3. Collapse known technology-name variants to one canonical spelling
4. Trim leading/trailing whitespace

The result is idempotent: normalizing normalized text returns it unchanged.
"""

from typing import Optional, Pattern, Sequence, Tuple

from .rules import ALIAS_RULES, WHITESPACE_RUN


class TextNormalizer:
    """Canonicalizes freeform text.

    Stateless apart from its (immutable) rule table, so one instance can be
    shared between any number of callers.
    """

    def __init__(self, rules: Sequence[Tuple[Pattern[str], str]] = ALIAS_RULES):
        """Initialize TextNormalizer.

        Args:
            rules: Ordered (pattern, canonical) pairs; defaults to ALIAS_RULES
        """
        self.rules = tuple(rules)

    def normalize(self, raw: Optional[str]) -> str:
        """Normalize raw text.

        Args:
            raw: Text to normalize (None is treated as empty)

        Returns:
            Lower-cased text with canonical technology names and single spaces
        """
        if not raw:
            return ""

        text = WHITESPACE_RUN.sub(" ", raw.lower())

        # Repeat until stable so that a replacement exposing a new match
        # (e.g. "react.js.js" -> "react.js") is also collapsed.
        while True:
            collapsed = self._apply_rules(text)
            if collapsed == text:
                break
            text = collapsed

        return WHITESPACE_RUN.sub(" ", text).strip()

    def _apply_rules(self, text: str) -> str:
        for pattern, canonical in self.rules:
            text = pattern.sub(canonical, text)
        return text


_default_normalizer = TextNormalizer()


def normalize_text(raw: Optional[str]) -> str:
    """Normalize text with the default alias rules.

    Example:
        >>> normalize_text("Node.JS  and ReactJS")
        'nodejs and react'
    """
    return _default_normalizer.normalize(raw)
