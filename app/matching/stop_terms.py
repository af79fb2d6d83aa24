"""Reference list of generic terms penalized during skill matching.

These words are articles, auxiliary verbs, or generic role/process nouns
(e.g. "responsibilities", "preferred", "job") that would otherwise be
reported as shared skills just because both texts use ordinary English.
"""

from typing import FrozenSet, Iterable, Optional

STOP_TERMS: FrozenSet[str] = frozenset(
    {
        "a",
        "ability",
        "an",
        "and",
        "apply",
        "are",
        "as",
        "at",
        "be",
        "bonus",
        "by",
        "candidate",
        "developed",
        "environment",
        "etc",
        "experience",
        "familiarity",
        "for",
        "have",
        "ideal",
        "include",
        "if",
        "in",
        "is",
        "it",
        "job",
        "knowledge",
        "looking",
        "management",
        "manager",
        "must",
        "of",
        "on",
        "our",
        "or",
        "perform",
        "please",
        "plus",
        "position",
        "preferred",
        "proficient",
        "projects",
        "required",
        "responsibilities",
        "responsible",
        "role",
        "resume",
        "seeking",
        "should",
        "similar",
        "skilled",
        "skills",
        "someone",
        "strong",
        "tasks",
        "team",
        "that",
        "the",
        "this",
        "time",
        "to",
        "tools",
        "used",
        "using",
        "we",
        "will",
        "with",
        "work",
        "you",
        "your",
    }
)


def is_stop_term(token: object) -> bool:
    """Return True if token is one of the built-in stop terms."""
    return isinstance(token, str) and token.lower() in STOP_TERMS


class StopTermFilter:
    """Read-only stop term lookup, optionally extended with extra terms.

    The term set is frozen at construction; instances can be shared across
    threads without synchronization.
    """

    def __init__(self, extra_terms: Optional[Iterable[str]] = None):
        """Initialize StopTermFilter.

        Args:
            extra_terms: Additional terms to treat as stop terms
        """
        extra = {term.strip().lower() for term in (extra_terms or []) if term.strip()}
        self._terms: FrozenSet[str] = STOP_TERMS | frozenset(extra)

    @property
    def terms(self) -> FrozenSet[str]:
        """The full set of stop terms."""
        return self._terms

    def is_stop_term(self, token: object) -> bool:
        """Return True if token is a stop term (case-insensitive)."""
        return isinstance(token, str) and token.lower() in self._terms

    def __contains__(self, token: object) -> bool:
        return self.is_stop_term(token)

    def __len__(self) -> int:
        return len(self._terms)
