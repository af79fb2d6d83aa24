"""Data models for the skill matching engine.

This module defines the per-analysis result structures. All of them are
created fresh for each analysis and never mutated afterwards.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class SkillSignal:
    """A token that survived scoring and filtering.

    Attributes:
        skill: Normalized token shared by the resume and the job description
        score: Final integer score after reinforcement and penalties
    """

    skill: str
    score: int


@dataclass(frozen=True)
class ScoringResult:
    """Output of SkillSignalScorer.

    Attributes:
        matched: Signals that cleared the threshold, highest score first
        raw_scores: Every scored token before filtering (for tuning/debugging)
    """

    matched: List[SkillSignal] = field(default_factory=list)
    raw_scores: Dict[str, int] = field(default_factory=dict)

    @property
    def skills(self) -> List[str]:
        """Matched tokens in scorer order."""
        return [signal.skill for signal in self.matched]


@dataclass(frozen=True)
class MatchReport:
    """User-facing summary of a resume/job comparison.

    Attributes:
        matched: Matched skill tokens, in scorer order
        missing: Job vocabulary tokens that were not matched, alphabetical
        match_rate: Percentage string such as "67%"
    """

    matched: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    match_rate: str = "0%"

    @property
    def match_percent(self) -> int:
        """Match rate as an integer percentage."""
        return int(self.match_rate.rstrip("%"))

    def to_dict(self) -> Dict:
        """Serialize to a plain dict (suitable for JSON or storage)."""
        return {
            "matched": list(self.matched),
            "missing": list(self.missing),
            "match_rate": self.match_rate,
        }
