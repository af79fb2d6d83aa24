"""Match report construction.

Derives the user-facing summary (matched skills, missing skills, match rate)
from the scorer output and the job description's own unigram vocabulary.
"""

import logging
from typing import Iterable, Optional

from app.config.models import AppConfig, ReportConfig
from app.logging import get_logger
from app.normalization import TextNormalizer

from .engine import SkillSignalScorer
from .models import MatchReport
from .stop_terms import StopTermFilter
from .tokenizer import get_ngrams

logger = get_logger(__name__, component="matching")


def format_match_rate(matched_count: int, vocabulary_count: int) -> str:
    """Format matched/vocabulary as a whole percentage string.

    Rounds half up using integer arithmetic. An empty vocabulary gives "0%".

    Example:
        >>> format_match_rate(1, 8)
        '13%'
    """
    if vocabulary_count <= 0:
        return "0%"
    percent = (200 * matched_count + vocabulary_count) // (2 * vocabulary_count)
    return f"{percent}%"


class MatchReportBuilder:
    """Builds MatchReport instances from raw resume and job text."""

    def __init__(
        self,
        scorer: Optional[SkillSignalScorer] = None,
        report_config: Optional[ReportConfig] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize MatchReportBuilder.

        Args:
            scorer: Skill signal scorer (defaults to SkillSignalScorer())
            report_config: Report settings (defaults to ReportConfig())
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.scorer = scorer or SkillSignalScorer()
        self.report_config = report_config or ReportConfig()
        self.logger = logger_instance or logger

    @property
    def normalizer(self) -> TextNormalizer:
        return self.scorer.normalizer

    @property
    def stop_terms(self) -> StopTermFilter:
        return self.scorer.stop_terms

    def job_vocabulary(self, job_text: Optional[str]) -> set:
        """Deduplicated unigram vocabulary of the job description."""
        vocabulary = get_ngrams(self.normalizer.normalize(job_text), [1])
        if self.report_config.exclude_stop_terms:
            vocabulary = {token for token in vocabulary if not self.stop_terms.is_stop_term(token)}
        return vocabulary

    def build(self, resume_text: Optional[str], job_text: Optional[str]) -> MatchReport:
        """Compare resume text against a job description.

        Args:
            resume_text: Raw resume qualifications text
            job_text: Raw job description text

        Returns:
            New MatchReport; matched and missing partition the job vocabulary
        """
        scoring = self.scorer.score(resume_text, job_text)
        vocabulary = self.job_vocabulary(job_text)

        matched = [skill for skill in scoring.skills if skill in vocabulary]
        matched_set = set(matched)
        missing = sorted(token for token in vocabulary if token not in matched_set)

        report = MatchReport(
            matched=matched,
            missing=missing,
            match_rate=format_match_rate(len(matched), len(vocabulary)),
        )

        self.logger.debug(
            "Built match report",
            extra={
                "event": "matching.analysis.completed",
                "matched_count": len(report.matched),
                "missing_count": len(report.missing),
                "vocabulary_count": len(vocabulary),
                "match_rate": report.match_rate,
            },
        )

        return report


def build_report_builder(config: Optional[AppConfig] = None) -> MatchReportBuilder:
    """Create a MatchReportBuilder wired from application configuration."""
    config = config or AppConfig()
    return MatchReportBuilder(
        scorer=SkillSignalScorer(config.scoring),
        report_config=config.report,
    )


def analyze(
    resume_text: str, job_text: str, config: Optional[AppConfig] = None
) -> MatchReport:
    """Analyze how well a resume matches a job description.

    Args:
        resume_text: Resume qualifications as a single string
        job_text: Job description text
        config: Optional application configuration (defaults apply otherwise)

    Returns:
        MatchReport with matched skills, missing skills and match rate

    Raises:
        TypeError: If either argument is neither a string nor None

    Example:
        >>> analyze("React and SQL", "react sql").match_rate
        '100%'
    """
    for name, value in (("resume_text", resume_text), ("job_text", job_text)):
        if value is not None and not isinstance(value, str):
            raise TypeError(
                f"{name} must be a string; join sequences with join_resume_lines() first"
            )
    return build_report_builder(config).build(resume_text, job_text)


def join_resume_lines(lines: Iterable[str]) -> str:
    """Join resume lines (e.g. extracted qualifications) into one string."""
    return ", ".join(line.strip() for line in lines if line and line.strip())
