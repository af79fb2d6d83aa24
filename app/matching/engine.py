"""Skill signal scoring engine.

This module implements the heuristic that turns a resume and a job
description into a ranked list of shared skill signals:
1. Normalize both texts
2. Award base points to every unigram the two texts share
3. Reinforce base matches whose resume phrase also appears on the job side
4. Penalize stop terms
5. Keep tokens at or above the threshold, ranked by score then alphabetically
"""

import logging
from typing import Dict, Optional

from app.config.models import ScoringConfig
from app.logging import get_logger
from app.normalization import TextNormalizer

from .models import ScoringResult, SkillSignal
from .stop_terms import StopTermFilter
from .tokenizer import get_ngrams

logger = get_logger(__name__, component="matching")


class SkillSignalScorer:
    """Scores the overlap between resume text and job description text.

    The scorer holds only read-only collaborators, so a single instance can
    serve concurrent callers.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        stop_terms: Optional[StopTermFilter] = None,
        normalizer: Optional[TextNormalizer] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize SkillSignalScorer.

        Args:
            config: Scoring weights (defaults to ScoringConfig())
            stop_terms: Stop term lookup (defaults to built-in terms plus config extras)
            normalizer: Text normalizer (defaults to TextNormalizer())
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.config = config or ScoringConfig()
        self.stop_terms = stop_terms or StopTermFilter(self.config.extra_stop_terms)
        self.normalizer = normalizer or TextNormalizer()
        self.logger = logger_instance or logger

    def score(self, resume_text: Optional[str], job_text: Optional[str]) -> ScoringResult:
        """Score shared skill signals between two texts.

        Empty or missing text on either side yields an empty result.

        Args:
            resume_text: Raw resume qualifications text
            job_text: Raw job description text

        Returns:
            ScoringResult with filtered signals and the unfiltered score map
        """
        cfg = self.config

        # Step 1: Normalize
        resume = self.normalizer.normalize(resume_text)
        job = self.normalizer.normalize(job_text)

        # Step 2-3: Extract token sets
        resume_unigrams = get_ngrams(resume, [1])
        job_unigrams = get_ngrams(job, [1])
        resume_phrases = get_ngrams(resume, cfg.resume_phrase_sizes)
        job_phrases = get_ngrams(job, cfg.job_phrase_sizes)

        scores: Dict[str, int] = {}

        # Step 4: Base scoring on shared unigrams
        for token in sorted(resume_unigrams & job_unigrams):
            scores[token] = scores.get(token, 0) + cfg.base_match_points

        # Step 5: Reinforce words of shared phrases that are already matches
        for phrase in sorted(resume_phrases & job_phrases):
            for word in phrase.split(" "):
                if scores.get(word):
                    scores[word] += cfg.phrase_bonus_points

        # Step 6: Penalize stop terms
        for token in scores:
            if self.stop_terms.is_stop_term(token):
                scores[token] -= cfg.stop_term_penalty

        # Step 7: Filter and rank
        kept = sorted(
            ((token, value) for token, value in scores.items() if value >= cfg.min_score),
            key=lambda item: (-item[1], item[0]),
        )
        matched = [SkillSignal(skill=token, score=value) for token, value in kept]

        self.logger.debug(
            "Scored skill signals",
            extra={
                "event": "matching.scoring.completed",
                "resume_token_count": len(resume_unigrams),
                "job_token_count": len(job_unigrams),
                "scored_count": len(scores),
                "matched_count": len(matched),
            },
        )

        return ScoringResult(matched=matched, raw_scores=scores)
