"""Skill matching engine comparing resume text with job descriptions.

This module provides:
- get_ngrams: word n-gram extraction from normalized text
- StopTermFilter / STOP_TERMS: generic terms penalized during scoring
- SkillSignalScorer: heuristic scoring of shared skill signals
- MatchReportBuilder / analyze: matched, missing and match-rate summary
- SkillSignal, ScoringResult, MatchReport: result models
- ReportRenderer: plain-text presentation of reports
"""

from .engine import SkillSignalScorer
from .models import MatchReport, ScoringResult, SkillSignal
from .report import (
    MatchReportBuilder,
    analyze,
    build_report_builder,
    format_match_rate,
    join_resume_lines,
)
from .stop_terms import STOP_TERMS, StopTermFilter, is_stop_term
from .tokenizer import get_ngrams, split_words
from .utils import ReportRenderError, ReportRenderer, build_analysis_payload

__all__ = [
    "SkillSignalScorer",
    "MatchReportBuilder",
    "MatchReport",
    "ScoringResult",
    "SkillSignal",
    "StopTermFilter",
    "STOP_TERMS",
    "is_stop_term",
    "get_ngrams",
    "split_words",
    "analyze",
    "build_report_builder",
    "format_match_rate",
    "join_resume_lines",
    "ReportRenderer",
    "ReportRenderError",
    "build_analysis_payload",
]
