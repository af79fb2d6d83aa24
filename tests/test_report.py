"""Unit tests for match report construction and rendering."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from app.config.models import AppConfig, ReportConfig, ScoringConfig
from app.domain.models import SavedAnalysis
from app.matching import (
    MatchReport,
    MatchReportBuilder,
    ReportRenderer,
    SkillSignalScorer,
    analyze,
    build_analysis_payload,
    build_report_builder,
    format_match_rate,
    get_ngrams,
    join_resume_lines,
)
from app.normalization import normalize_text

RESUME = "Experienced in React and Node.js development, strong in SQL"
JOB = "Looking for React, Node.js, SQL skills"


@pytest.fixture
def builder():
    """Create a report builder with default settings."""
    return MatchReportBuilder()


class TestFormatMatchRate:
    """Tests for match rate formatting."""

    @pytest.mark.parametrize(
        "matched,vocabulary,expected",
        [
            (0, 0, "0%"),
            (0, 5, "0%"),
            (5, 5, "100%"),
            (1, 2, "50%"),
            (2, 3, "67%"),
            (1, 3, "33%"),
            (1, 8, "13%"),
            (1, 200, "1%"),
            (1, 201, "0%"),
        ],
    )
    def test_rounding(self, matched, vocabulary, expected):
        assert format_match_rate(matched, vocabulary) == expected

    def test_half_rounds_up(self):
        # 1/8 = 12.5%, 5/8 = 62.5%
        assert format_match_rate(1, 8) == "13%"
        assert format_match_rate(5, 8) == "63%"


class TestMatchReportBuilder:
    """Tests for MatchReportBuilder.build."""

    def test_end_to_end_example(self, builder):
        report = builder.build(RESUME, JOB)

        assert report.matched == ["nodejs", "react", "sql"]
        assert report.missing == ["for", "looking", "skills"]
        assert report.match_rate == "50%"

    def test_end_to_end_example_without_stop_terms(self):
        builder = MatchReportBuilder(report_config=ReportConfig(exclude_stop_terms=True))
        report = builder.build(RESUME, JOB)

        assert report.matched == ["nodejs", "react", "sql"]
        assert report.missing == []
        assert report.match_rate == "100%"

    @pytest.mark.parametrize(
        "resume,job",
        [
            (RESUME, JOB),
            ("python django", "Senior Python engineer, Django and PostgreSQL"),
            ("the and of", "the and of"),
            ("", "react sql"),
            ("Node.JS AWS Cloud", "nodejs on amazon web services, with ci/cd"),
        ],
    )
    def test_matched_and_missing_partition_job_vocabulary(self, builder, resume, job):
        report = builder.build(resume, job)
        vocabulary = get_ngrams(normalize_text(job), {1})

        assert not set(report.matched) & set(report.missing)
        assert set(report.matched) | set(report.missing) == vocabulary
        assert len(report.matched) + len(report.missing) == len(vocabulary)

    def test_missing_is_alphabetical(self, builder):
        report = builder.build("sql", "zeta sql alpha mid")
        assert report.missing == ["alpha", "mid", "zeta"]

    def test_matched_keeps_scorer_order(self):
        builder = MatchReportBuilder(scorer=SkillSignalScorer(ScoringConfig(job_phrase_sizes=[1, 2])))
        report = builder.build("sql python react nodejs", "python sql react nodejs")

        assert report.matched == ["nodejs", "react", "python", "sql"]

    def test_empty_job_text_gives_zero_rate(self, builder):
        report = builder.build(RESUME, "")

        assert report == MatchReport(matched=[], missing=[], match_rate="0%")

    def test_empty_resume_gives_everything_missing(self, builder):
        report = builder.build("", "react sql")

        assert report.matched == []
        assert report.missing == ["react", "sql"]
        assert report.match_rate == "0%"

    def test_full_overlap_is_hundred_percent(self, builder):
        assert builder.build("react nodejs sql", "sql, react; nodejs").match_rate == "100%"

    def test_stop_terms_in_job_count_as_missing(self, builder):
        report = builder.build("the react", "the react")

        assert report.matched == ["react"]
        assert report.missing == ["the"]
        assert report.match_rate == "50%"

    def test_reports_are_fresh_objects(self, builder):
        first = builder.build(RESUME, JOB)
        second = builder.build(RESUME, JOB)

        assert first == second
        assert first is not second

    def test_logs_completion_event(self):
        logger = MagicMock()
        builder = MatchReportBuilder(logger_instance=logger)

        builder.build(RESUME, JOB)

        extra = logger.debug.call_args.kwargs["extra"]
        assert extra["event"] == "matching.analysis.completed"
        assert extra["vocabulary_count"] == 6


class TestBuildReportBuilder:
    """Tests for wiring from AppConfig."""

    def test_defaults(self):
        builder = build_report_builder()

        assert builder.scorer.config == ScoringConfig()
        assert builder.report_config.exclude_stop_terms is False

    def test_uses_config_sections(self):
        config = AppConfig(
            scoring=ScoringConfig(extra_stop_terms=["sql"]),
            report=ReportConfig(exclude_stop_terms=True),
        )
        report = build_report_builder(config).build(RESUME, JOB)

        assert report.matched == ["nodejs", "react"]
        assert report.missing == []
        assert report.match_rate == "100%"


class TestAnalyze:
    """Tests for the analyze entry point."""

    def test_returns_report(self):
        report = analyze(RESUME, JOB)
        assert report.to_dict() == {
            "matched": ["nodejs", "react", "sql"],
            "missing": ["for", "looking", "skills"],
            "match_rate": "50%",
        }

    def test_accepts_config(self):
        config = AppConfig(report=ReportConfig(exclude_stop_terms=True))
        assert analyze(RESUME, JOB, config).match_rate == "100%"

    def test_empty_input_never_raises(self):
        assert analyze("", "").match_rate == "0%"
        assert analyze(None, None).match_rate == "0%"

    def test_rejects_sequences(self):
        with pytest.raises(TypeError, match="join_resume_lines"):
            analyze(["React", "SQL"], JOB)

    def test_joined_lines_match_string_input(self):
        lines = ["Experienced in React", "Node.js development", "SQL"]
        assert analyze(join_resume_lines(lines), JOB).matched == ["nodejs", "react", "sql"]


def test_join_resume_lines_skips_blank_entries():
    assert join_resume_lines(["React ", "", "  ", "SQL"]) == "React, SQL"


class TestMatchReport:
    """Tests for the MatchReport model."""

    def test_match_percent(self):
        assert MatchReport(match_rate="67%").match_percent == 67

    def test_is_immutable(self):
        report = MatchReport()
        with pytest.raises(AttributeError):
            report.match_rate = "100%"


class TestReportRenderer:
    """Tests for Jinja2 text rendering."""

    @pytest.fixture
    def renderer(self):
        return ReportRenderer()

    @pytest.fixture
    def report(self):
        return MatchReport(
            matched=["nodejs", "react", "sql"],
            missing=["for", "looking", "skills"],
            match_rate="50%",
        )

    def test_render_report(self, renderer, report):
        output = renderer.render_report(report)

        assert "Match Rate: 50%" in output
        assert "Matched Skills (3):" in output
        assert "  + nodejs\n  + react\n  + sql\n" in output
        assert "Missing Skills (3):" in output
        assert "  - for\n  - looking\n  - skills\n" in output
        assert "Saved as" not in output
        assert "(score" not in output

    def test_render_report_with_scores_and_id(self, renderer, report):
        output = renderer.render_report(
            report, scores={"nodejs": 3, "react": 3, "sql": 2}, saved_id="abc123"
        )

        assert "  + nodejs (score 3)\n" in output
        assert "  + sql (score 2)\n" in output
        assert output.rstrip().endswith("Saved as abc123")

    def test_render_empty_report(self, renderer):
        output = renderer.render_report(MatchReport())

        assert "Match Rate: 0%" in output
        assert output.count("(none)") == 2

    def test_render_history(self, renderer):
        analyses = [
            SavedAnalysis(
                id="abc123",
                user_id="user-123",
                matched=["react", "sql"],
                missing=["go"],
                match_rate="67%",
                saved_at=datetime(2025, 9, 1, 12, 30, tzinfo=timezone.utc),
            )
        ]
        output = renderer.render_history(analyses)

        assert "[abc123] 2025-09-01 12:30 UTC  Match Rate: 67%" in output
        assert "Matched: react, sql" in output

    def test_render_empty_history(self, renderer):
        assert "No saved results yet." in renderer.render_history([])


def test_build_analysis_payload():
    report = MatchReport(matched=["react"], missing=["go", "sql"], match_rate="33%")

    assert build_analysis_payload(report) == {
        "matched": ["react"],
        "missing": ["go", "sql"],
        "match_rate": "33%",
        "matched_count": 1,
        "vocabulary_count": 3,
    }
