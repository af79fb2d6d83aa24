"""Analysis service: run, save, list and delete match reports."""

from typing import List, Optional
from uuid import uuid4

from app.config.models import AppConfig
from app.domain.models import SavedAnalysis
from app.logging import get_logger
from app.logging.context import log_context
from app.matching import MatchReport, MatchReportBuilder, build_report_builder
from app.persistence.database import get_session
from app.persistence.repositories import AnalysisRepository
from app.utils.timestamps import utc_now

from .exceptions import EmptyInputError

logger = get_logger(__name__, component="analysis")


class AnalysisService:
    """
    Front door for match analyses.

    Running an analysis is pure. Saving, listing and deleting go through the
    per-user AnalysisRepository inside a committed session.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        report_builder: Optional[MatchReportBuilder] = None,
    ):
        self.config = config or AppConfig()
        self.report_builder = report_builder or build_report_builder(self.config)

    def run(self, resume_text: Optional[str], job_text: Optional[str]) -> MatchReport:
        """
        Analyze resume text against a job description.

        Raises:
            EmptyInputError: If either text is missing or blank
        """
        if not resume_text or not resume_text.strip():
            raise EmptyInputError("Resume text is empty; nothing to analyze.")
        if not job_text or not job_text.strip():
            raise EmptyInputError("Job description is empty; nothing to analyze.")

        report = self.report_builder.build(resume_text, job_text)

        logger.info(
            f"Analysis complete: {report.match_rate} match",
            extra={
                "event": "analysis.completed",
                "match_rate": report.match_rate,
                "matched_count": len(report.matched),
                "missing_count": len(report.missing),
            },
        )
        return report

    def save(self, user_id: str, report: MatchReport) -> SavedAnalysis:
        """Store a report for the user and return the saved record."""
        analysis = SavedAnalysis(
            id=uuid4().hex,
            user_id=user_id,
            matched=list(report.matched),
            missing=list(report.missing),
            match_rate=report.match_rate,
            saved_at=utc_now(),
        )

        with log_context(user_id=user_id, analysis_id=analysis.id):
            with get_session() as session:
                saved = AnalysisRepository(session).add(analysis)

            logger.info(
                "Analysis saved",
                extra={"event": "analysis.saved", "match_rate": saved.match_rate},
            )
        return saved

    def history(self, user_id: str) -> List[SavedAnalysis]:
        """List the user's saved analyses, newest first."""
        with get_session() as session:
            return AnalysisRepository(session).list_for_user(user_id)

    def delete(self, user_id: str, analysis_id: str) -> None:
        """
        Delete one of the user's saved analyses.

        Raises:
            RecordNotFoundError: If the user has no analysis with that id
        """
        with log_context(user_id=user_id, analysis_id=analysis_id):
            with get_session() as session:
                AnalysisRepository(session).delete(user_id, analysis_id)

            logger.info("Analysis deleted", extra={"event": "analysis.deleted"})
