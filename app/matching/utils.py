"""Presentation helpers for match reports.

This module renders reports and saved-analysis listings as plain text using
Jinja2 templates from the app.matching.templates package, and builds the
JSON payload printed by the command line.
"""

import logging
from typing import Dict, List, Mapping, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from .models import MatchReport

logger = logging.getLogger(__name__)


class ReportRenderError(Exception):
    """Raised when a report template cannot be rendered."""

    pass


class ReportRenderer:
    """Renders match reports with Jinja2 text templates.

    Templates are cached by the Jinja2 environment for reuse.
    """

    def __init__(
        self,
        template_dir: str = "templates",
        report_template: str = "report.txt.j2",
        history_template: str = "history.txt.j2",
    ):
        """Initialize renderer.

        Args:
            template_dir: Directory name within the app.matching package
            report_template: Filename of the single-report template
            history_template: Filename of the saved-analyses template
        """
        self.report_template_name = report_template
        self.history_template_name = history_template
        self.env = Environment(
            loader=PackageLoader("app.matching", template_dir),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_report(
        self,
        report: MatchReport,
        scores: Optional[Mapping[str, int]] = None,
        saved_id: Optional[str] = None,
    ) -> str:
        """Render a single match report.

        Args:
            report: Report to render
            scores: Optional raw score map to show next to matched skills
            saved_id: Identifier of the stored record, if it was saved

        Returns:
            Rendered text

        Raises:
            ReportRenderError: If template rendering fails
        """
        return self._render(
            self.report_template_name,
            {"report": report, "scores": dict(scores or {}), "saved_id": saved_id},
        )

    def render_history(self, analyses: List) -> str:
        """Render a listing of saved analyses (newest first as given)."""
        return self._render(self.history_template_name, {"analyses": analyses})

    def _render(self, template_name: str, context: Dict) -> str:
        try:
            template = self.env.get_template(template_name)
            return template.render(context).rstrip() + "\n"
        except TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            logger.error(error_msg, exc_info=True)
            raise ReportRenderError(error_msg) from e


def build_analysis_payload(report: MatchReport) -> Dict:
    """Build the JSON payload printed for an analysis.

    Returns:
        Dict with matched, missing, match_rate and the counts behind the rate
    """
    payload = report.to_dict()
    payload["matched_count"] = len(report.matched)
    payload["vocabulary_count"] = len(report.matched) + len(report.missing)
    return payload
