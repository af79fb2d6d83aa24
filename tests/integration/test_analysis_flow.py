"""Integration test: resume document -> analysis -> saved history."""

from docx import Document

from app.config.models import AppConfig, ReportConfig
from app.extraction import extract_text
from app.matching import join_resume_lines
from app.services import AnalysisService


def test_docx_resume_is_analyzed_saved_and_listed(tmp_path, database):
    resume_path = tmp_path / "resume.docx"
    document = Document()
    for line in ("Experienced in React", "Node.js development", "Strong in SQL"):
        document.add_paragraph(line)
    document.save(str(resume_path))

    resume_text = join_resume_lines(extract_text(resume_path).splitlines())
    service = AnalysisService(AppConfig(report=ReportConfig(exclude_stop_terms=True)))

    report = service.run(resume_text, "Looking for React, Node.js, SQL skills")
    assert report.matched == ["nodejs", "react", "sql"]
    assert report.match_rate == "100%"

    saved = service.save("user-123", report)
    history = service.history("user-123")

    assert [a.id for a in history] == [saved.id]
    assert history[0].model_dump(include={"matched", "missing", "match_rate"}) == report.to_dict()

    service.delete("user-123", saved.id)
    assert service.history("user-123") == []
