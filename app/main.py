"""Command line entry point for CareerPath."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from app.config.environment import EnvironmentConfig
from app.config.exceptions import ConfigurationError
from app.config.loader import load_config, validate_config_file
from app.config.models import AppConfig
from app.domain.models import ApplicationStatus, InterviewStatus
from app.extraction import ExtractionError, extract_text
from app.logging import get_logger
from app.logging.config import configure_logging
from app.logging.context import log_context
from app.matching import ReportRenderError, ReportRenderer, build_analysis_payload
from app.persistence import PersistenceError, close_database, init_database
from app.services import AnalysisService, ServiceError, TrackerService, resolve_user_id
from app.utils.timestamps import format_timestamp, parse_iso_datetime

logger = get_logger(__name__, component="cli")

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and settle the effective log level.

    Log level priority: CLI > Environment > Config > INFO.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override.upper()
    elif env_config.log_level:
        pass
    elif app_config.logging and app_config.logging.level:
        env_config.log_level = app_config.logging.level
    else:
        env_config.log_level = "INFO"

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="careerpath",
        description="CareerPath - compare a resume with a job description and track applications",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVEL_CHOICES,
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--user",
        default=None,
        help="User identifier (default: $CAREERPATH_USER_ID)",
    )

    commands = parser.add_subparsers(dest="command", metavar="<command>")
    commands.required = True

    analyze = commands.add_parser("analyze", help="Compare a resume with a job description")
    resume = analyze.add_mutually_exclusive_group(required=True)
    resume.add_argument("--resume", type=Path, help="Resume file (.pdf, .docx or .txt)")
    resume.add_argument("--resume-text", help="Resume qualifications as text")
    job = analyze.add_mutually_exclusive_group(required=True)
    job.add_argument("--job", type=Path, help="Job description file")
    job.add_argument("--job-text", help="Job description as text")
    analyze.add_argument("--save", action="store_true", help="Save the result to your history")
    analyze.add_argument(
        "--scores", action="store_true", help="Show the signal score next to each matched skill"
    )
    analyze.add_argument("--format", choices=["text", "json"], default="text", dest="output_format")

    commands.add_parser("history", help="List saved analyses, newest first")

    delete = commands.add_parser("delete", help="Delete a saved analysis")
    delete.add_argument("analysis_id")

    apply = commands.add_parser("apply", help="Track a new job application")
    apply.add_argument("--position", required=True)
    apply.add_argument("--company", required=True)

    commands.add_parser("applications", help="List tracked applications")

    status = commands.add_parser("status", help="Change an application's status")
    status.add_argument("application_id")
    status.add_argument("status", choices=[s.value for s in ApplicationStatus])

    application_delete = commands.add_parser("application-delete", help="Stop tracking an application")
    application_delete.add_argument("application_id")

    interview = commands.add_parser("interview", help="Schedule an interview")
    interview.add_argument("--position", required=True)
    interview.add_argument("--company", required=True)
    interview.add_argument("--at", required=True, dest="scheduled_at", help="ISO 8601 date and time")

    commands.add_parser("interviews", help="List interviews with reminders")

    interview_update = commands.add_parser("interview-update", help="Edit a scheduled interview")
    interview_update.add_argument("interview_id")
    interview_update.add_argument("--position")
    interview_update.add_argument("--company")
    interview_update.add_argument("--at", dest="scheduled_at", help="ISO 8601 date and time")
    interview_update.add_argument("--status", choices=[s.value for s in InterviewStatus])

    interview_delete = commands.add_parser("interview-delete", help="Delete a scheduled interview")
    interview_delete.add_argument("interview_id")

    validate = commands.add_parser("validate-config", help="Validate a configuration file and exit")
    validate.add_argument("path", type=Path)

    return parser


def _read_input(path: Optional[Path], text: Optional[str]) -> str:
    if path is not None:
        return extract_text(path)
    return text or ""


def run_analyze(args, app_config: AppConfig, env_config: EnvironmentConfig) -> int:
    resume_text = _read_input(args.resume, args.resume_text)
    job_text = _read_input(args.job, args.job_text)

    service = AnalysisService(app_config)
    report = service.run(resume_text, job_text)

    # A failed save is reported after the report is printed
    saved = None
    save_error = None
    if args.save:
        try:
            user_id = resolve_user_id(args.user or env_config.user_id)
            init_database(env_config.database_url)
            saved = service.save(user_id, report)
        except (ServiceError, PersistenceError) as e:
            save_error = e

    if args.output_format == "json":
        payload = build_analysis_payload(report)
        if saved is not None:
            payload["id"] = saved.id
            payload["saved_at"] = format_timestamp(saved.saved_at)
        print(json.dumps(payload, indent=2))
    else:
        scores = None
        if args.scores:
            scores = service.report_builder.scorer.score(resume_text, job_text).raw_scores

        saved_id = saved.id if saved is not None else None
        print(ReportRenderer().render_report(report, scores=scores, saved_id=saved_id), end="")

    if save_error is not None:
        raise save_error
    return 0


def _parse_scheduled_at(value: str):
    scheduled_at = parse_iso_datetime(value)
    if scheduled_at is None:
        raise ServiceError(f"Invalid date and time: {value!r} (expected ISO 8601)")
    return scheduled_at


def run_storage_command(args, app_config: AppConfig, user_id: str) -> int:
    if args.command == "history":
        analyses = AnalysisService(app_config).history(user_id)
        print(ReportRenderer().render_history(analyses), end="")

    elif args.command == "delete":
        AnalysisService(app_config).delete(user_id, args.analysis_id)
        print(f"Deleted analysis {args.analysis_id}")

    elif args.command == "apply":
        application = TrackerService(app_config).add_application(
            user_id, args.position, args.company
        )
        print(f"Added application {application.id}: {application.position} at {application.company}")

    elif args.command == "applications":
        applications = TrackerService(app_config).list_applications(user_id)
        if not applications:
            print("No applications tracked yet.")
        for application in applications:
            print(
                f"[{application.id}] {application.applied_date.isoformat()}  "
                f"{application.position} at {application.company}  ({application.status.value})"
            )

    elif args.command == "status":
        application = TrackerService(app_config).set_application_status(
            user_id, args.application_id, ApplicationStatus(args.status)
        )
        print(f"Application {application.id} is now {application.status.value}")

    elif args.command == "application-delete":
        TrackerService(app_config).delete_application(user_id, args.application_id)
        print(f"Deleted application {args.application_id}")

    elif args.command == "interview":
        interview = TrackerService(app_config).schedule_interview(
            user_id, args.position, args.company, _parse_scheduled_at(args.scheduled_at)
        )
        print(f"Scheduled interview {interview.id} on {interview.scheduled_at.strftime('%Y-%m-%d %H:%M')} UTC")

    elif args.command == "interview-update":
        scheduled_at = None
        if args.scheduled_at is not None:
            scheduled_at = _parse_scheduled_at(args.scheduled_at)
        interview = TrackerService(app_config).update_interview(
            user_id,
            args.interview_id,
            position=args.position,
            company=args.company,
            scheduled_at=scheduled_at,
            status=InterviewStatus(args.status) if args.status else None,
        )
        print(
            f"Updated interview {interview.id}: {interview.position} at {interview.company} "
            f"on {interview.scheduled_at.strftime('%Y-%m-%d %H:%M')} UTC  ({interview.status.value})"
        )

    elif args.command == "interview-delete":
        TrackerService(app_config).delete_interview(user_id, args.interview_id)
        print(f"Deleted interview {args.interview_id}")

    elif args.command == "interviews":
        listings = TrackerService(app_config).list_interviews(user_id)
        if not listings:
            print("No interviews scheduled.")
        for listing in listings:
            item = listing.interview
            line = (
                f"[{item.id}] {item.scheduled_at.strftime('%Y-%m-%d %H:%M')} UTC  "
                f"{item.position} at {item.company}  ({item.status.value})"
            )
            if listing.reminder:
                line += f"  {listing.reminder}"
            print(line)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CareerPath command line.

    Returns:
        Exit code (0 for success, 1 for handled errors). Usage errors exit
        with status 2 from argparse.
    """
    args = build_parser().parse_args(argv)

    if args.command == "validate-config":
        return 0 if validate_config_file(args.path) else 1

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)

        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        logger.debug(
            "Configuration loaded",
            extra={
                "event": "config.loaded",
                "command": args.command,
                "log_level": env_config.log_level,
            },
        )

        if args.command == "analyze":
            with log_context(command=args.command):
                return run_analyze(args, app_config, env_config)

        user_id = resolve_user_id(args.user or env_config.user_id)
        init_database(env_config.database_url)
        with log_context(user_id=user_id, command=args.command):
            return run_storage_command(args, app_config, user_id)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except (ServiceError, ExtractionError, PersistenceError, ReportRenderError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.debug(
            f"Command failed: {e}",
            extra={"event": "cli.command.failed", "error_type": type(e).__name__},
        )
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 1
    finally:
        close_database()


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
