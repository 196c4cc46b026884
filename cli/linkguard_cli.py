"""Command-line utility for assessing URLs, submitting feedback and inspecting records."""

from __future__ import annotations

import argparse
import json
import sys

from app.deps import close_app_state, get_app_state
from app.services.assessment_service import split_bulk_input
from app.utils.logging_setup import configure_logging
from core.errors import FeedUnavailableError
from core.feedback.refiner import FeedbackVerdict
from core.scoring.buckets import bucket_for
from core.scoring.heuristics import score_breakdown
from core.validation.url_validator import validate


def _print(payload) -> None:
    print(json.dumps(payload, indent=2))


def cmd_assess(args: argparse.Namespace) -> None:
    """Assess one or more URLs and print each result."""
    service = get_app_state().assessments
    _print([result.to_dict() for result in service.assess_many(args.urls)])


def cmd_bulk(args: argparse.Namespace) -> None:
    """Split a block of text (or stdin) into URLs and assess each of them."""
    text = args.text if args.text is not None else sys.stdin.read()
    service = get_app_state().assessments
    _print([result.to_dict() for result in service.assess_many(split_bulk_input(text))])


def cmd_feedback(args: argparse.Namespace) -> None:
    """Record whether the stored assessment of a URL was accurate."""
    accepted = get_app_state().refinements.refine(args.url, FeedbackVerdict(args.verdict))
    _print({"url": args.url, "accepted": accepted})


def cmd_record(args: argparse.Namespace) -> int:
    """Show the stored threat record for a URL."""
    record = get_app_state().store.get(args.url)
    if record is None:
        _print({"url": args.url, "error": "RECORD_NOT_FOUND"})
        return 1
    payload = {"url": args.url, "bucket": bucket_for(record.score).value}
    payload.update(record.to_dict())
    _print(payload)
    return 0


def cmd_explain(args: argparse.Namespace) -> None:
    """Show which heuristic rules fire for a URL without recording anything."""
    payload = {"url": args.url, "valid": validate(args.url)}
    if payload["valid"]:
        payload.update(score_breakdown(args.url).to_dict())
    _print(payload)


def cmd_dashboard(_args: argparse.Namespace) -> None:
    """Print the risk distribution of every stored record."""
    _print(get_app_state().dashboard.summary())


def cmd_feed(_args: argparse.Namespace) -> int:
    """Pull links from the configured feed and assess them."""
    state = get_app_state()
    try:
        _print(state.feed_scanner.scan(state.feed_source))
    except FeedUnavailableError as exc:
        _print({"error": "FEED_UNAVAILABLE", "reason": str(exc)})
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(prog="linkguard")
    parser.add_argument("--log-level", dest="log_level", default=None)
    sub = parser.add_subparsers(dest="command")

    assess_p = sub.add_parser("assess")
    assess_p.add_argument("urls", nargs="+")
    assess_p.set_defaults(func=cmd_assess)

    bulk_p = sub.add_parser("bulk")
    bulk_p.add_argument("text", nargs="?", help="URLs separated by newlines, commas or spaces; stdin when omitted")
    bulk_p.set_defaults(func=cmd_bulk)

    feedback_p = sub.add_parser("feedback")
    feedback_p.add_argument("url")
    feedback_p.add_argument("verdict", choices=[verdict.value for verdict in FeedbackVerdict])
    feedback_p.set_defaults(func=cmd_feedback)

    record_p = sub.add_parser("record")
    record_p.add_argument("url")
    record_p.set_defaults(func=cmd_record)

    explain_p = sub.add_parser("explain")
    explain_p.add_argument("url")
    explain_p.set_defaults(func=cmd_explain)

    dashboard_p = sub.add_parser("dashboard")
    dashboard_p.set_defaults(func=cmd_dashboard)

    feed_p = sub.add_parser("feed")
    feed_p.set_defaults(func=cmd_feed)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point invoked via `python -m cli.linkguard_cli ...`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    configure_logging(args.log_level)
    get_app_state()
    try:
        return args.func(args) or 0
    finally:
        close_app_state()


if __name__ == "__main__":
    sys.exit(main())
