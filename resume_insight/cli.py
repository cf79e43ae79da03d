"""CLI - Command line interface for Resume Insight."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from .config import InsightConfig, load_config
from .domain.ai_detector import format_detection_report
from .domain.ats_scorer import format_score_report
from .domain.errors import InternalComputeError, ResumeInsightError
from .domain.public_resume import render_public_resume
from .domain.service_quote import estimate_quote
from .observability import setup_logging
from .service import analyze_resume, decode_document, detect_document

console = Console()

EXIT_OK = 0
EXIT_INTERNAL = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-insight",
        description="ATS resume scoring and AI-content detection",
    )
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    score = subparsers.add_parser("score", help="Score a resume for ATS compatibility")
    score.add_argument("path", help="Resume file (read as text)")
    score.add_argument("--json", action="store_true", help="Print JSON instead of a report")

    detect = subparsers.add_parser("detect", help="Estimate whether a document is AI-generated")
    detect.add_argument("path", help="Document file (read as text)")
    detect.add_argument("--name", default=None, help="Document name (defaults to the file name)")
    detect.add_argument("--json", action="store_true", help="Print JSON instead of a report")

    quote = subparsers.add_parser("quote", help="Estimate cost and turnaround for a service")
    quote.add_argument("category", help="Service category, e.g. design")
    quote.add_argument("service_type", help="Service type, e.g. logo")
    quote.add_argument("--urgent", action="store_true", help="Mark the request as urgent")
    quote.add_argument("--json", action="store_true", help="Print JSON instead of a summary")

    render = subparsers.add_parser("render", help="Render resume JSON as a public, contact-free HTML page")
    render.add_argument("path", help="Resume JSON file")
    render.add_argument("--output", "-o", default=None, help="Write HTML here instead of stdout")

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"Configuration error: {e}", style="red")
        return EXIT_INVALID
    setup_logging(config.log_level, verbose=args.verbose)

    try:
        if args.command == "score":
            return _cmd_score(args, config)
        if args.command == "detect":
            return _cmd_detect(args, config)
        if args.command == "quote":
            return _cmd_quote(args)
        if args.command == "render":
            return _cmd_render(args)
        return _cmd_serve(args)
    except InternalComputeError as e:
        console.print(f"Internal error: {e.message}", style="red")
        return EXIT_INTERNAL
    except ResumeInsightError as e:
        console.print(f"Invalid input: {e.message}", style="red")
        return EXIT_INVALID


def _read_document(path: str) -> str:
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(path)
    return decode_document(file_path.read_bytes())


def _cmd_score(args: argparse.Namespace, config: InsightConfig) -> int:
    try:
        text = _read_document(args.path)
    except FileNotFoundError:
        console.print(f"File not found: {args.path}", style="red")
        return EXIT_INVALID

    report = analyze_resume(text, config)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        console.print(Markdown(format_score_report(report)))
    return EXIT_OK


def _cmd_detect(args: argparse.Namespace, config: InsightConfig) -> int:
    try:
        text = _read_document(args.path)
    except FileNotFoundError:
        console.print(f"File not found: {args.path}", style="red")
        return EXIT_INVALID

    name = args.name or Path(args.path).name
    result = detect_document(text, name, config)
    if args.json:
        print(json.dumps({"document_name": name, **result.to_dict()}, indent=2))
    else:
        console.print(Markdown(format_detection_report(result, name)))
    return EXIT_OK


def _cmd_quote(args: argparse.Namespace) -> int:
    quote = estimate_quote(args.category, args.service_type, urgency="urgent" if args.urgent else "normal")
    if args.json:
        print(json.dumps(quote.to_dict(), indent=2))
        return EXIT_OK

    cost = f"KSh {quote.estimated_cost:,}" if quote.estimated_cost is not None else "Quoted on request"
    body = (
        f"Service: {quote.service_category.upper()} - {quote.service_type}\n"
        f"Estimated cost: {cost}\n"
        f"Estimated completion: {quote.estimated_completion_date.isoformat()} ({quote.estimated_days} days)\n"
        f"Priority: {quote.priority}"
    )
    console.print(Panel(body, title="Service Quote"))
    return EXIT_OK


def _cmd_render(args: argparse.Namespace) -> int:
    try:
        resume = json.loads(_read_document(args.path))
    except FileNotFoundError:
        console.print(f"File not found: {args.path}", style="red")
        return EXIT_INVALID
    except json.JSONDecodeError as e:
        console.print(f"Invalid input: resume JSON could not be parsed ({e.msg})", style="red")
        return EXIT_INVALID
    if not isinstance(resume, dict):
        console.print("Invalid input: resume JSON must be an object", style="red")
        return EXIT_INVALID

    page = render_public_resume(resume)
    if args.output:
        Path(args.output).write_text(page, encoding="utf-8")
        console.print(f"Public resume written to {args.output}")
    else:
        print(page)
    return EXIT_OK


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    if args.config:
        os.environ["RESUME_INSIGHT_CONFIG"] = args.config
    uvicorn.run("resume_insight.web.app:app", host=args.host, port=args.port)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
