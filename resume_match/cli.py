"""CLI - Command line interface for Resume Match."""

import asyncio
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .analyzer import MatchReport, ResumeAnalyzer
from .config import load_config, load_raw_config
from .config_validator import Severity, has_errors, validate_config
from .errors import ResumeMatchError
from .schemas import StructuredResume


console = Console()


def print_resume(resume: StructuredResume):
    """Print a structured resume."""
    table = Table(title="📄 Parsed Resume", show_header=False, expand=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("Skills", escape(", ".join(resume.skills)) or "-")
    table.add_row("Experience", escape("\n".join(resume.experience)) or "-")
    table.add_row("Education", escape("\n".join(resume.education)) or "-")
    table.add_row("Contact", escape(resume.contact))
    console.print(table)


def print_report(report: MatchReport):
    """Print the match score, skills and suggestions."""
    analysis = report.analysis
    score = analysis.match_percentage
    style = "green" if score >= 70 else "yellow" if score >= 40 else "red"
    console.print(Panel(f"[bold {style}]{score:.0f}%[/]", title="🎯 Match Score", expand=False))

    skills = Table(show_header=True, expand=True)
    skills.add_column("✓ Matched skills", style="green")
    skills.add_column("✗ Missing skills", style="red")
    for i in range(max(len(analysis.matched_skills), len(analysis.missing_skills))):
        matched = analysis.matched_skills[i] if i < len(analysis.matched_skills) else ""
        missing = analysis.missing_skills[i] if i < len(analysis.missing_skills) else ""
        skills.add_row(escape(matched), escape(missing))
    console.print(skills)

    if analysis.suggestions:
        lines = "\n".join(f"{i}. {escape(s)}" for i, s in enumerate(analysis.suggestions, start=1))
        console.print(Panel(lines, title="💡 Suggestions"))


def print_error(error: ResumeMatchError):
    console.print(f"❌ {error.kind.value}: {error.message}", style="red", markup=False)
    alternatives = error.details.get("alternatives")
    if alternatives:
        console.print(f"   Alternatives: {', '.join(alternatives)}", style="dim", markup=False)


def check_config(config_path: str) -> int:
    """Print configuration issues. Returns a process exit code."""
    try:
        raw = load_raw_config(config_path)
    except FileNotFoundError as e:
        console.print(f"⚠️ {e}", style="yellow")
        raw = {}

    issues = validate_config(raw)
    if not issues:
        console.print("✅ Configuration OK", style="green")
        return 0
    for issue in issues:
        style = "red" if issue.severity == Severity.ERROR else "yellow"
        console.print(f"[{issue.severity.value}] {issue.field}: {issue.message}", style=style, markup=False)
    return 1 if has_errors(issues) else 0


def _read_job_description(args) -> str:
    if args.job_text is not None:
        return args.job_text
    return Path(args.job).read_text(encoding="utf-8")


async def run_command(args, analyzer: ResumeAnalyzer) -> int:
    data = Path(args.file).read_bytes()

    if args.command == "parse":
        resume = await analyzer.parse_resume(data, filename=args.file)
        if args.json:
            console.print_json(json.dumps(resume.model_dump()))
        else:
            print_resume(resume)
        return 0

    report = await analyzer.run(data, args.file, _read_job_description(args))
    if args.json:
        console.print_json(json.dumps(report.to_dict()))
    else:
        print_resume(report.resume)
        print_report(report)
    return 0


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        prog="resume-match",
        description="Resume Match - score a resume against a job description",
    )
    parser.add_argument(
        "--config",
        "-c",
        default="config/config.local.yaml",
        help="Path to config file (default: config/config.local.yaml)",
    )
    parser.add_argument("--provider", help="Provider to use: auto, groq, openai, gemini")
    parser.add_argument("--model", help="Model name (default: provider default)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log pipeline events")
    parser.add_argument("--json", action="store_true", help="Print raw JSON instead of tables")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Extract a structured resume from a document")
    parse_cmd.add_argument("file", help="Resume file (.pdf, .docx, .txt, .md)")

    analyze_cmd = subparsers.add_parser("analyze", help="Match a resume against a job description")
    analyze_cmd.add_argument("file", help="Resume file (.pdf, .docx, .txt, .md)")
    job = analyze_cmd.add_mutually_exclusive_group(required=True)
    job.add_argument("--job", help="Path to a job description text file")
    job.add_argument("--job-text", help="Job description text")

    subparsers.add_parser("check-config", help="Validate configuration and API keys")
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.command == "check-config":
        sys.exit(check_config(args.config))

    try:
        config = load_config(args.config)
    except FileNotFoundError:
        console.print(f"⚠️ Config file not found: {args.config}", style="yellow")
        console.print("Using default configuration.", style="dim")
        config = load_config("config/config.local.yaml")

    if args.provider:
        config.provider = args.provider
    if args.model:
        config.model = args.model
    config.verbose = config.verbose or args.verbose

    try:
        code = asyncio.run(run_command(args, ResumeAnalyzer(config)))
    except ResumeMatchError as e:
        print_error(e)
        code = 1
    except OSError as e:
        console.print(f"❌ {e}", style="red", markup=False)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
