#!/usr/bin/env python3
"""checkstyle-issues Command Line Interface.

Usage:
    checkstyle-issues parse target/checkstyle-result.xml
    checkstyle-issues parse report.xml --json --min-priority normal
    checkstyle-issues summary report.xml other.xml
"""
import argparse
import json
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List

from .core.config import settings
from .core.exceptions import ParsingCanceledError, ReportError
from .core.logging import setup_logging
from .models.issues import Issues
from .models.schemas import Priority
from .services import CheckStyleParser, NullPackageDetector, PackageDetectors

PRIORITY_ICONS = {Priority.HIGH: '🔴', Priority.NORMAL: '🟡', Priority.LOW: '⚪'}

EXIT_PARSE_ERROR = 2
EXIT_CANCELED = 130


def _parse_all(parser: CheckStyleParser, reports: List[str], cancel_event: threading.Event) -> Issues:
    issues = Issues()
    for report in reports:
        issues = issues + parser.parse_file(report, cancel_event=cancel_event)
    return issues


def load_issues(args) -> Issues:
    """Parse every report on a worker thread; Ctrl+C cancels the parse."""
    if args.no_packages or not settings.DETECT_PACKAGES:
        detector = NullPackageDetector()
    else:
        detector = PackageDetectors()
    parser = CheckStyleParser(package_detector=detector)

    cancel_event = threading.Event()
    with ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(_parse_all, parser, args.reports, cancel_event)
        try:
            return future.result()
        except KeyboardInterrupt:
            cancel_event.set()
            return future.result()


def cmd_parse(args):
    """Print the issues of one or more reports."""
    issues = load_issues(args)
    if args.min_priority:
        issues = issues.at_least(Priority.from_name(args.min_priority))

    if args.json:
        print(json.dumps(issues.to_dicts(), indent=2))
        return 0

    for issue in issues:
        icon = PRIORITY_ICONS[issue.priority]
        print(f"{icon} {issue.file_name}:{issue.line_start}:{issue.column_start} "
              f"[{issue.category}/{issue.type}] {issue.message}")
    print()
    print(f"   {len(issues)} issue(s): {issues.high} high, {issues.normal} normal, {issues.low} low")
    return 0


def cmd_summary(args):
    """Print totals per priority, category and file."""
    issues = load_issues(args)
    summary = issues.summary(top=args.top)

    if args.json:
        print(json.dumps(summary, indent=2))
        return 0

    print(f"📊 {summary['total']} issue(s) in {len(issues.files)} file(s)")
    print()
    print("Priorities:")
    for priority, count in summary["priorities"].items():
        print(f"  {priority:<8} {count}")
    print()
    print("Categories:")
    for category, count in summary["categories"].items():
        print(f"  {category or '(none)':<24} {count}")
    print()
    print("Files:")
    for file_name, count in summary["files"].items():
        print(f"  {count:>5}  {file_name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checkstyle-issues",
        description=f"{settings.PROJECT_NAME} - read Checkstyle XML reports as typed issues",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  checkstyle-issues parse target/checkstyle-result.xml
  checkstyle-issues parse report.xml --json --min-priority normal
  checkstyle-issues summary report.xml --top 10
        """
    )
    parser.add_argument('--log-json', action='store_true', help='Emit logs as JSON')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('reports', nargs='+', help='Checkstyle XML report(s)')
    common.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    common.add_argument('--no-packages', action='store_true',
                        help='Do not read source files to detect package names')

    parse_parser = subparsers.add_parser('parse', parents=[common], help='List issues')
    parse_parser.add_argument('--min-priority', '-p', choices=['high', 'normal', 'low'],
                              help='Only show issues at or above this priority')

    summary_parser = subparsers.add_parser('summary', parents=[common], help='Summarize issues')
    summary_parser.add_argument('--top', '-n', type=int, default=None,
                                help='Limit categories and files to the N most frequent')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(json_format=args.log_json or settings.LOG_JSON)

    commands = {
        'parse': cmd_parse,
        'summary': cmd_summary,
    }

    try:
        return commands[args.command](args)
    except ParsingCanceledError:
        print("⚠️  Canceled", file=sys.stderr)
        return EXIT_CANCELED
    except ReportError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR


if __name__ == '__main__':
    sys.exit(main())
