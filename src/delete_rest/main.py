from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import ConfigManager
from .core import ActionPlanner, KeepSet, OperationFlags, Pipeline
from .utils import reporting
from .utils.error_handler import ErrorHandler
from .utils.errors import DeleteRestError, SourceDirectoryError
from .utils.logger import get_logger, set_verbosity

EXIT_OK = 0
EXIT_FILE_ERRORS = 1
EXIT_FATAL = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        parser.print_help()
        return EXIT_OK

    args = parser.parse_args(argv)
    set_verbosity(args.verbose)
    try:
        return _run(args, parser)
    except DeleteRestError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FATAL


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="delete-rest",
        description="Copy, move or delete camera files based on a keepfile and a filename configuration.",
        epilog=(
            "-c, -m and -d are resolved in the order copy > move > delete. "
            "When none of them is given but other options are, files are copied "
            "to the configured default destination."
        ),
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-p", "--path", metavar="DIR", help="Directory to search for files (default: .)")
    parser.add_argument("-k", "--keep", metavar="FILE", help="Keepfile to use (default: <path>/keep.txt)")
    parser.add_argument(
        "-Y",
        "--config",
        "--cfg",
        dest="config",
        metavar="FILE",
        help="Configuration file to use",
    )
    parser.add_argument("-m", dest="move_to", metavar="DIR", help="Move files not in the keepfile to DIR")
    parser.add_argument("-c", dest="copy_to", metavar="DIR", help="Copy files not in the keepfile to DIR")
    parser.add_argument("-d", dest="delete", action="store_true", help="Delete files not in the keepfile")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only print what would be done, don't actually do anything",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print every file and its action")
    parser.add_argument("--print-config", action="store_true", help="Print parsed configuration and exit")
    parser.add_argument("--report", metavar="FILE", help="Write a CSV report of every file to FILE")
    parser.add_argument("--log-file", metavar="FILE", help="Also write warnings and errors to FILE")
    return parser


def _resolve_source_root(path_value: str | None) -> Path:
    source_root = Path(path_value or ".").expanduser()
    if not source_root.is_dir():
        raise SourceDirectoryError(f"Invalid directory: {source_root}")
    return source_root.resolve()


def _operation_flags(args: argparse.Namespace) -> OperationFlags:
    other_flags = any(
        [
            args.path is not None,
            args.keep is not None,
            args.config is not None,
            args.dry_run,
            args.verbose,
            args.print_config,
            args.report is not None,
            args.log_file is not None,
        ]
    )
    return OperationFlags(
        copy_to=args.copy_to,
        move_to=args.move_to,
        delete=args.delete,
        other_flags=other_flags,
    )


def _optional_path(value: str | None) -> Path | None:
    return Path(value).expanduser().resolve() if value else None


def _run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    log_file = _optional_path(args.log_file)
    report_path = _optional_path(args.report)
    logger = get_logger("cli", log_file)
    source_root = _resolve_source_root(args.path)
    errors = ErrorHandler()
    config = ConfigManager.discover(
        source_root,
        _optional_path(args.config),
        logger=logger,
        error_handler=errors,
    )
    filter_config = config.filter_config()

    if args.print_config:
        print(filter_config.describe())
        return EXIT_OK

    keep_path = Path(args.keep) if args.keep else source_root / str(config.get("keepfile_name", "keep.txt"))
    keep_set = KeepSet.load(keep_path)
    logger.debug(f"Keepfile {keep_path}: {len(keep_set)} identifiers")

    planner = ActionPlanner(config, logger)
    plan = planner.resolve(_operation_flags(args), source_root)
    if plan is None:
        parser.print_help()
        return EXIT_OK
    if plan.is_default:
        logger.info(f"No operation given, copying to default destination: {plan.destination}")
    plan = planner.prepare(plan, source_root, dry_run=args.dry_run)
    if report_path is not None:
        reporting.check_report_path(report_path)

    own_files = [path for path in (keep_path, config.source, log_file, report_path) if path is not None]
    result = Pipeline(config, logger, errors).run(
        source_root,
        keep_set,
        plan,
        dry_run=args.dry_run,
        verbose=args.verbose,
        log_callback=print,
        exclude_files=own_files,
    )
    report = result.report
    print(reporting.build_summary_text(report))
    if result.errors.has_errors():
        logger.debug(result.errors.summary())

    if report_path is not None:
        reporting.write_report_csv(report_path, report)
        print(f"Report written to: {report_path}")

    return EXIT_FILE_ERRORS if report.has_failures else EXIT_OK
