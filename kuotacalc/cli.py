"""Command line entry point for kuota-calc."""

from __future__ import annotations

import argparse
import logging
import platform
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import IO

from rich.console import Console

from kuotacalc import __version__
from kuotacalc.calculator.total import total
from kuotacalc.constants.values import APP_DESCRIPTION, APP_NAME
from kuotacalc.errors import KuotaCalcError
from kuotacalc.models.resources import ResourceUsage
from kuotacalc.models.settings import CalcSettings
from kuotacalc.parsers.manifest_parser import resource_usage_from_yaml
from kuotacalc.utils.report_generator import ReportGenerator

logger = logging.getLogger(__name__)

_PIPE_WIDTH = 240

_EXAMPLES = f"""examples:
    # provide a simple/complex deployment by piping it to {APP_NAME} (used as kubectl plugin)
    cat deployment.yaml | kubectl {APP_NAME}

    # do the same, calling the binary directly with detailed output
    cat deployment.yaml | {APP_NAME} --detailed
"""


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION,
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Manifest files to read. Reads stdin when omitted or '-'.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="enable debug logging",
    )
    parser.add_argument(
        "--detailed",
        action="store_true",
        default=None,
        help="enable detailed output",
    )
    parser.add_argument(
        "--max-rollouts",
        type=int,
        default=None,
        help="limit the simultaneous rollout to the n most expensive rollouts per resource (default: -1, unlimited)",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="print version and exit",
    )
    return parser.parse_args(argv)


def configure_logging(debug: bool) -> None:
    """Log to stderr; DEBUG with --debug, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _read_usages(files: Sequence[str], stdin: IO[str]) -> list[ResourceUsage]:
    usages: list[ResourceUsage] = []
    for name in files or ["-"]:
        if name == "-":
            logger.debug("reading manifests from stdin")
            usages.extend(resource_usage_from_yaml(stdin))
            continue
        logger.debug("reading manifests from %s", name)
        with Path(name).open(encoding="utf-8") as handle:
            usages.extend(resource_usage_from_yaml(handle))
    return usages


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> int:
    """Run kuota-calc and return the process exit code."""
    args = _parse_args(argv)
    out = stdout or sys.stdout

    if args.version:
        print(
            f"version {__version__}\n\tpython version: {platform.python_version()}",
            file=out,
        )
        return 0

    try:
        settings = CalcSettings.load(
            {
                "max_rollouts": args.max_rollouts,
                "detailed": args.detailed,
                "debug": args.debug,
            }
        )
    except KuotaCalcError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.debug)

    try:
        usages = _read_usages(args.files, stdin or sys.stdin)
    except (KuotaCalcError, OSError) as exc:
        logger.debug("calculation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if out.isatty():
        console = Console(file=out, soft_wrap=True, highlight=False)
    else:
        # Piped output: fixed wide layout so table rows never wrap, no styling.
        console = Console(
            file=out, width=_PIPE_WIDTH, color_system=None, soft_wrap=True, highlight=False
        )
    report = ReportGenerator(console)
    grand_total = total(settings.max_rollouts, usages)
    if settings.detailed:
        report.render_detailed(usages, grand_total, settings.max_rollouts)
    else:
        report.render_summary(grand_total)
    return 0


def main_cli() -> None:
    sys.exit(main())
