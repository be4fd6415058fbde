"""CLI entrypoints for seedmap commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Callable, List

from .config import CONFIG_FILENAME, ConfigError, load_config
from .errors import ExitStatus, SeedmapError
from .logging import configure_logging
from .orchestrator import ArtifactOutcome, Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_dry_run_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the artifact (or its diff) without writing it.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seedmap",
        description="Build the component dependency graph and the generated export index.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=CONFIG_FILENAME,
        help=f"Path to the configuration file or its directory (defaults to ./{CONFIG_FILENAME}).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write timestamped log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    deps_parser = subparsers.add_parser(
        "deps",
        help="Write the dependency graph document for a component directory.",
    )
    _add_verbose_option(deps_parser, suppress_default=True)
    _add_dry_run_option(deps_parser)
    deps_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Component directory (defaults to components_dir from the config).",
    )
    deps_parser.add_argument(
        "--versions",
        action="store_true",
        help="Record each component's '// version: x.y.z' marker.",
    )

    index_parser = subparsers.add_parser(
        "index",
        help="Generate the index file re-exporting every library file.",
    )
    _add_verbose_option(index_parser, suppress_default=True)
    _add_dry_run_option(index_parser)
    index_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Library directory (defaults to library_dir from the config).",
    )
    index_parser.add_argument(
        "--out",
        default=None,
        help="Index file to write (defaults to index_path from the config).",
    )

    all_parser = subparsers.add_parser(
        "all",
        help="Run both pipelines with configured paths.",
    )
    _add_verbose_option(all_parser, suppress_default=True)
    _add_dry_run_option(all_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for seedmap commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file).expanduser() if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    if getattr(args, "versions", False):
        config = replace(config, include_versions=True)

    orchestrator = Orchestrator(config)
    dry_run = bool(getattr(args, "dry_run", False))

    path = _from_cwd(getattr(args, "path", None))
    out = _from_cwd(getattr(args, "out", None))
    pipelines: List[Callable[[], ArtifactOutcome]] = []
    if args.command in {"deps", "all"}:
        pipelines.append(lambda: orchestrator.run_dependencies(path, dry_run=dry_run))
    if args.command in {"index", "all"}:
        pipelines.append(lambda: orchestrator.run_index(path, out, dry_run=dry_run))

    status = ExitStatus()
    for pipeline in pipelines:
        try:
            outcome = pipeline()
        except SeedmapError as exc:
            status.record(exc)
            continue
        _report(outcome)

    if status.failed:
        parser.exit(status.code)


def _report(outcome: ArtifactOutcome) -> None:
    if outcome.written:
        print(f"Wrote {_relativize(outcome.path)}")
        return
    print(f"{_relativize(outcome.path)} (dry-run):")
    print(outcome.diff or "(no changes)")


def _from_cwd(value: str | None) -> Path | None:
    """Anchor a command-line path at the working directory, not the config root."""
    if value is None:
        return None
    return (Path.cwd() / Path(value).expanduser()).resolve()


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
