"""CLI entrypoint for metaimport."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, load_config
from .errors import MetaImportError
from .logging import configure_logging
from .orchestrator import Orchestrator

_DESCRIPTION = """\
Generate HTML files with <meta name="go-import"> tags as expected by go get.
'repo' specifies the Git repository containing Go source code to generate
meta tags for. 'import_prefix' is the import path corresponding to the
repository root.
"""

_EPILOG = """\
examples:
  metaimport example.org/myrepo https://github.com/user/myrepo
  metaimport example.org/exproj http://code.org/r/p/exproj
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metaimport",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("import_prefix", help="Import path of the repository root.")
    parser.add_argument("repo", help="URL of the Git repository.")
    parser.add_argument(
        "-b",
        "--branch",
        default=None,
        help="Branch to use (default: the remote's default branch).",
    )
    parser.add_argument(
        "--godoc",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=(
            'Include <meta name="go-source"> tags as expected by godoc.org '
            "(default: false). Only partial support for repositories not hosted "
            "on github.com."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output directory for generated HTML files (default: html).",
    )
    parser.add_argument(
        "--redirect",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Redirect to the package documentation when visited in a browser (default: true).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(CONFIG_FILENAME),
        help=f"Path to the configuration file (default: ./{CONFIG_FILENAME}).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be generated without writing them.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write detailed logs to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for metaimport."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        logger.error("%s", exc)
        parser.exit(1)

    orchestrator = Orchestrator()
    try:
        outcome = orchestrator.run(
            args.import_prefix,
            args.repo,
            branch=args.branch,
            godoc=args.godoc,
            redirect=args.redirect,
            output_dir=args.output,
            config=config,
            dry_run=bool(args.dry_run),
        )
    except MetaImportError as exc:
        logger.error("%s", exc)
        logger.debug("Run failed", exc_info=exc)
        parser.exit(1, "Run with --verbose for more details.\n")

    if outcome.dry_run:
        print("Files to generate (dry-run):")
        for path in outcome.files:
            print(f"  {_relativize(path)}")
    else:
        print(f"Generated {len(outcome.files)} pages in {_relativize(outcome.output_dir)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
