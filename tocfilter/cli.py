"""CLI entrypoints for tocfilter commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator


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


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write timestamped log records to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tocfilter",
        description="Replace {toc} markers in HTML fragments with a generated table of contents.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Render the table of contents for an HTML document.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    _add_log_file_option(render_parser, suppress_default=True)
    render_parser.add_argument(
        "path",
        help="Document to render, or '-' to read from stdin and write to stdout.",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        help="Write the rendered document here instead of in place (or stdout for '-').",
    )
    render_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print a diff of the changes without writing.",
    )
    render_parser.add_argument(
        "--config",
        help="Path to .tocfilter.yml (defaults to the document's directory).",
    )
    render_parser.add_argument("--min-level", type=int, help="Shallowest heading level to include.")
    render_parser.add_argument("--max-level", type=int, help="Deepest heading level to include.")
    render_parser.add_argument(
        "--chapter-numbers",
        action="store_true",
        default=None,
        help="Prefix headings with hierarchical chapter numbers.",
    )
    render_parser.add_argument("--prefix", help="Text placed before chapter numbers.")
    render_parser.add_argument(
        "--heading-ids",
        action="store_true",
        default=None,
        help="Also emit an id attribute on rewritten headings.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP rendering service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_log_file_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for tocfilter commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    try:
        configure_logging(verbose=bool(args.verbose), log_file=log_file)
    except OSError as exc:
        parser.exit(1, f"Cannot open log file {log_file}: {exc}\n")

    if args.command == "render":
        _run_render(parser, args)
    elif args.command == "serve":
        from .service import run_service

        try:
            run_service(host=args.host, port=args.port)
        except RuntimeError as exc:
            parser.exit(1, f"tocfilter serve failed: {exc}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_render(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    from_stdin = args.path == "-"
    if args.config:
        config_path = Path(args.config)
    elif from_stdin:
        config_path = Path.cwd()
    else:
        config_path = Path(args.path).expanduser().parent
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    options = config.toc.merged(
        min_level=args.min_level,
        max_level=args.max_level,
        chapter_numbers=args.chapter_numbers,
        prefix=args.prefix,
        heading_ids=args.heading_ids,
    )
    orchestrator = Orchestrator(config=config)

    output = Path(args.output) if args.output else None
    try:
        if from_stdin:
            outcome = orchestrator.render_text(
                sys.stdin.read(),
                output=output,
                dry_run=bool(args.dry_run),
                options=options,
            )
        else:
            outcome = orchestrator.render_file(
                Path(args.path),
                output=output,
                dry_run=bool(args.dry_run),
                options=options,
            )
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except UnicodeDecodeError as exc:
        parser.exit(1, f"Cannot decode {args.path} as {orchestrator.encoding}: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"tocfilter render failed: {exc}\nRun with --verbose for more details.\n")

    if args.dry_run:
        print("Document changes (dry-run):")
        print(outcome.diff or "(no diff)")
    elif outcome.path is None:
        sys.stdout.write(outcome.text)
    elif not outcome.written:
        print("No {toc} marker found; document left unchanged")
    elif not outcome.changed:
        print(f"No {{toc}} marker found; document copied unchanged to {_relativize(outcome.path)}")
    else:
        print(f"Document rendered at {_relativize(outcome.path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
