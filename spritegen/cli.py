"""CLI entrypoints for spritegen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator
from .reporting import report_result
from .scanner import discover_sources
from .sprite.assembler import SpriteAssemblyError


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


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spritegen",
        description="Generate an SVG sprite and typed icon name modules from a directory of icons.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Regenerate the sprite and icon modules when sources changed.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help=f"Project root containing {CONFIG_FILENAME} (defaults to current directory).",
    )
    generate_parser.add_argument(
        "--config",
        default=None,
        help=f"Explicit configuration file (defaults to <path>/{CONFIG_FILENAME}).",
    )
    generate_parser.add_argument(
        "--force",
        action="store_true",
        help="Rewrite every artifact even when its content is unchanged.",
    )
    generate_parser.add_argument(
        "--optimize",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run the SVG optimizer over the sprite (overrides icons.optimize).",
    )
    generate_parser.add_argument(
        "--hash",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit a content hash module for cache busting (overrides icons.hash).",
    )
    generate_parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for spritegen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "generate":
        config_path = Path(args.config) if args.config else Path(args.path)
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        try:
            configure_logging(
                verbose=bool(args.verbose) or config.verbose,
                log_file=Path(args.log_file) if args.log_file else None,
            )
            files = discover_sources(config.icons.input_dir, config.icons.exclude)
            options = config.to_options(
                files,
                force=bool(args.force),
                should_optimize=args.optimize,
                should_hash=args.hash,
            )
            result = Orchestrator().generate(options)
        except (ConfigError, SpriteAssemblyError) as exc:
            parser.exit(1, f"{exc}\n")
        except OSError as exc:
            parser.exit(1, f"spritegen generate failed: {exc}\nRun with --verbose for more details.\n")
        summary = report_result(result, input_dir=options.input_dir, files=options.files)
        print(summary)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
