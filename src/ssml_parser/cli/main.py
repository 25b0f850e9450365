"""Main CLI entry point for the ssml-parse command-line tool.

Provides commands to print parsed trees, extract plain text, and validate
SSML documents.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ssml_parser import __version__
from ssml_parser.api import SSMLParser
from ssml_parser.shared.config import ConfigError, ParserConfig
from ssml_parser.shared.logging import configure_logging, get_logger
from ssml_parser.tree import format_tree

STDIN_PATH = "-"


def load_config(config_path: Optional[Path]) -> ParserConfig:
    """Load parser configuration from a JSON file, or return the defaults."""
    if config_path is None:
        return ParserConfig()
    return ParserConfig.from_file(config_path)


class SSMLProcessor:
    """Core SSML processing logic for CLI operations."""

    def __init__(self, config: ParserConfig):
        self.config = config
        self.parser = SSMLParser(config=config)
        self.logger = get_logger(__name__, None, "cli_processor")

    def read_source(self, path: str) -> str:
        """Read a document from a file path, or from stdin for ``-``."""
        if path == STDIN_PATH:
            return sys.stdin.read()
        return Path(path).read_text(encoding="utf-8")

    def process_single_file(
        self, path: str, include_outline: bool = False
    ) -> Dict[str, Any]:
        """Parse one document and return a JSON-ready summary."""
        try:
            document = self.read_source(path)
        except OSError as e:
            self.logger.warning("Could not read input", extra={"file": path})
            return {
                "file": path,
                "success": False,
                "error": {"kind": "ReadError", "message": str(e)},
            }

        result = self.parser.parse_document(document)
        summary = {"file": path}
        summary.update(result.to_dict())
        if result.root is not None and include_outline:
            summary["outline"] = format_tree(result.root)
        return summary

    def process_files(
        self, paths: List[str], include_outline: bool = False
    ) -> List[Dict[str, Any]]:
        """Process every path in order."""
        return [self.process_single_file(path, include_outline) for path in paths]


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="ssml-parse",
        description="Parse, flatten, and validate SSML documents"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Parser configuration file (JSON)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Print parsed SSML trees")
    parse_parser.add_argument(
        "paths",
        nargs="+",
        help="SSML files to parse ('-' reads stdin)"
    )
    parse_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)"
    )
    parse_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )
    parse_parser.add_argument(
        "--profile",
        action="store_true",
        help="Include timing and memory figures"
    )

    # Text command
    text_parser = subparsers.add_parser("text", help="Print the plain text of SSML files")
    text_parser.add_argument(
        "paths",
        nargs="+",
        help="SSML files to flatten ('-' reads stdin)"
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate SSML files")
    validate_parser.add_argument(
        "paths",
        nargs="+",
        help="SSML files to validate ('-' reads stdin)"
    )
    validate_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="text",
        help="Output format"
    )

    return parser


def _format_error(result: Dict[str, Any]) -> str:
    error = result.get("error", {})
    return f"{error.get('kind', 'Error')}: {error.get('message', '')}"


def format_results(
    results: List[Dict[str, Any]],
    format_type: str,
    include_performance: bool = False
) -> str:
    """Format processing results for output."""
    if not include_performance:
        results = [
            {key: value for key, value in result.items() if key != "performance"}
            for result in results
        ]

    if format_type == "text":
        if not results:
            return "No results to display."

        lines = []
        for result in results:
            lines.append(f"== {result['file']}")
            if result.get("success"):
                lines.append(result["outline"])
            else:
                lines.append(f"   Error: {_format_error(result)}")
            if include_performance and "performance" in result:
                performance = result["performance"]
                lines.append(
                    f"   Time: {performance['processing_time_ms']:.3f}ms, "
                    f"Memory: {performance['memory_used_bytes']} bytes"
                )
            lines.append("")
        return "\n".join(lines)

    return json.dumps(results, indent=2, ensure_ascii=False)


def cmd_parse(args: argparse.Namespace, config: ParserConfig) -> int:
    """Handle parse command."""
    if args.profile:
        config = config.override(enable_profiling=True)

    processor = SSMLProcessor(config)
    results = processor.process_files(args.paths, include_outline=args.format == "text")

    formatted_output = format_results(results, args.format, args.profile)

    if args.output:
        try:
            args.output.write_text(formatted_output, encoding="utf-8")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        print(f"Results written to {args.output}", file=sys.stderr)
    else:
        print(formatted_output)

    successful = sum(1 for r in results if r.get("success", False))
    return 0 if successful == len(results) else 1


def cmd_text(args: argparse.Namespace, config: ParserConfig) -> int:
    """Handle text command."""
    processor = SSMLProcessor(config)
    exit_code = 0

    for result in processor.process_files(args.paths):
        if result.get("success"):
            print(result["text"])
        else:
            print(f"{result['file']}: {_format_error(result)}", file=sys.stderr)
            exit_code = 1

    return exit_code


def cmd_validate(args: argparse.Namespace, config: ParserConfig) -> int:
    """Handle validate command."""
    processor = SSMLProcessor(config)
    results = []

    for result in processor.process_files(args.paths):
        validation_result: Dict[str, Any] = {
            "file": result["file"],
            "valid": result.get("success", False),
        }
        if not validation_result["valid"]:
            validation_result["error_kind"] = result["error"]["kind"]
            validation_result["error"] = result["error"]["message"]
        results.append(validation_result)

    if args.format == "json":
        print(json.dumps(results, indent=2, ensure_ascii=False))
    else:
        valid_count = sum(1 for r in results if r["valid"])
        print(f"Validated {len(results)} files, {valid_count} valid")
        print("-" * 50)

        for result in results:
            status = "✓" if result["valid"] else "✗"
            print(f"{status} {result['file']}")
            if not result["valid"]:
                print(f"   {result['error_kind']}: {result['error']}")

    valid_count = sum(1 for r in results if r["valid"])
    return 0 if valid_count == len(results) else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 2

    # Set up logging verbosity
    if args.verbose:
        configure_logging("DEBUG")
    elif args.quiet:
        configure_logging("ERROR")
    else:
        configure_logging(config.logging_level)

    try:
        if args.command == "parse":
            return cmd_parse(args, config)
        elif args.command == "text":
            return cmd_text(args, config)
        elif args.command == "validate":
            return cmd_validate(args, config)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
