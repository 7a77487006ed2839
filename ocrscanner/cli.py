"""
Payment-Slip Scanner - Command Line Interface.

Classifies recognized text read from files, stdin or the command line
and prints the results as JSON, or checks a single digit string against
the modulus-10 checksum.

Usage:
    ocrscanner --text "1234566 #"
    ocrscanner --input recognized.txt --valid-only
    ocrscanner --input - --join --output results.json
    ocrscanner --check 2139 --length-control
"""

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, List, Optional

from ocrscanner.config import ConfigurationManager
from ocrscanner.extraction import get_classifier, reset_classifier
from ocrscanner.postprocessor import Modulus10Validator
from ocrscanner.utils.exceptions import (
    InputNotFoundError,
    OCRScannerError,
    OutputError,
    UnreadableInputError,
)
from ocrscanner.utils.helpers import ensure_directory, validate_file_exists
from ocrscanner.utils.logger import ROOT_LOGGER_NAME, get_logger, setup_logger_from_config


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line argument parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="ocrscanner",
        description="Extract reference numbers, amounts and giro numbers "
                    "from recognized payment-slip text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Classify a single fragment:
        ocrscanner --text "1234566 #"

    Classify every line of a file, keeping only valid results:
        ocrscanner --input recognized.txt --valid-only

    Check a digit string with length control:
        ocrscanner --check 2139 --length-control
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--input", "-i",
        type=str,
        help="Text file with one recognized fragment per line ('-' for stdin)"
    )
    source.add_argument(
        "--text", "-t",
        type=str,
        action="append",
        help="Recognized fragment to classify (repeatable)"
    )
    source.add_argument(
        "--check",
        type=str,
        help="Digit string to check against the modulus-10 checksum"
    )

    parser.add_argument(
        "--length-control",
        action="store_true",
        help="With --check, also verify the length-control digit"
    )
    parser.add_argument(
        "--join",
        action="store_true",
        help="Join all input lines into one fragment before classifying"
    )
    parser.add_argument(
        "--best",
        action="store_true",
        help="Report only the single best match per fragment"
    )
    parser.add_argument(
        "--valid-only",
        action="store_true",
        help="Drop results that fail validation"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write JSON results to this file instead of stdout"
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def read_fragments(args: argparse.Namespace) -> List[str]:
    """
    Collect the fragments to classify from the parsed arguments.

    Args:
        args: Parsed command-line arguments.

    Returns:
        List of fragments.

    Raises:
        InputNotFoundError: If the input file doesn't exist.
        UnreadableInputError: If the input cannot be read as UTF-8 text.
    """
    if args.text:
        lines = list(args.text)
    elif args.input == "-":
        try:
            lines = sys.stdin.read().splitlines()
        except (UnicodeDecodeError, OSError) as e:
            raise UnreadableInputError("<stdin>", str(e)) from e
    else:
        if not validate_file_exists(args.input):
            raise InputNotFoundError(args.input)
        try:
            lines = Path(args.input).read_text(encoding="utf-8").splitlines()
        except (UnicodeDecodeError, OSError) as e:
            raise UnreadableInputError(args.input, str(e)) from e

    lines = [line for line in lines if line.strip()]

    if args.join:
        separator = ConfigurationManager().get("scanner.block_separator", " ")
        return [separator.join(lines)] if lines else []
    return lines


def classify_fragments(
    fragments: List[str],
    best: bool = False,
    valid_only: bool = False
) -> List[Dict[str, Any]]:
    """
    Classify fragments into JSON-ready records.

    Args:
        fragments: Recognized text fragments.
        best: Keep only the single best match per fragment.
        valid_only: Drop results that fail validation.

    Returns:
        One record per fragment with its results.
    """
    classifier = get_classifier()
    records = []

    for fragment in fragments:
        if best:
            results = [classifier.best_match(fragment)]
        else:
            results = classifier.classify(fragment)

        if valid_only:
            results = [r for r in results if r.is_valid]

        records.append({
            'fragment': fragment,
            'results': [r.to_dict() for r in results]
        })

    return records


def write_output(records: List[Dict[str, Any]], output: Optional[str]) -> None:
    """
    Write records as JSON to a file or stdout.

    Raises:
        OutputError: If the output file cannot be written.
    """
    payload = json.dumps(records, indent=2, ensure_ascii=False)

    if output:
        output_path = Path(output)
        try:
            ensure_directory(output_path.parent)
            output_path.write_text(payload + "\n", encoding="utf-8")
        except OSError as e:
            raise OutputError(output, str(e)) from e
    else:
        print(payload)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Args:
        argv: Argument list, defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for errors or failed checks).
    """
    args = build_parser().parse_args(argv)

    try:
        ConfigurationManager.reset()
        ConfigurationManager(args.config)
        reset_classifier()
        setup_logger_from_config()
        if args.debug:
            logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)
            for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
                handler.setLevel(logging.DEBUG)
        logger = get_logger(__name__)

        if args.check is not None:
            validator = Modulus10Validator(args.length_control)
            valid, message = validator.validate(args.check)
            print(f"{args.check}: {message}")
            return 0 if valid else 1

        fragments = read_fragments(args)
        logger.debug(f"Classifying {len(fragments)} fragment(s)")

        records = classify_fragments(fragments, args.best, args.valid_only)
        write_output(records, args.output)

        found = sum(len(r['results']) for r in records)
        logger.info(f"Classified {len(records)} fragment(s), {found} result(s)")
        return 0

    except OCRScannerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130

    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if args.debug:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
