#!/usr/bin/env python3
"""TapTempo - CLI Entry Point.

Command-line interface for the tap tempo tool. Reads the keyboard one
character at a time and prints the tempo after each Enter keypress.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from loguru import logger

from taptempo import __version__
from taptempo.core.clock import Clock
from taptempo.core.config import (
    DEFAULT_PRECISION,
    DEFAULT_RESET_TIME,
    DEFAULT_SAMPLE_SIZE,
    PRECISION_MAX,
    TapTempoConfig,
)
from taptempo.core.errors import ArgumentError
from taptempo.core.estimator import format_bpm
from taptempo.core.session import TapAction, TapSession, classify_key
from taptempo.messages import Messages, load_messages

PROG = "TapTempo"


@dataclass(frozen=True)
class ExitRequest:
    """Parsing ended the run early; the entry point exits with this code."""

    code: int


@dataclass(frozen=True)
class CommandLine:
    """Successfully parsed command line."""

    config: TapTempoConfig
    verbose: bool = False
    log_file: Path | None = None


class TapTempoArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting the process."""

    def error(self, message):
        raise ArgumentError(message)


def build_parser(messages: Messages) -> TapTempoArgumentParser:
    """Build the argument parser with help texts from the catalogue."""
    parser = TapTempoArgumentParser(prog=PROG, add_help=False)

    parser.add_argument("-h", "--help", action="store_true", help=messages.cli_help)
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        default=DEFAULT_PRECISION,
        help=messages.cli_precision.format(default=DEFAULT_PRECISION, max=PRECISION_MAX),
    )
    parser.add_argument(
        "-r",
        "--reset-time",
        type=int,
        default=DEFAULT_RESET_TIME,
        help=messages.cli_reset.format(default=DEFAULT_RESET_TIME),
    )
    parser.add_argument(
        "-s",
        "--sample-size",
        type=int,
        default=DEFAULT_SAMPLE_SIZE,
        help=messages.cli_sample_size.format(default=DEFAULT_SAMPLE_SIZE),
    )
    parser.add_argument("-v", "--version", action="store_true", help=messages.cli_version)
    parser.add_argument("--verbose", action="store_true", help=messages.cli_verbose)
    parser.add_argument("--log-file", type=Path, default=None, help=messages.cli_log_file)

    return parser


def parse_arguments(
    argv: list[str] | None, messages: Messages, out: TextIO
) -> CommandLine | ExitRequest:
    """
    Parse the command line.

    Help, version and malformed arguments are answered here, on `out`,
    and reported back as an ExitRequest.

    Args:
        argv: Arguments without the program name (None means no arguments)
        messages: Catalogue for help and version texts
        out: Stream receiving help, version and error texts

    Returns:
        CommandLine to run the tap loop, or ExitRequest to stop
    """
    parser = build_parser(messages)

    try:
        args = parser.parse_args(argv or [])
    except ArgumentError as e:
        print(f"{type(e).__name__}: {e}", file=out)
        print(parser.format_help(), file=out, end="")
        return ExitRequest(code=1)

    if args.help or args.version:
        if args.help:
            print(parser.format_help(), file=out, end="")
        if args.version:
            print(messages.version.format(version=__version__), file=out)
        return ExitRequest(code=0)

    config = TapTempoConfig(
        precision=args.precision,
        reset_time=args.reset_time,
        sample_size=args.sample_size,
    )
    return CommandLine(config=config, verbose=args.verbose, log_file=args.log_file)


def setup_logging(verbose: bool = False, log_file: Path | None = None):
    """Configure logging. Without options the console only shows tap output."""
    logger.remove()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} - {message}",
        )

    if verbose:
        logger.add(sys.stderr, level="DEBUG")


def tap_loop(
    session: TapSession, messages: Messages, stdin: TextIO, stdout: TextIO
) -> int:
    """
    Read keys until quit and print a line for every tap.

    End of input is handled like the quit key.

    Returns:
        Exit code (always 0)
    """
    print(messages.start, file=stdout, flush=True)

    while True:
        char = stdin.read(1)
        if not char:
            logger.debug("Input closed")
            action = TapAction.QUIT
        else:
            action = classify_key(char)

        if action is TapAction.IGNORE:
            continue

        if action is TapAction.QUIT:
            print(messages.quit, file=stdout, flush=True)
            return 0

        result = session.tap()
        if result.bpm is None:
            print(messages.hit_enter, file=stdout, flush=True)
        else:
            bpm = format_bpm(result.bpm, session.config.precision)
            print(messages.tempo.format(bpm=bpm), file=stdout, flush=True)


def run(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    clock: Clock | None = None,
    messages: Messages | None = None,
) -> int:
    """
    Run TapTempo and return the process exit code.

    Args:
        argv: Arguments without the program name
        stdin: Key source (sys.stdin if None)
        stdout: Output stream (sys.stdout if None)
        clock: Time source for taps (monotonic clock if None)
        messages: Catalogue (detected from the locale if None)
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    messages = messages or load_messages()

    outcome = parse_arguments(argv, messages, stdout)
    if isinstance(outcome, ExitRequest):
        return outcome.code

    try:
        setup_logging(verbose=outcome.verbose, log_file=outcome.log_file)
    except OSError as e:
        print(f"{type(e).__name__}: {e}", file=stdout)
        return 1
    logger.info(f"Starting with {outcome.config.model_dump()}")

    session = TapSession(outcome.config, clock=clock)
    return tap_loop(session, messages, stdin, stdout)


def main() -> int:
    """Main CLI entry point."""
    try:
        return run(sys.argv[1:])
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
