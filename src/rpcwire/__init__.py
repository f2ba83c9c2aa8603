import logging
import sys
from typing import Iterable, TextIO

import logfire

from . import jsonrpc

logger = logging.getLogger(__name__)


def inspect_message(line: str) -> tuple[str, bool]:
    """Classify and re-encode one message.

    Returns the line to print and whether the message was valid. Malformed
    messages are answered with the error response a server would send back.
    """
    try:
        obj = jsonrpc.peek(line)
        kind = jsonrpc.classify(obj)
        msg = jsonrpc.decode_message(obj)
        return f"{kind.value}\t{msg.to_json()}", True
    except jsonrpc.CodecError as e:
        logger.info("Rejected message: %s", e, extra={"jsonRpcMsg": line})
        return f"error\t{jsonrpc.Response.failure(jsonrpc.NULL_ID, e).to_json()}", False


def inspect_stream(lines: Iterable[str], out: TextIO) -> int:
    """Inspect newline-delimited messages, returning the number of invalid ones."""
    failures = 0
    for line in lines:
        line = line.strip()
        if not line:
            continue
        text, ok = inspect_message(line)
        print(text, file=out)
        if not ok:
            failures += 1
    return failures


def main(argv: list[str] | None = None) -> None:
    import argparse

    parser = argparse.ArgumentParser(
        description="Classifies newline-delimited JSON-RPC 2.0 messages and prints their canonical encoding"
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="File holding one JSON-RPC message per line. Defaults to stdin.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Minimum level of the log messages to emit. Defaults to WARNING.",
    )
    parser.add_argument(
        "--enable-logfire",
        action="store_true",
        help="Enables sending logs to Logfire",
    )

    args = parser.parse_args(argv)

    if args.enable_logfire:
        logfire.configure(scrubbing=False)
        logging.basicConfig(
            level=args.log_level, handlers=[logfire.LogfireLoggingHandler()]
        )
    else:
        logging.basicConfig(level=args.log_level)

    logging.info("Starting inspection", extra={"input": args.input.name})

    with logfire.span("Inspect {source=}", source=args.input.name):
        failures = inspect_stream(args.input, sys.stdout)

    if failures:
        logger.warning("%d invalid messages", failures)
        raise SystemExit(1)
