"""
decaf-scan: command line driver for the Decaf scanner.

With a file argument the whole file is scanned as one unit. Without one,
standard input is read line by line and every line is scanned on its own,
so a bad line is reported and the next one is still processed.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import ScanResult, scan, scan_file
from .lexer.emitter import format_result, result_to_dict

LOG = logging.getLogger("decaf")


def _write_result(result: ScanResult, out: TextIO, output_format: str):
    """Flush one finished unit to the output stream."""
    if output_format == "json":
        out.write(json.dumps(result_to_dict(result)) + "\n")
    else:
        out.write(format_result(result))
    out.flush()


def _log_result(result: ScanResult, unit: str):
    if result.ok:
        LOG.debug("%s: %d tokens", unit, len(result.tokens))
    else:
        LOG.debug("%s: %s", unit, str(result.error).rstrip())


def scan_path(path: str, out: TextIO, output_format: str = "text", encoding: str = "utf-8") -> bool:
    """Scan a whole file as one unit. Returns True when it tokenized cleanly."""
    LOG.debug("Scanning file %s", path)
    result = scan_file(path, encoding=encoding)
    _log_result(result, path)
    _write_result(result, out, output_format)
    return result.ok


def scan_lines(stream: TextIO, out: TextIO, output_format: str = "text") -> bool:
    """
    Scan each input line as an independent unit.

    Returns True when every line tokenized cleanly.
    """
    all_ok = True
    for number, line in enumerate(stream, start=1):
        result = scan(line.rstrip("\r\n"), "")
        _log_result(result, f"<stdin>:{number}")
        _write_result(result, out, output_format)
        all_ok = all_ok and result.ok
    return all_ok


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decaf-scan",
        description="Tokenize Decaf source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    decaf-scan program.dcf              # Scan a whole file
    decaf-scan < program.dcf            # Scan stdin one line at a time
    decaf-scan --format json prog.dcf   # Emit JSON instead of token lines
        """
    )
    parser.add_argument("file", nargs="?", default=None,
                        help="Decaf source file. If omitted, read stdin line by line")
    parser.add_argument("--format", choices=["text", "json"], default="text",
                        help="Output format (default: text)")
    parser.add_argument("--encoding", default="utf-8",
                        help="Source file encoding (default: utf-8)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    """Entry point. Returns 0 if every unit scanned, 1 on lexical errors, 2 on I/O errors."""
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if not LOG.handlers:
        logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(message)s")
    if args.verbose:
        LOG.setLevel(logging.DEBUG)
        LOG.debug("Verbose mode enabled")

    if args.file is None:
        ok = scan_lines(stdin, stdout, args.format)
    else:
        try:
            ok = scan_path(args.file, stdout, args.format, args.encoding)
        except (OSError, UnicodeDecodeError) as e:
            LOG.error("Cannot read %s: %s", args.file, e)
            return 2

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
