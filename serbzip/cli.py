"""Command-line interface for serbzip.

WHY: Users need a simple way to compress and expand text files, and to
compile a wordlist into a binary dictionary image, from the terminal.
The CLI wires together dictionary resolution (explicit, local, home
directory, or downloaded), the codec registry, and the stream transcoder.

HOW: Uses argparse with three mutually exclusive modes: --compress,
--expand and --compile. Input defaults to stdin and output to stdout;
status messages and the banner go to stderr so the CLI can be piped.

RULES:
- Exactly one of --compress, --expand, --compile
- Dictionary lookup order when --dictionary is not given:
  ./dict.blk, ./dict.txt, ~/.serbzip/dict.blk (downloaded if missing)
- .txt dictionaries are wordlists, .blk dictionaries are binary images;
  any other extension is rejected
- --compile writes a .blk image to --dictionary-image-output-file
- --quiet suppresses the banner and status messages, never errors
- Errors print "Error: ..." to stderr and exit with status 1
- Input or wordlist bytes that are not valid UTF-8 are reported the same way
- The banner is coloured only when stderr is a terminal
"""

from __future__ import annotations

import argparse
import enum
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import httpx
from rich.console import Console

from serbzip import __version__
from serbzip.api.downloader import download_to_file
from serbzip.codecs import CODECS
from serbzip.config import (
    DEFAULT_CODEC,
    DEFAULT_DICT_BINARY_FILE,
    DEFAULT_DICT_TEXT_FILE,
    DICT_EXT_BINARY,
    DICT_EXT_TEXT,
    DICT_URL,
    home_dict_path,
)
from serbzip.core.dictionary import Dictionary
from serbzip.errors import SerbzipError

logger = logging.getLogger(__name__)

_BANNER = (
    ("red", r" ___   _   _    _  __ _   _  _  ___ ___ ___  "),
    ("red", r"| _ ) /_\ | |  | |/ //_\ | \| |/ _ \_ _|   \ "),
    ("blue", r"| _ \/ _ \| |__| ' </ _ \| .` | (_) | || |) |"),
    ("white", r"|___/_/ \_\____|_|\_\/ \_\_|\_|\___/___|___/ "),
)


class CliErrorKind(enum.Enum):
    UNSUPPORTED_DICT_FORMAT = "unsupported dictionary format"
    UNSUPPORTED_BINARY_DICT_FORMAT = "unsupported binary dictionary format"
    UNSPECIFIED_BINARY_DICT_OUTPUT_FILE = "unspecified dictionary output file"
    NO_SUCH_INPUT_FILE = "no such input file"
    NO_SUCH_DICT_FILE = "no such dictionary file"
    NO_HOME_DIR = "no home directory"
    UNKNOWN_CODEC = "unknown codec"


class CliError(SerbzipError):
    """Raised for invalid combinations of arguments and missing files."""

    def __init__(self, kind: CliErrorKind, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__("[{}] {}".format(kind.value, detail))


def _status(msg: str, quiet: bool = False) -> None:
    """Print a status message to stderr unless quiet."""
    if not quiet:
        print(msg, file=sys.stderr, flush=True)


def _print_banner() -> None:
    # Created per call so colour detection follows the current stderr
    console = Console(stderr=True)
    console.print()
    for style, line in _BANNER:
        console.print(line, style=style, markup=False, highlight=False, soft_wrap=True)
    console.print()


def resolve_dict_path(explicit: Optional[str], quiet: bool = False) -> Path:
    """Find the dictionary file to use, downloading the default if needed.

    Args:
        explicit: Path given with --dictionary, or None.
        quiet: Suppress status messages.

    Returns:
        Path to an existing dictionary file.

    Raises:
        CliError: If an explicit path does not exist, or the home
            directory cannot be determined.
        DownloadError: If the default dictionary could not be fetched.
    """
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise CliError(
                CliErrorKind.NO_SUCH_DICT_FILE,
                "failed to open dictionary file {}".format(path),
            )
        return path

    for candidate in (Path(DEFAULT_DICT_BINARY_FILE), Path(DEFAULT_DICT_TEXT_FILE)):
        if candidate.is_file():
            return candidate

    try:
        home_path = home_dict_path()
    except RuntimeError as e:
        raise CliError(
            CliErrorKind.NO_HOME_DIR,
            "the home directory could not be located; please specify the dictionary file",
        ) from e
    if not home_path.is_file():
        _status("Downloading dictionary file to {}".format(home_path), quiet)
        download_to_file(DICT_URL, home_path)
        _status("Download complete", quiet)
    return home_path


def load_dictionary(path: Path) -> Dictionary:
    """Load a .txt wordlist or a .blk image, chosen by extension.

    Raises:
        CliError: If the extension is neither .txt nor .blk.
    """
    ext = path.suffix.lower()
    if ext == DICT_EXT_TEXT:
        with open(path, encoding="utf-8") as f:
            return Dictionary.read_from_text_file(f)
    if ext == DICT_EXT_BINARY:
        with open(path, "rb") as f:
            return Dictionary.read_from_binary_image(f)
    raise CliError(
        CliErrorKind.UNSUPPORTED_DICT_FORMAT,
        "unsupported dictionary format for {}: only {} and {} files can be read".format(
            path, DICT_EXT_TEXT, DICT_EXT_BINARY
        ),
    )


def _compile(args: argparse.Namespace, dictionary: Dictionary) -> None:
    if not args.dictionary_image_output_file:
        raise CliError(
            CliErrorKind.UNSPECIFIED_BINARY_DICT_OUTPUT_FILE,
            "dictionary output file not specified",
        )
    output_path = Path(args.dictionary_image_output_file)
    if output_path.suffix.lower() != DICT_EXT_BINARY:
        raise CliError(
            CliErrorKind.UNSUPPORTED_BINARY_DICT_FORMAT,
            "only {} files are supported for compiled dictionaries".format(DICT_EXT_BINARY),
        )
    _status(
        "Writing compiled dictionary image to {} ({} words)".format(output_path, dictionary.count()),
        args.quiet,
    )
    with open(output_path, "wb") as f:
        dictionary.write_to_binary_image(f)


def _open_input(args: argparse.Namespace) -> TextIO:
    if args.input_file is None:
        if sys.stdin.isatty():
            _status("Enter text; CTRL+D when done.", args.quiet)
        return sys.stdin
    path = Path(args.input_file)
    if not path.is_file():
        raise CliError(
            CliErrorKind.NO_SUCH_INPUT_FILE,
            "failed to open input file {}".format(path),
        )
    return open(path, encoding="utf-8")


def _transcode(args: argparse.Namespace, dictionary: Dictionary) -> None:
    codec = CODECS[args.codec](dictionary)
    reader = _open_input(args)
    try:
        writer: TextIO = (
            open(args.output_file, "w", encoding="utf-8")
            if args.output_file
            else sys.stdout
        )
        try:
            if args.compress:
                lines = codec.compress(reader, writer)
            else:
                lines = codec.expand(reader, writer)
            writer.flush()
        finally:
            if writer is not sys.stdout:
                writer.close()
    finally:
        if reader is not sys.stdin:
            reader.close()
    logger.info("%s: %d line(s) processed", codec.name, lines)


def _run(args: argparse.Namespace) -> None:
    if args.codec not in CODECS:
        raise CliError(
            CliErrorKind.UNKNOWN_CODEC,
            "unknown codec '{}'; choose from {}".format(args.codec, ", ".join(sorted(CODECS))),
        )
    if not args.quiet:
        _print_banner()

    dict_path = resolve_dict_path(args.dictionary, args.quiet)
    dictionary = load_dictionary(dict_path)
    logger.debug("Using dictionary %s: %r", dict_path, dictionary)

    if args.compile:
        _compile(args, dictionary)
    else:
        _transcode(args, dictionary)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable; tests can inspect the parser without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="serbzip",
        description="A quasi-lossless Balkanoidal meta-lingual compressor.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-c", "--compress", action="store_true", help="Compress/encode.")
    mode.add_argument("-x", "--expand", action="store_true", help="Expand/decode.")
    mode.add_argument("-p", "--compile", action="store_true", help="Compile dictionary image.")

    parser.add_argument(
        "-d",
        "--dictionary",
        default=None,
        help="Dictionary file ({} for a wordlist, {} for a binary image).".format(
            DICT_EXT_TEXT, DICT_EXT_BINARY
        ),
    )
    parser.add_argument("-i", "--input-file", default=None, help="Input file (defaults to stdin).")
    parser.add_argument("-o", "--output-file", default=None, help="Output file (defaults to stdout).")
    parser.add_argument(
        "-m",
        "--dictionary-image-output-file",
        default=None,
        help="Output file for the compiled dictionary image.",
    )
    parser.add_argument(
        "--codec",
        default=DEFAULT_CODEC,
        choices=sorted(CODECS.keys()),
        help="Codec implementation (default: %(default)s).",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress noncritical output.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Returns the process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        _run(args)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        return 130
    except (SerbzipError, OSError, UnicodeDecodeError, httpx.HTTPError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
