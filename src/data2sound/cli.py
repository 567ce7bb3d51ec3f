"""data2sound command line."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from data2sound import __version__
from data2sound.errors import Data2SoundError, io_error
from data2sound.header import header_problems, parse_header
from data2sound.protocol import HEADER_LEN
from data2sound.transfer import decode, encode

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}


def _fail(err: Data2SoundError) -> None:
    # Single-line reason on stderr, no stack trace.
    click.echo(f"{err.code}: {err}", err=True)
    raise SystemExit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="data2sound", message="%(prog)s %(version)s")
@click.option("-v", "--verbose", is_flag=True, help="Log each transfer step")
def main(verbose: bool) -> None:
    """Encode files into wav containers and decode them back."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.command("encode")
@click.argument("input", type=click.Path(path_type=Path))
@click.argument("output", type=click.Path(path_type=Path))
def encode_cmd(input: Path, output: Path) -> None:
    """Encode a file to a wav file."""
    try:
        encode(input, output)
    except Data2SoundError as e:
        _fail(e)


@click.command("decode")
@click.argument("input", type=click.Path(path_type=Path))
@click.argument("output", type=click.Path(path_type=Path))
@click.option("--strict", is_flag=True, help="Reject containers whose header fields do not match")
def decode_cmd(input: Path, output: Path, strict: bool) -> None:
    """Decode a wav file to a file."""
    try:
        decode(input, output, strict=strict)
    except Data2SoundError as e:
        _fail(e)


@main.command("info")
@click.argument("path", type=click.Path(path_type=Path))
def info_cmd(path: Path) -> None:
    """Print the header fields of a wav file as JSON."""
    try:
        with open(path, "rb") as f:
            head = f.read(HEADER_LEN)
        size = path.stat().st_size
        header = parse_header(head)
    except OSError as e:
        _fail(io_error(e))
    except Data2SoundError as e:
        _fail(e)

    problems = header_problems(header, size)
    result = {
        "header": header.as_dict(),
        "payload_length": size - HEADER_LEN,
        "valid": not problems,
        "errors": problems,
    }
    click.echo(json.dumps(result, **CANONICAL_JSON_KW))


main.add_command(encode_cmd)
main.add_command(encode_cmd, "e")
main.add_command(decode_cmd)
main.add_command(decode_cmd, "d")


if __name__ == "__main__":
    main()
