"""Typer-based command line interface for the mask tools.

Every command reads newline-delimited text from ``--input`` or stdin and
writes result lines to stdout.  Diagnostics go to stderr.  Configuration is
loaded once per invocation from the packaged defaults, an optional ``--config``
YAML file and ``MASKTOOLS_*`` environment variables; command line flags win
over all of them.

Commands
--------
mask      Create masks from text
match     Print lines whose mask appears in a mask file
sub       Substitute tokens from a file into matching mask positions
mutate    Substitute self-harvested chunks into each line
tokens    Print alpha-only tokens of a given length (98 or more allows all)
partial   Mask only the selected classes
remove    Remove characters of the selected classes

Exit codes
----------
0 success
3 I/O error (unreadable input, mask or token file)
4 configuration error (bad config file, chunk size or class spec)
"""

from __future__ import annotations

import codecs
import io
import os
import sys
from collections.abc import Iterable, Iterator
from contextlib import ExitStack
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from . import pipeline
from .config import ConfigModel, load_config
from .io import iter_lines, load_masks, load_tokens
from .mask.canonicalizer import ReplacementTable, build_replacement_table
from .mask.validator import validate_class_spec
from .replace.mutation import parse_chunk_size
from .utils.constants import BYTE_FLAG, CLASS_FLAGS
from .utils.errors import ConfigurationError
from .utils.logging import configure

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="masktools",
    help="Hashcat mask utilities. Pipe text in, e.g. 'cat words.txt | masktools mask -v'.",
)

EXIT_IO = 3
EXIT_CONFIG = 4

SKIP_MESSAGE = "[SKIP] Input mask contains non-mask characters: "


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(f"ERROR: {msg}", err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))
    except (ValidationError, ValueError, yaml.YAMLError) as exc:
        _safe_exit(EXIT_CONFIG, str(exc).splitlines()[0])


def _table(cfg: ConfigModel) -> ReplacementTable:
    return build_replacement_table(cfg.masking.class_spec)


def _input_lines(in_path: Path | None, cfg: ConfigModel, stack: ExitStack) -> Iterator[str]:
    if in_path is None:
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            return iter_lines(sys.stdin)
        stream = io.TextIOWrapper(
            buffer, encoding=cfg.io.encoding, errors=cfg.io.errors, newline=""
        )
        stack.callback(stream.detach)
        return iter_lines(stream)
    try:
        fh = stack.enter_context(
            open(in_path, "r", encoding=cfg.io.encoding, errors=cfg.io.errors, newline="")
        )
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))
    return iter_lines(fh)


def _encode(text: str, cfg: ConfigModel) -> bytes:
    # utf-8-sig would prepend a BOM to every line.
    encoding = codecs.lookup(cfg.io.encoding).name
    if encoding == "utf-8-sig":
        encoding = "utf-8"
    return text.encode(encoding, cfg.io.errors)


def _emit(results: Iterable[str], cfg: ConfigModel) -> None:
    try:
        for line in results:
            typer.echo(_encode(line, cfg))
    except (OSError, UnicodeError) as exc:
        _safe_exit(EXIT_IO, str(exc))


def _positive(value: str, label: str) -> int:
    try:
        return parse_chunk_size(value, label=label)
    except ConfigurationError as exc:
        _safe_exit(EXIT_CONFIG, str(exc))


def _class_spec(value: str) -> str:
    try:
        return validate_class_spec(value, allowed=CLASS_FLAGS + BYTE_FLAG)
    except ConfigurationError as exc:
        _safe_exit(EXIT_CONFIG, str(exc))


@app.callback()
def main(
    debug: bool = typer.Option(  # noqa: B008
        False, "--debug", help="Emit debug log records to stderr"
    ),
) -> None:
    """Entry point for the masktools command group."""

    configure(debug)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def mask(
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Append length, complexity and entropy"
    ),
    multibyte: bool = typer.Option(  # noqa: B008
        False, "--multibyte", "-m", help="Expand non-ASCII characters to ?b tokens"
    ),
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--input", "-i", help="Read lines from a file instead of stdin"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Create masks from text."""

    cfg = _load(config_path)
    with ExitStack() as stack:
        lines = _input_lines(in_path, cfg, stack)
        _emit(
            pipeline.generate_masks(
                lines,
                _table(cfg),
                multibyte=multibyte or cfg.masking.multibyte,
                verbose=verbose or cfg.output.verbose,
            ),
            cfg,
        )


@app.command()
def match(
    mask_file: Path = typer.Argument(..., help="File with one mask per line"),  # noqa: B008
    multibyte: bool = typer.Option(  # noqa: B008
        False, "--multibyte", "-m", help="Expand non-ASCII characters to ?b tokens"
    ),
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--input", "-i", help="Read lines from a file instead of stdin"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Print input lines whose mask appears in MASK_FILE."""

    cfg = _load(config_path)
    use_bytes = multibyte or cfg.masking.multibyte
    try:
        loaded = load_masks(
            mask_file, allow_bytes=use_bytes, encoding=cfg.io.encoding, errors=cfg.io.errors
        )
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))
    for bad in loaded.skipped:
        typer.echo(_encode(f"{SKIP_MESSAGE}{bad}", cfg), err=True)

    with ExitStack() as stack:
        lines = _input_lines(in_path, cfg, stack)
        _emit(pipeline.match_masks(lines, loaded.masks, _table(cfg), multibyte=use_bytes), cfg)


@app.command()
def sub(
    token_file: Path = typer.Argument(..., help="File with one token per line"),  # noqa: B008
    replacements: Optional[int] = typer.Option(  # noqa: B008
        None, "--replacements", "-n", help="Max replacements per item; negative replaces all"
    ),
    multibyte: bool = typer.Option(  # noqa: B008
        False, "--multibyte", "-m", help="Expand non-ASCII characters to ?b tokens"
    ),
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--input", "-i", help="Read lines from a file instead of stdin"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Substitute tokens from TOKEN_FILE where their mask matches."""

    cfg = _load(config_path)
    try:
        token_list = load_tokens(token_file, encoding=cfg.io.encoding, errors=cfg.io.errors)
    except OSError as exc:
        _safe_exit(EXIT_IO, str(exc))

    with ExitStack() as stack:
        lines = _input_lines(in_path, cfg, stack)
        _emit(
            pipeline.substitute_tokens(
                lines,
                token_list,
                _table(cfg),
                max_replacements=(
                    cfg.substitution.max_replacements if replacements is None else replacements
                ),
                multibyte=multibyte or cfg.masking.multibyte,
            ),
            cfg,
        )


@app.command()
def mutate(
    chunk_size: str = typer.Argument(..., help="Chunk length harvested from each line"),
    replacements: Optional[int] = typer.Option(  # noqa: B008
        None, "--replacements", "-n", help="Max replacements per item; negative replaces all"
    ),
    multibyte: bool = typer.Option(  # noqa: B008
        False, "--multibyte", "-m", help="Expand non-ASCII characters to ?b tokens"
    ),
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--input", "-i", help="Read lines from a file instead of stdin"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Mutate text by chunking it and swapping chunks into matching positions."""

    size = _positive(chunk_size, "chunk size")
    cfg = _load(config_path)
    with ExitStack() as stack:
        lines = _input_lines(in_path, cfg, stack)
        _emit(
            pipeline.mutate_lines(
                lines,
                size,
                _table(cfg),
                max_replacements=(
                    cfg.substitution.max_replacements if replacements is None else replacements
                ),
                multibyte=multibyte or cfg.masking.multibyte,
            ),
            cfg,
        )


@app.command()
def tokens(
    length: str = typer.Argument(..., help="Token length; 98 or more allows all"),
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--input", "-i", help="Read lines from a file instead of stdin"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Print the alpha-only token of each line when it has LENGTH letters."""

    size = _positive(length, "token length")
    cfg = _load(config_path)
    with ExitStack() as stack:
        _emit(pipeline.generate_tokens(_input_lines(in_path, cfg, stack), size), cfg)


@app.command()
def partial(
    class_spec: str = typer.Argument(..., help="Classes to mask from u, l, d, s and b"),
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--input", "-i", help="Read lines from a file instead of stdin"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Partially replace characters with mask tokens."""

    spec = _class_spec(class_spec)
    cfg = _load(config_path)
    with ExitStack() as stack:
        _emit(pipeline.generate_partial_masks(_input_lines(in_path, cfg, stack), spec), cfg)


@app.command()
def remove(
    class_spec: str = typer.Argument(..., help="Classes to remove from u, l, d, s and b"),
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--input", "-i", help="Read lines from a file instead of stdin"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Remove characters that belong to the selected classes."""

    spec = _class_spec(class_spec)
    cfg = _load(config_path)
    with ExitStack() as stack:
        _emit(pipeline.remove_partial_masks(_input_lines(in_path, cfg, stack), spec), cfg)
