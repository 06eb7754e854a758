"""Typer-based command line interface for the sentence splitter.

``sentsplitter split`` reads a plain-text document, splits it into sentences
and writes one row per sentence span.  ``sentsplitter demo`` runs the splitter
over one of the built-in reference passages and prints ``start--end: text``
lines.

Exit codes
----------
0 success
3 I/O error (missing input, unreadable or unwritable files)
4 configuration error
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .config import SplitterConfig, load_config
from .io import OUTPUT_FORMATS, read_document, render_spans, write_output
from .samples import PASSAGES
from .split.base import SPLIT_MODES
from .split.splitter import EnglishSentenceSplitter
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="sentsplitter",
    help="Rule-based sentence splitter. Use 'sentsplitter split' on a text file.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _check_choice(value: str | None, choices: tuple[str, ...], option: str) -> None:
    if value is not None and value not in choices:
        _safe_exit(4, f"{option} must be one of {', '.join(choices)}; got {value!r}")


def _load(config_path: Path | None, mode: str | None) -> SplitterConfig:
    """Load configuration applying the ``--mode`` override."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if mode is not None:
        cfg = cfg.model_copy(update={"mode": mode})
    return cfg


@app.callback()
def main() -> None:
    """Entry point for the sentsplitter command group."""
    pass


@app.command()
def split(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input text file"
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output file; defaults to standard output"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    mode: Optional[str] = typer.Option(  # noqa: B008
        None, "--mode", help="Behaviour mode [legacy|corrected]"
    ),
    fmt: str = typer.Option("tsv", "--format", help="Output format [tsv|json|text]"),  # noqa: B008
    abbreviations: Optional[list[str]] = typer.Option(  # noqa: B008
        None, "--abbreviation", help="Extra abbreviation (repeatable)"
    ),
    lowercase_terms: Optional[list[str]] = typer.Option(  # noqa: B008
        None, "--lowercase-term", help="Extra lowercase term (repeatable)"
    ),
    encoding_in: str = typer.Option("utf-8-sig", help="Input file encoding"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log boundary decisions to stderr"
    ),
) -> None:
    """Split ``in_path`` into sentences and write their spans."""

    configure_logging(verbose)
    _check_choice(mode, SPLIT_MODES, "--mode")
    _check_choice(fmt, OUTPUT_FORMATS, "--format")
    cfg = _load(config_path, mode)

    splitter = EnglishSentenceSplitter.from_config(cfg)
    for term in abbreviations or []:
        splitter.add_abbreviation(term)
    for term in lowercase_terms or []:
        splitter.add_lowercase_term(term)

    try:
        text = read_document(in_path, encoding=encoding_in)
    except (OSError, UnicodeDecodeError) as exc:
        _safe_exit(3, str(exc))
    logger.info("read %d chars from %s", len(text), in_path)

    spans = splitter.markup_raw_text(text)
    logger.info("found %d sentences", len(spans))
    rendered = render_spans(spans, text, fmt)  # type: ignore[arg-type]

    if out_path is None:
        typer.echo(rendered, nl=False)
        return
    try:
        write_output(out_path, rendered)
    except OSError as exc:
        _safe_exit(3, str(exc))


@app.command()
def demo(
    passage: str = typer.Option("bosnian", "--passage", help="Reference passage [bosnian|myosin]"),  # noqa: B008
    mode: Optional[str] = typer.Option(  # noqa: B008
        None, "--mode", help="Behaviour mode [legacy|corrected]"
    ),
) -> None:
    """Print the sentences of a built-in reference passage."""

    _check_choice(passage, tuple(PASSAGES), "--passage")
    _check_choice(mode, SPLIT_MODES, "--mode")
    cfg = _load(None, mode)
    text = PASSAGES[passage]
    spans = EnglishSentenceSplitter.from_config(cfg).markup_raw_text(text)
    typer.echo(render_spans(spans, text, "text"), nl=False)


__all__ = ["app"]
