from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import typer
import yaml

from .config import OUTPUT_FORMATS, ReadScoreConfig, load_config
from .epub import EPUBParseError
from .extraction import (
    SUPPORTED_SUFFIXES,
    ContentExtractionError,
    ExtractedContent,
    load_content,
    load_document,
)
from .highlighting import ISSUE_TYPES, HighlightPager, locate
from .models import AnalysisResult, Document
from .pipeline import (
    SelectionTooShortError,
    analyze_content,
    analyze_corpus,
    analyze_selection,
)

app = typer.Typer(help="ReadScore readability CLI.", no_args_is_help=True)


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: 'json' or 'text'."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress."),
) -> None:
    """Analyze a file or a directory of files and print the results."""
    _configure_logging(verbose)
    cfg = _load_cli_config(config, output_format)
    documents = _load_documents(input_path, cfg)
    results = analyze_corpus(documents, cfg)
    _emit(results, cfg)


@app.command()
def selection(
    text: str | None = typer.Option(
        None, "--text", "-t", help="Text to analyze; read from stdin when omitted."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    output_format: str | None = typer.Option(None, "--format", "-f"),
) -> None:
    """Analyze a pasted selection of text."""
    cfg = _load_cli_config(config, output_format)
    if text is None:
        text = typer.get_text_stream("stdin").read()
    try:
        result = analyze_selection(text, cfg)
    except SelectionTooShortError as exc:
        raise typer.BadParameter(str(exc), param_hint="--text") from exc
    _emit({"selection": result}, cfg)


@app.command()
def issues(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    batch_size: int | None = typer.Option(
        None, "--batch-size", "-b", help="Issues per page (default from config)."
    ),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page to show."),
) -> None:
    """List the flagged issues of one file, one page at a time."""
    cfg = _load_cli_config(config, None)
    content = _load_content(input_path, cfg)
    result = analyze_content(content, cfg)
    pager = HighlightPager(result, batch_size=batch_size or cfg.highlight_batch_size)

    for issue_type in ISSUE_TYPES:
        for _ in range(page - 1):
            pager.next_batch(issue_type)
        batch = pager.next_batch(issue_type)
        typer.echo(f"{issue_type}: showing up to {batch.next_offset} of {batch.total}")
        for issue in batch.issues:
            element = locate(issue, content.elements)
            where = f"{element.tag}#{element.position}" if element else "?"
            typer.echo(f"  [{where}] {_preview(issue.text)}")
    if pager.has_more:
        typer.echo(f"More issues available; rerun with --page {page + 1}.")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadScoreConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_cli_config(path: Path | None, output_format: str | None) -> ReadScoreConfig:
    """Load config from disk and apply the CLI format override."""
    try:
        cfg = load_config(path)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    if output_format is not None:
        if output_format not in OUTPUT_FORMATS:
            raise typer.BadParameter(
                f"Choose one of: {', '.join(OUTPUT_FORMATS)}.", param_hint="--format"
            )
        cfg.output_format = output_format
    return cfg


def _load_documents(input_path: Path, config: ReadScoreConfig) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name, config)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_SUFFIXES
    )
    return [
        _document_from_file(file, str(file.relative_to(input_path)), config)
        for file in files
    ]


def _document_from_file(path: Path, doc_id: str, config: ReadScoreConfig) -> Document:
    try:
        return load_document(path, doc_id, config)
    except (EPUBParseError, ContentExtractionError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_content(path: Path, config: ReadScoreConfig) -> ExtractedContent:
    try:
        return load_content(path, config)
    except (EPUBParseError, ContentExtractionError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _emit(results: Dict[str, AnalysisResult], config: ReadScoreConfig) -> None:
    if config.output_format == "text":
        for doc_id, result in results.items():
            typer.echo(_format_text(doc_id, result))
        return
    payload = [
        {"doc_id": doc_id, **result.to_dict(config.include_issue_text)}
        for doc_id, result in sorted(results.items())
    ]
    typer.echo(json.dumps({"documents": payload}, indent=2))


def _format_text(doc_id: str, result: AnalysisResult) -> str:
    if result.error:
        return f"{doc_id}: {result.error}"
    lines: List[Tuple[str, Any]] = [
        ("Level", result.level.value),
        ("Grade", f"{result.grade:.1f}"),
        ("Reading time", result.reading_time.formatted),
        ("Words", f"{result.word_count} ({result.word_count_category.label})"),
        ("Sentences", result.sentence_count),
        (
            "Avg sentence length",
            f"{result.avg_sentence_length} ({result.sentence_quality.label})",
        ),
        ("Complex sentences", len(result.issues.complex_sentences)),
        ("Dense paragraphs", len(result.issues.dense_paragraphs)),
    ]
    body = "\n".join(f"  {name}: {value}" for name, value in lines)
    note = "\n  Low confidence: fewer than 100 words." if result.is_low_confidence else ""
    return f"{doc_id}\n{body}{note}"


def _preview(text: str, limit: int = 80) -> str:
    return text if len(text) <= limit else text[: limit - 3] + "..."


if __name__ == "__main__":
    main()
