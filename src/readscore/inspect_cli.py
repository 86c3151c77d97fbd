from __future__ import annotations

from pathlib import Path

import click

from .extraction import read_source_text
from .issues import count_clauses
from .sentences import extract_sentences
from .syllables import count_syllables
from .tokenization import extract_words


@click.group(name="inspect")
def inspect_group() -> None:
    """Show the intermediate output of each scoring stage."""


@inspect_group.command("sentences")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
def inspect_sentences(input_file: str) -> None:
    """Print one detected sentence per line."""
    text = read_source_text(Path(input_file))
    sentences = extract_sentences(text)
    for idx, sentence in enumerate(sentences):
        click.echo(f"{idx:>4}  {sentence}")
    click.echo(f"Total sentences: {len(sentences)}")


@inspect_group.command("words")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--syllables", is_flag=True, default=False, help="Show syllable counts.")
def inspect_words(input_file: str, syllables: bool) -> None:
    """Print the normalized word tokens."""
    text = read_source_text(Path(input_file))
    words = extract_words(text)
    for word in words:
        click.echo(f"{word}\t{count_syllables(word)}" if syllables else word)
    click.echo(f"Total words: {len(words)}")


@inspect_group.command("syllables")
@click.argument("words", nargs=-1, required=True)
def inspect_syllables(words: tuple[str, ...]) -> None:
    """Estimate syllables for the given words."""
    for word in words:
        click.echo(f"{word}: {count_syllables(word)}")


@inspect_group.command("clauses")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
def inspect_clauses(input_file: str) -> None:
    """Print the estimated clause count of every sentence."""
    text = read_source_text(Path(input_file))
    for sentence in extract_sentences(text):
        words = len(extract_words(sentence))
        click.echo(f"{count_clauses(sentence)} clauses, {words} words: {sentence}")
