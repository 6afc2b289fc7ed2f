"""Command line interface for term extraction and relation lookup.

Usage:
    termlex extract "The price of coffee rose sharply."
    termlex extract --strategy pattern "Quick brown foxes jump."
    termlex relate car --chain vehicle --chain truck
    termlex senses bank
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from termlex.exceptions import BackendUnavailableError
from termlex.extraction.factory import create_phrase_extractor
from termlex.lexical.classifier import LexicalRelationClassifier
from termlex.lexical.database import WordNetLexicalDatabase
from termlex.lexical.models import LexicalChain
from termlex.utils.config import Config, load_config
from termlex.utils.logging import setup_logging

app = typer.Typer(help="Extract key phrases and classify lexical relations.")

console = Console(color_system=None, force_terminal=False, width=120)


def _load(config_path: Optional[Path]) -> Config:
    config = load_config(config_path) if config_path else Config()
    setup_logging(config.logging)
    return config


def _classifier(config: Config) -> LexicalRelationClassifier:
    try:
        return LexicalRelationClassifier(WordNetLexicalDatabase(config.lexicon))
    except BackendUnavailableError as exc:
        console.print(f"Error: {exc}", markup=False)
        raise typer.Exit(code=1) from exc


@app.command()
def extract(
    text: str = typer.Argument(..., help="Text to extract phrases from."),
    strategy: Optional[str] = typer.Option(
        None, help="Extraction strategy: auto, pattern or dependency."
    ),
    config: Optional[Path] = typer.Option(None, help="Path to config file."),
) -> None:
    """Print the key phrases found in TEXT."""
    cfg = _load(config)
    if strategy:
        if strategy not in ("auto", "pattern", "dependency"):
            console.print(f"Unknown strategy: {strategy}")
            raise typer.Exit(code=2)
        cfg.extraction.strategy = strategy

    try:
        extractor = create_phrase_extractor(cfg)
    except BackendUnavailableError as exc:
        console.print(f"Error: {exc}", markup=False)
        raise typer.Exit(code=1) from exc

    result = extractor.extract(text)

    table = Table(title=f"Phrases ({type(extractor).__name__})")
    table.add_column("#", justify="right")
    table.add_column("Phrase")
    for i, phrase in enumerate(result.phrases, start=1):
        table.add_row(str(i), escape(phrase))
    console.print(table)

    if result.diagnostic:
        console.print(f"Warning: {result.diagnostic}", markup=False)


@app.command()
def relate(
    noun: str = typer.Argument(..., help="Candidate noun."),
    chain: List[str] = typer.Option(..., "--chain", help="Chain word (repeatable, in order)."),
    medium: bool = typer.Option(True, "--medium/--no-medium", help="Check medium relations."),
    config: Optional[Path] = typer.Option(None, help="Path to config file."),
) -> None:
    """Classify NOUN against a lexical chain built from the first sense of each word."""
    cfg = _load(config)
    classifier = _classifier(cfg)

    lexical_chain = LexicalChain()
    for lexicon in chain:
        lexical_chain.add_word(classifier.get_word_senses(lexicon)[0])

    relation = classifier.classify(lexical_chain, noun, medium)

    table = Table(title=f"Relation of '{escape(noun)}'")
    table.add_column("Strength")
    table.add_column("Source word")
    table.add_column("Matched word")
    table.add_column("Sense key")
    matched = relation.matched_word
    table.add_row(
        relation.strength.value,
        escape(relation.source_word.lexicon) if relation.source_word else "-",
        escape(matched.lexicon) if matched else "-",
        (matched.sense_key or "-") if matched else "-",
    )
    console.print(table)


@app.command()
def senses(
    noun: str = typer.Argument(..., help="Noun to look up."),
    config: Optional[Path] = typer.Option(None, help="Path to config file."),
) -> None:
    """List the dictionary senses of NOUN."""
    cfg = _load(config)
    classifier = _classifier(cfg)

    table = Table(title=f"Senses of '{escape(noun)}'")
    table.add_column("Word id")
    table.add_column("Sense key")
    for word in classifier.get_word_senses(noun):
        table.add_row(word.word_id or "(literal)", word.sense_key or "-")
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
