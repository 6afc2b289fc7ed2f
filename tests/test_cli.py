"""CLI tests for the extract / relate / senses commands."""

from __future__ import annotations

from typing import List

from typer.testing import CliRunner

from termlex import cli
from termlex.exceptions import BackendUnavailableError
from termlex.extraction.models import ExtractionResult
from termlex.lexical.models import RelationPointer, Word

runner = CliRunner()


class _FakeExtractor:
    def __init__(self, phrases: List[str], diagnostic: str | None = None) -> None:
        self._result = ExtractionResult(phrases=phrases, diagnostic=diagnostic)
        self.texts: List[str] = []

    def extract(self, text: str) -> ExtractionResult:
        self.texts.append(text)
        return self._result


class _TinyDatabase:
    senses = {"vehicle": ["vehicle.n.01.vehicle"], "car": ["car.n.01.car"]}

    def index_lookup(self, surface_form: str, pos: str = "n") -> List[str]:
        return self.senses.get(surface_form.lower(), [])

    def resolve_sense(self, word_id: str) -> Word:
        lemma = word_id.rpartition(".")[2]
        return Word(lexicon=lemma, sense_key=f"{lemma}%1:06:00::", word_id=word_id)

    def synset_of(self, word: Word) -> str:
        return word.word_id.rpartition(".")[0]

    def related_synsets(self, synset_id: str, pointer: RelationPointer) -> List[str]:
        if synset_id == "vehicle.n.01" and pointer is RelationPointer.HYPONYM:
            return ["car.n.01"]
        return []

    def words_of(self, synset_id: str) -> List[Word]:
        lemma = synset_id.split(".")[0]
        return [self.resolve_sense(f"{synset_id}.{lemma}")]


def test_extract_prints_phrases(monkeypatch) -> None:
    extractor = _FakeExtractor(["coffee", "price"])
    monkeypatch.setattr(cli, "create_phrase_extractor", lambda config: extractor)

    result = runner.invoke(cli.app, ["extract", "The price of coffee rose."])

    assert result.exit_code == 0, result.output
    assert "coffee" in result.output
    assert "price" in result.output
    assert extractor.texts == ["The price of coffee rose."]


def test_extract_strategy_option_reaches_factory(monkeypatch) -> None:
    seen = {}

    def _factory(config):
        seen["strategy"] = config.extraction.strategy
        return _FakeExtractor(["fox"])

    monkeypatch.setattr(cli, "create_phrase_extractor", _factory)

    result = runner.invoke(cli.app, ["extract", "--strategy", "pattern", "Quick brown fox."])

    assert result.exit_code == 0, result.output
    assert seen["strategy"] == "pattern"


def test_extract_rejects_unknown_strategy() -> None:
    result = runner.invoke(cli.app, ["extract", "--strategy", "magic", "text"])

    assert result.exit_code == 2
    assert "Unknown strategy" in result.output


def test_extract_reports_diagnostic(monkeypatch) -> None:
    monkeypatch.setattr(
        cli,
        "create_phrase_extractor",
        lambda config: _FakeExtractor(["pumps"], diagnostic="parser failed: boom"),
    )

    result = runner.invoke(cli.app, ["extract", "Pumps fail."])

    assert result.exit_code == 0
    assert "Warning: parser failed: boom" in result.output


def test_extract_missing_backend_exits_nonzero(monkeypatch) -> None:
    def _unavailable(config):
        raise BackendUnavailableError("spaCy model 'en_core_web_sm' is not installed")

    monkeypatch.setattr(cli, "create_phrase_extractor", _unavailable)

    result = runner.invoke(cli.app, ["extract", "text"])

    assert result.exit_code == 1
    assert "not installed" in result.output


def test_relate_reports_medium_relation(monkeypatch) -> None:
    monkeypatch.setattr(cli, "WordNetLexicalDatabase", lambda config: _TinyDatabase())

    result = runner.invoke(cli.app, ["relate", "car", "--chain", "vehicle"])

    assert result.exit_code == 0, result.output
    assert "medium" in result.output
    assert "car%1:06:00::" in result.output


def test_relate_without_medium_checks(monkeypatch) -> None:
    monkeypatch.setattr(cli, "WordNetLexicalDatabase", lambda config: _TinyDatabase())

    result = runner.invoke(cli.app, ["relate", "car", "--chain", "vehicle", "--no-medium"])

    assert result.exit_code == 0, result.output
    assert "no_relation" in result.output


def test_senses_lists_literal_fallback(monkeypatch) -> None:
    monkeypatch.setattr(cli, "WordNetLexicalDatabase", lambda config: _TinyDatabase())

    result = runner.invoke(cli.app, ["senses", "flibbertigibbet"])

    assert result.exit_code == 0, result.output
    assert "(literal)" in result.output
