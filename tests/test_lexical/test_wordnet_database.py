from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pytest

from termlex.exceptions import LookupMissError
from termlex.lexical.classifier import LexicalRelationClassifier
from termlex.lexical.database import WordNetLexicalDatabase, resolve_wordnet_dir
from termlex.lexical.models import LexicalChain, RelationPointer, RelationStrength, Word
from termlex.utils.config import LexiconConfig


class _Lemma:
    def __init__(self, name: str, synset: "_Synset", key: str) -> None:
        self._name = name
        self._synset = synset
        self._key = key
        self.antonym_lemmas: List["_Lemma"] = []
        self.participle_lemmas: List["_Lemma"] = []

    def name(self) -> str:
        return self._name

    def synset(self) -> "_Synset":
        return self._synset

    def key(self) -> str:
        return self._key

    def antonyms(self) -> List["_Lemma"]:
        return self.antonym_lemmas

    def _related(self, symbol: str) -> List["_Lemma"]:
        return self.participle_lemmas if symbol == "<" else []


class _Synset:
    def __init__(self, name: str) -> None:
        self._name = name
        self.lemma_list: List[_Lemma] = []
        self.pointers: Dict[str, List["_Synset"]] = {}

    def name(self) -> str:
        return self._name

    def lemmas(self) -> List[_Lemma]:
        return self.lemma_list

    def add_lemma(self, name: str, key: str) -> _Lemma:
        lemma = _Lemma(name, self, key)
        self.lemma_list.append(lemma)
        return lemma

    def hypernyms(self):
        return self.pointers.get("hypernyms", [])

    def hyponyms(self):
        return self.pointers.get("hyponyms", [])

    def part_meronyms(self):
        return self.pointers.get("part_meronyms", [])

    def substance_meronyms(self):
        return self.pointers.get("substance_meronyms", [])

    def instance_hypernyms(self):
        return self.pointers.get("instance_hypernyms", [])


class _Reader:
    """Mimics the subset of nltk's WordNetCorpusReader the adapter uses."""

    def __init__(self) -> None:
        self.vehicle = _Synset("vehicle.n.01")
        self.vehicle.add_lemma("vehicle", "vehicle%1:06:00::")
        self.car = _Synset("car.n.01")
        self.car.add_lemma("car", "car%1:06:00::")
        self.car.add_lemma("motor_car", "motor_car%1:06:00::")
        self.good = _Synset("good.n.01")
        good = self.good.add_lemma("good", "good%1:07:00::")
        self.evil = _Synset("evil.n.01")
        evil = self.evil.add_lemma("evil", "evil%1:07:00::")
        good.antonym_lemmas = [evil]
        evil.antonym_lemmas = [good]

        self.vehicle.pointers["hyponyms"] = [self.car, self.car]
        self.car.pointers["hypernyms"] = [self.vehicle]

        self.synsets = {s.name(): s for s in (self.vehicle, self.car, self.good, self.evil)}

    def lemmas(self, name: str, pos: str = None) -> List[_Lemma]:
        return [
            lemma
            for synset in self.synsets.values()
            for lemma in synset.lemmas()
            if lemma.name().lower() == name.lower()
        ]

    def lemma(self, name: str) -> _Lemma:
        synset_name, _, lemma_name = name.rpartition(".")
        for lemma in self.synsets[synset_name].lemmas():
            if lemma.name() == lemma_name:
                return lemma
        raise ValueError(name)

    def synset(self, name: str) -> _Synset:
        return self.synsets[name]


class _PlainLemma:
    """Lemma without the private pointer accessor."""

    def __init__(self, name: str, synset: _Synset) -> None:
        self._name = name
        self._synset = synset

    def name(self) -> str:
        return self._name

    def synset(self) -> _Synset:
        return self._synset

    def key(self) -> str:
        return f"{self._name}%1:00:00::"

    def antonyms(self) -> List[_Lemma]:
        return []


@pytest.fixture
def database() -> WordNetLexicalDatabase:
    return WordNetLexicalDatabase(reader=_Reader())


def test_index_lookup_returns_word_ids(database: WordNetLexicalDatabase) -> None:
    assert database.index_lookup("car") == ["car.n.01.car"]
    assert database.index_lookup("motor car") == ["car.n.01.motor_car"]
    assert database.index_lookup("spaceship") == []
    assert database.index_lookup("  ") == []


def test_resolve_sense_carries_sense_key(database: WordNetLexicalDatabase) -> None:
    word = database.resolve_sense("car.n.01.motor_car")

    assert word.lexicon == "motor car"
    assert word.sense_key == "motor_car%1:06:00::"
    assert word.word_id == "car.n.01.motor_car"


def test_unknown_word_id_is_lookup_miss(database: WordNetLexicalDatabase) -> None:
    with pytest.raises(LookupMissError):
        database.resolve_sense("car.n.01.truck")


def test_synset_of_literal_word_is_lookup_miss(database: WordNetLexicalDatabase) -> None:
    with pytest.raises(LookupMissError):
        database.synset_of(Word.literal("car"))


def test_related_synsets_are_deduplicated(database: WordNetLexicalDatabase) -> None:
    assert database.related_synsets("vehicle.n.01", RelationPointer.HYPONYM) == ["car.n.01"]
    assert database.related_synsets("car.n.01", RelationPointer.HYPERNYM) == ["vehicle.n.01"]
    assert database.related_synsets("car.n.01", RelationPointer.MERONYM_PART) == []


def test_antonyms_are_lifted_to_synsets(database: WordNetLexicalDatabase) -> None:
    assert database.related_synsets("good.n.01", RelationPointer.ANTONYM) == ["evil.n.01"]


def test_participle_pointer_uses_lemma_relation() -> None:
    reader = _Reader()
    reader.car.lemmas()[0].participle_lemmas = [reader.vehicle.lemmas()[0]]
    database = WordNetLexicalDatabase(reader=reader)

    assert database.related_synsets("car.n.01", RelationPointer.PARTICIPLE) == ["vehicle.n.01"]


def test_participle_pointer_without_lemma_accessor_is_empty() -> None:
    reader = _Reader()
    reader.car.lemma_list = [_PlainLemma("car", reader.car)]
    database = WordNetLexicalDatabase(reader=reader)

    assert database.related_synsets("car.n.01", RelationPointer.PARTICIPLE) == []


def test_words_of_lists_synset_members(database: WordNetLexicalDatabase) -> None:
    words = database.words_of("car.n.01")

    assert [w.word_id for w in words] == ["car.n.01.car", "car.n.01.motor_car"]


def test_classifier_over_wordnet_adapter(database: WordNetLexicalDatabase) -> None:
    classifier = LexicalRelationClassifier(database)
    chain = LexicalChain(classifier.get_word_senses("vehicle"))

    medium = classifier.classify(chain, "car", True)
    strong = classifier.classify(LexicalChain.from_lexicons(["car"]), "car", False)
    none = classifier.classify(chain, "evil", True)

    assert medium.strength is RelationStrength.MEDIUM
    assert medium.matched_word.sense_key == "car%1:06:00::"
    assert strong.strength is RelationStrength.STRONG
    assert none.strength is RelationStrength.NO_RELATION


def test_resolve_wordnet_dir_prefers_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WNHOME", str(tmp_path / "elsewhere"))

    assert resolve_wordnet_dir(str(tmp_path)) == tmp_path
    assert resolve_wordnet_dir(str(tmp_path / "missing")) is None


def test_resolve_wordnet_dir_from_wnhome(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "dict").mkdir()
    monkeypatch.setenv("WNHOME", str(tmp_path))

    assert resolve_wordnet_dir() == tmp_path / "dict"


def test_resolve_wordnet_dir_wnhome_points_at_dict(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    dict_dir = tmp_path / "dict"
    dict_dir.mkdir()
    monkeypatch.setenv("WNHOME", str(dict_dir))

    assert resolve_wordnet_dir() == dict_dir


def test_resolve_wordnet_dir_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WNHOME", raising=False)

    assert resolve_wordnet_dir() is None


def test_database_keeps_config(database: WordNetLexicalDatabase) -> None:
    assert isinstance(database.config, LexiconConfig)
