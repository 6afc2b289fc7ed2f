"""Data models for lexical chains and word relations."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class RelationStrength(str, Enum):
    """How strongly a word relates to a lexical chain.

    Exact match is STRONG; synonyms and pointer-related senses are MEDIUM.
    WEAK is part of the value space but the classifier never returns it.
    """

    STRONG = "strong"
    MEDIUM = "medium"
    WEAK = "weak"
    NO_RELATION = "no_relation"


class RelationPointer(str, Enum):
    """Semantic relation kinds followed from a synset."""

    ANTONYM = "antonym"
    HYPERNYM = "hypernym"
    HYPONYM = "hyponym"
    MERONYM_PART = "part_meronym"
    MERONYM_SUBSTANCE = "substance_meronym"
    PARTICIPLE = "participle"
    HYPERNYM_INSTANCE = "instance_hypernym"


MEDIUM_RELATION_SWEEP = (
    RelationPointer.ANTONYM,
    RelationPointer.HYPERNYM,
    RelationPointer.HYPONYM,
    RelationPointer.MERONYM_PART,
    RelationPointer.MERONYM_SUBSTANCE,
    RelationPointer.PARTICIPLE,
    RelationPointer.HYPERNYM_INSTANCE,
)


class Word(BaseModel):
    """A chain member: either a literal string or a dictionary sense.

    Dictionary words carry a ``word_id`` (and usually a ``sense_key``). The
    synset and related-synset lookups are cached on the instance the first
    time they are resolved.
    """

    model_config = ConfigDict(extra="forbid")

    lexicon: str
    sense_key: Optional[str] = None
    word_id: Optional[str] = None

    _synset: Optional[str] = PrivateAttr(default=None)
    _related_synsets: Dict[RelationPointer, List[str]] = PrivateAttr(default_factory=dict)

    @classmethod
    def literal(cls, lexicon: str) -> "Word":
        return cls(lexicon=lexicon)

    @property
    def is_dictionary_word(self) -> bool:
        return self.word_id is not None

    @property
    def synset(self) -> Optional[str]:
        return self._synset

    def cache_synset(self, synset_id: str) -> None:
        self._synset = synset_id

    def cached_related(self, pointer: RelationPointer) -> Optional[List[str]]:
        return self._related_synsets.get(pointer)

    def cache_related(self, pointer: RelationPointer, synset_ids: List[str]) -> None:
        self._related_synsets[pointer] = list(synset_ids)


class LexicalChain:
    """Ordered group of related words; insertion order decides first match."""

    def __init__(self, words: Optional[Iterable[Word]] = None) -> None:
        self._words: List[Word] = list(words or [])

    @classmethod
    def from_lexicons(cls, lexicons: Iterable[str]) -> "LexicalChain":
        return cls(Word.literal(lexicon) for lexicon in lexicons)

    @property
    def words(self) -> List[Word]:
        return list(self._words)

    def add_word(self, word: Word) -> None:
        self._words.append(word)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, lexicon: object) -> bool:
        if not isinstance(lexicon, str):
            return False
        return any(w.lexicon.lower() == lexicon.lower() for w in self._words)


class WordRelation(BaseModel):
    """Outcome of classifying a word against a lexical chain."""

    source_word: Optional[Word] = None
    matched_word: Optional[Word] = None
    strength: RelationStrength = Field(default=RelationStrength.NO_RELATION)

    @classmethod
    def none(cls) -> "WordRelation":
        return cls(source_word=None, matched_word=None, strength=RelationStrength.NO_RELATION)
