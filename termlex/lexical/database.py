"""Lexical database access.

``LexicalDatabase`` is the narrow contract the relation classifier needs.
``WordNetLexicalDatabase`` implements it on top of NLTK's WordNet reader:

* word ids are lemma names such as ``car.n.01.car``
* synset ids are synset names such as ``car.n.01``
* sense keys are WordNet sense keys such as ``car%1:06:00::``
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol

from loguru import logger

from termlex.exceptions import BackendUnavailableError, LookupMissError
from termlex.lexical.models import RelationPointer, Word
from termlex.utils.config import LexiconConfig

NOUN = "n"


class LexicalDatabase(Protocol):
    def index_lookup(self, surface_form: str, pos: str = NOUN) -> List[str]: ...

    def resolve_sense(self, word_id: str) -> Word: ...

    def synset_of(self, word: Word) -> str: ...

    def related_synsets(self, synset_id: str, pointer: RelationPointer) -> List[str]: ...

    def words_of(self, synset_id: str) -> List[Word]: ...


def resolve_wordnet_dir(configured: Optional[str] = None) -> Optional[Path]:
    """Locate a WordNet ``dict`` directory from config or ``WNHOME``.

    ``WNHOME`` may point either at the WordNet install (containing ``dict``)
    or at the ``dict`` directory itself.
    """
    if configured:
        path = Path(configured)
        return path if path.is_dir() else None

    wnhome = os.getenv("WNHOME")
    if not wnhome:
        return None
    home = Path(wnhome)
    if home.name.lower() != "dict" and (home / "dict").is_dir():
        return home / "dict"
    if home.is_dir():
        return home
    return None


class WordNetLexicalDatabase:
    """NLTK WordNet adapter; the reader is shared read-only across calls."""

    def __init__(self, config: Optional[LexiconConfig] = None, reader: Optional[Any] = None) -> None:
        self.config = config or LexiconConfig()
        self.wordnet = reader if reader is not None else self._open_reader()

        self._pointer_lookups: Dict[RelationPointer, Callable[[Any], List[Any]]] = {
            RelationPointer.ANTONYM: self._antonym_synsets,
            RelationPointer.HYPERNYM: lambda s: s.hypernyms(),
            RelationPointer.HYPONYM: lambda s: s.hyponyms(),
            RelationPointer.MERONYM_PART: lambda s: s.part_meronyms(),
            RelationPointer.MERONYM_SUBSTANCE: lambda s: s.substance_meronyms(),
            RelationPointer.PARTICIPLE: self._participle_synsets,
            RelationPointer.HYPERNYM_INSTANCE: lambda s: s.instance_hypernyms(),
        }

        logger.info("Initialized WordNetLexicalDatabase")

    def _open_reader(self) -> Any:
        directory = resolve_wordnet_dir(self.config.wordnet_dir)
        if directory is not None:
            from nltk.corpus.reader.wordnet import WordNetCorpusReader

            try:
                reader = WordNetCorpusReader(str(directory), None)
            except (OSError, LookupError) as exc:
                raise BackendUnavailableError(
                    f"Failed to open WordNet dictionary at {directory}"
                ) from exc
            logger.info("Loaded WordNet dictionary", path=str(directory))
            return reader

        import nltk
        from nltk.corpus import wordnet

        if self.config.download_corpus:
            nltk.download("wordnet", quiet=True)
        try:
            wordnet.get_version()
        except LookupError as exc:
            raise BackendUnavailableError(
                "WordNet corpus is not installed. "
                "Install it with `python -m nltk.downloader wordnet` or set WNHOME."
            ) from exc
        return wordnet

    def index_lookup(self, surface_form: str, pos: str = NOUN) -> List[str]:
        """Return word ids for every sense of ``surface_form`` (empty on a miss)."""
        key = surface_form.strip().replace(" ", "_")
        if not key:
            return []
        return [self._word_id(lemma) for lemma in self.wordnet.lemmas(key, pos=pos)]

    def resolve_sense(self, word_id: str) -> Word:
        return self._to_word(self._lemma(word_id))

    def synset_of(self, word: Word) -> str:
        if word.word_id is None:
            raise LookupMissError(f"'{word.lexicon}' has no dictionary identity")
        return self._lemma(word.word_id).synset().name()

    def related_synsets(self, synset_id: str, pointer: RelationPointer) -> List[str]:
        synset = self.wordnet.synset(synset_id)
        related = self._pointer_lookups[pointer](synset)
        return list(dict.fromkeys(s.name() for s in related))

    def words_of(self, synset_id: str) -> List[Word]:
        return [self._to_word(lemma) for lemma in self.wordnet.synset(synset_id).lemmas()]

    def _lemma(self, word_id: str) -> Any:
        try:
            return self.wordnet.lemma(word_id)
        except Exception as exc:  # noqa: BLE001
            raise LookupMissError(f"Unknown WordNet word id: {word_id}") from exc

    @staticmethod
    def _word_id(lemma: Any) -> str:
        return f"{lemma.synset().name()}.{lemma.name()}"

    def _to_word(self, lemma: Any) -> Word:
        return Word(
            lexicon=lemma.name().replace("_", " "),
            sense_key=lemma.key(),
            word_id=self._word_id(lemma),
        )

    @staticmethod
    def _antonym_synsets(synset: Any) -> List[Any]:
        # Antonymy is a lexical (lemma-level) pointer in WordNet.
        return [ant.synset() for lemma in synset.lemmas() for ant in lemma.antonyms()]

    @staticmethod
    def _participle_synsets(synset: Any) -> List[Any]:
        # NLTK exposes no public accessor for the lemma-level "<" pointer.
        related: List[Any] = []
        for lemma in synset.lemmas():
            lookup = getattr(lemma, "_related", None)
            if lookup is None:
                continue
            related.extend(other.synset() for other in lookup("<"))
        return related
