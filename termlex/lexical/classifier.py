"""Relation strength between a noun and a lexical chain.

Strong relationship: same word (case-insensitive).
Medium relationship: synonym, or reachable through one of the relation
pointers in ``MEDIUM_RELATION_SWEEP`` (antonym, hypernym, hyponym, part and
substance meronym, participle, instance hypernym).
No relationship: otherwise.

Antonym matches are reported as MEDIUM and WEAK is never returned; callers
rely on that behavior.
"""

from typing import List, Optional, Set

from loguru import logger

from termlex.exceptions import LookupMissError
from termlex.lexical.database import LexicalDatabase
from termlex.lexical.models import (
    MEDIUM_RELATION_SWEEP,
    LexicalChain,
    RelationStrength,
    Word,
    WordRelation,
)


class LexicalRelationClassifier:
    """Classifies how strongly a candidate noun relates to a lexical chain."""

    def __init__(self, database: LexicalDatabase) -> None:
        self.database = database

    def classify(
        self, chain: LexicalChain, candidate_noun: str, check_medium_relations: bool
    ) -> WordRelation:
        """Return the relation of ``candidate_noun`` to the first qualifying chain word.

        Exact matches are always checked. Dictionary traversal only happens
        when ``check_medium_relations`` is set and the chain word has a
        dictionary identity.
        """
        candidate_ids: Optional[Set[str]] = None
        for word in chain:
            if word.lexicon.lower() == candidate_noun.lower():
                return WordRelation(
                    source_word=word, matched_word=word, strength=RelationStrength.STRONG
                )

            if check_medium_relations and word.is_dictionary_word:
                if candidate_ids is None:
                    candidate_ids = set(self.database.index_lookup(candidate_noun))
                match = self._medium_match(candidate_noun, word, candidate_ids)
                if match is not None:
                    return WordRelation(
                        source_word=Word(
                            lexicon=candidate_noun,
                            sense_key=match.sense_key,
                            word_id=match.word_id,
                        ),
                        matched_word=match,
                        strength=RelationStrength.MEDIUM,
                    )

        return WordRelation.none()

    def get_word_senses(self, noun: str) -> List[Word]:
        """Return one dictionary Word per noun sense, or a literal Word on a miss."""
        try:
            word_ids = self.database.index_lookup(noun)
        except LookupMissError:
            word_ids = []

        if not word_ids:
            logger.debug("No dictionary entry; using literal word", noun=noun)
            return [Word.literal(noun)]

        senses: List[Word] = []
        for word_id in word_ids:
            sense = self.database.resolve_sense(word_id)
            senses.append(Word(lexicon=noun, sense_key=sense.sense_key, word_id=word_id))
        return senses

    def _medium_match(
        self, noun: str, word: Word, candidate_ids: Set[str]
    ) -> Optional[Word]:
        if not candidate_ids:
            return None

        synonym = self._in_synset(self._synset(word), candidate_ids)
        if synonym is not None:
            return synonym

        for pointer in MEDIUM_RELATION_SWEEP:
            related = word.cached_related(pointer)
            if related is None:
                related = self.database.related_synsets(self._synset(word), pointer)
                word.cache_related(pointer, related)

            for synset_id in related:
                match = self._in_synset(synset_id, candidate_ids)
                if match is not None:
                    logger.debug(
                        "Medium relation found",
                        noun=noun,
                        chain_word=word.lexicon,
                        pointer=pointer.value,
                    )
                    return match
        return None

    def _synset(self, word: Word) -> str:
        if word.synset is None:
            word.cache_synset(self.database.synset_of(word))
        return word.synset

    def _in_synset(self, synset_id: str, candidate_ids: Set[str]) -> Optional[Word]:
        for member in self.database.words_of(synset_id):
            if member.word_id in candidate_ids:
                return member
        return None
