"""Dependency-graph phrase extractor.

Builds one noun phrase per salient head noun: modifiers attached through
amod/compound/nummod/flat are pulled in, nouns that are themselves modifiers
are skipped, and heads that only carry a prepositional nominal ("the cost of
X") hand the phrase over to that nominal.
"""

import time
from typing import Dict, List, Optional

from loguru import logger

from termlex.extraction.dependency_graph import DependencyEdge, DependencyGraph, TokenNode
from termlex.extraction.dependency_parser import DependencyParser
from termlex.extraction.models import ExtractionResult
from termlex.extraction.pos_tags import is_noun

SUBORDINATE_RELATIONS = frozenset({"compound", "flat", "fixed", "goeswith"})
PHRASE_MODIFIER_RELATIONS = frozenset({"amod", "compound", "nummod", "flat"})
PREP_OF_RELATIONS = frozenset({"prep_of", "case:of"})


class DependencyPhraseBuilder:
    """Extracts noun phrases from dependency parses."""

    def __init__(self, parser: DependencyParser) -> None:
        self.parser = parser

    def extract_terms(self, text: Optional[str]) -> List[str]:
        return self.extract(text).phrases

    def extract(self, text: Optional[str]) -> ExtractionResult:
        # dict preserves insertion order
        unique: Dict[str, None] = {}
        try:
            t0 = time.perf_counter()
            logger.debug("Dependency term extraction", input_len=len(text) if text else 0)

            if text is None or not text.strip():
                return ExtractionResult()

            sentences = self.parser.parse(text)
            for sentence in sentences:
                graph = sentence.best_graph()
                if graph is None or not sentence.tokens:
                    continue
                self._collect_sentence(sentence.tokens, graph, unique)

            took_ms = int((time.perf_counter() - t0) * 1000)
            logger.info(
                "Dependency term extraction: sentences={sentences} terms={terms} took={took_ms}ms",
                sentences=len(sentences),
                terms=len(unique),
                took_ms=took_ms,
            )
            logger.debug("Dependency terms", terms=list(unique))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Dependency term extraction failed", error=repr(exc))
            return ExtractionResult(
                phrases=list(unique), diagnostic=f"dependency extraction failed: {exc!r}"
            )

        return ExtractionResult(phrases=list(unique))

    def _collect_sentence(
        self, tokens: List[TokenNode], graph: DependencyGraph, unique: Dict[str, None]
    ) -> None:
        for tok in tokens:
            if not is_noun(tok.tag):
                continue

            node = graph.node(tok.index)
            if node is None:
                continue

            incoming = graph.incoming_edges(node.index)
            if incoming and incoming[0].relation.short_name in SUBORDINATE_RELATIONS:
                continue

            promoted: List[int] = []
            for edge in graph.outgoing_edges(node.index):
                if self._is_nmod_with_case(graph, edge) or self._is_prep_of(edge):
                    child = graph.node(edge.dependent)
                    if child is not None and is_noun(child.tag):
                        promoted.append(child.index)

            heads = promoted or [node.index]
            for head in heads:
                phrase = self._build_noun_phrase(tokens, graph, head)
                if phrase:
                    unique.setdefault(phrase)

    @staticmethod
    def _is_nmod_with_case(graph: DependencyGraph, edge: DependencyEdge) -> bool:
        if edge.relation.short_name != "nmod":
            return False
        return any(
            e.relation.short_name == "case" for e in graph.outgoing_edges(edge.dependent)
        )

    @staticmethod
    def _is_prep_of(edge: DependencyEdge) -> bool:
        relation = edge.relation
        if relation.short_name == "prep" and (relation.specific or "").lower() == "of":
            return True
        return (
            relation.short_name.lower() in PREP_OF_RELATIONS
            or relation.label.lower() in PREP_OF_RELATIONS
        )

    @staticmethod
    def _build_noun_phrase(tokens: List[TokenNode], graph: DependencyGraph, head: int) -> str:
        """Join the head and its phrase modifiers in surface order."""
        indices = [head]
        for edge in graph.outgoing_edges(head):
            # flat also matches flat:name
            if edge.relation.short_name in PHRASE_MODIFIER_RELATIONS:
                indices.append(edge.dependent)

        words: List[str] = []
        for idx in sorted(indices):
            if idx < 1 or idx > len(tokens):
                continue
            word = tokens[idx - 1].text
            if word is None or not word.strip():
                continue
            words.append(word.strip())
        return " ".join(words)
