"""spaCy-backed dependency parser producing per-sentence graph variants.

spaCy emits one basic dependency tree per sentence. Two richer variants are
derived from it by collapsing ``prep`` + ``pobj`` chains:

* collapsed: Stanford-style ``prep`` edge labelled with the preposition,
  running from the governor straight to the prepositional object;
* enhanced: UD-style ``nmod:<prep>`` edge to the object plus a ``case`` edge
  from the object back to the preposition.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Set

from loguru import logger
from spacy.language import Language
from spacy.tokens import Span

from termlex.extraction.dependency_graph import (
    DependencyEdge,
    DependencyGraph,
    GrammaticalRelation,
    GraphKind,
    ParsedSentence,
    TokenNode,
)
from termlex.extraction.tagging import load_spacy_model
from termlex.utils.config import ParserConfig


class DependencyParser(Protocol):
    def parse(self, text: str) -> List[ParsedSentence]: ...


class SpacyDependencyParser:
    """Runs a spaCy pipeline and converts each sentence into a ``ParsedSentence``."""

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        nlp: Optional[Language] = None,
    ) -> None:
        self.config = config or ParserConfig()
        self.nlp: Language = nlp or load_spacy_model(self.config.model)

        if "parser" not in self.nlp.pipe_names:
            logger.warning(
                "spaCy pipeline has no dependency parser; graphs will be empty",
                pipes=self.nlp.pipe_names,
            )

        logger.info(
            "Initialized SpacyDependencyParser",
            enhanced=self.config.enhanced,
            collapsed=self.config.collapsed,
        )

    @property
    def has_dependency_parser(self) -> bool:
        return "parser" in self.nlp.pipe_names

    def parse(self, text: str) -> List[ParsedSentence]:
        doc = self.nlp(text)
        return [self.convert_sentence(sent) for sent in doc.sents]

    def convert_sentence(self, sent: Span) -> ParsedSentence:
        """Build token nodes and graph variants for one sentence span."""
        tokens = [
            TokenNode(index=tok.i - sent.start + 1, text=tok.text, tag=tok.tag_ or tok.pos_)
            for tok in sent
        ]

        basic_edges: List[DependencyEdge] = []
        for tok in sent:
            if tok.head.i == tok.i or tok.dep_ in ("ROOT", ""):
                continue
            basic_edges.append(
                DependencyEdge(
                    governor=tok.head.i - sent.start + 1,
                    dependent=tok.i - sent.start + 1,
                    relation=GrammaticalRelation.parse(tok.dep_),
                )
            )

        graphs: Dict[GraphKind, Optional[DependencyGraph]] = {
            GraphKind.ENHANCED: None,
            GraphKind.COLLAPSED: None,
            GraphKind.BASIC: DependencyGraph(tokens, basic_edges),
        }
        if self.config.enhanced:
            graphs[GraphKind.ENHANCED] = collapse_prepositions(
                tokens, basic_edges, GraphKind.ENHANCED
            )
        if self.config.collapsed:
            graphs[GraphKind.COLLAPSED] = collapse_prepositions(
                tokens, basic_edges, GraphKind.COLLAPSED
            )

        return ParsedSentence(tokens=tokens, graphs=graphs)


def collapse_prepositions(
    tokens: List[TokenNode],
    basic_edges: List[DependencyEdge],
    kind: GraphKind,
) -> DependencyGraph:
    """Rewrite ``prep``/``pobj`` pairs into a collapsed or enhanced graph."""
    outgoing: Dict[int, List[DependencyEdge]] = {}
    for edge in basic_edges:
        outgoing.setdefault(edge.governor, []).append(edge)

    consumed: Set[DependencyEdge] = set()
    added: List[DependencyEdge] = []

    for edge in basic_edges:
        if edge.relation.short_name != "prep":
            continue
        objects = [e for e in outgoing.get(edge.dependent, []) if e.relation.short_name == "pobj"]
        if not objects:
            continue

        preposition = tokens[edge.dependent - 1].text.lower()
        consumed.add(edge)
        for obj in objects:
            consumed.add(obj)
            if kind is GraphKind.ENHANCED:
                added.append(
                    DependencyEdge(edge.governor, obj.dependent, GrammaticalRelation("nmod", preposition))
                )
                added.append(
                    DependencyEdge(obj.dependent, edge.dependent, GrammaticalRelation("case"))
                )
            else:
                added.append(
                    DependencyEdge(edge.governor, obj.dependent, GrammaticalRelation("prep", preposition))
                )

    kept = [edge for edge in basic_edges if edge not in consumed]
    return DependencyGraph(tokens, kept + added)
