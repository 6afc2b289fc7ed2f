"""Phrase extractor selection."""

from typing import List, Optional, Protocol

from loguru import logger

from termlex.exceptions import BackendUnavailableError
from termlex.extraction.dependency_builder import DependencyPhraseBuilder
from termlex.extraction.dependency_parser import DependencyParser, SpacyDependencyParser
from termlex.extraction.models import ExtractionResult
from termlex.extraction.pattern_chunker import PatternChunker
from termlex.extraction.tagging import Tagger, create_tagger
from termlex.utils.config import Config


class PhraseExtractor(Protocol):
    def extract(self, text: Optional[str]) -> ExtractionResult: ...

    def extract_terms(self, text: Optional[str]) -> List[str]: ...


def create_phrase_extractor(
    config: Optional[Config] = None,
    *,
    tagger: Optional[Tagger] = None,
    parser: Optional[DependencyParser] = None,
) -> PhraseExtractor:
    """Pick the extraction strategy for the available linguistic backend.

    ``auto`` uses the dependency builder when a parser with a dependency
    component can be obtained and falls back to the pattern chunker otherwise.
    Explicit strategies propagate ``BackendUnavailableError``.
    """
    config = config or Config()
    strategy = config.extraction.strategy

    if strategy == "pattern":
        return PatternChunker(tagger or create_tagger(config.tagger))

    if strategy == "dependency":
        return DependencyPhraseBuilder(parser or SpacyDependencyParser(config.parser))

    if parser is not None:
        return DependencyPhraseBuilder(parser)
    if tagger is None:
        try:
            spacy_parser = SpacyDependencyParser(config.parser)
        except BackendUnavailableError as exc:
            logger.warning("Dependency parser unavailable; using pattern chunker", error=str(exc))
        else:
            if spacy_parser.has_dependency_parser:
                return DependencyPhraseBuilder(spacy_parser)
            logger.info("Parser model lacks a dependency parser; using pattern chunker")

    return PatternChunker(tagger or create_tagger(config.tagger))
