"""Extraction package exports."""

from termlex.extraction.dependency_builder import DependencyPhraseBuilder
from termlex.extraction.dependency_parser import DependencyParser, SpacyDependencyParser
from termlex.extraction.factory import PhraseExtractor, create_phrase_extractor
from termlex.extraction.models import ExtractionResult, TaggedToken
from termlex.extraction.pattern_chunker import PatternChunker
from termlex.extraction.tagging import NltkTagger, SpacyTagger, TaggedSequenceBuilder, Tagger

__all__ = [
    "DependencyParser",
    "DependencyPhraseBuilder",
    "ExtractionResult",
    "NltkTagger",
    "PatternChunker",
    "PhraseExtractor",
    "SpacyDependencyParser",
    "SpacyTagger",
    "TaggedSequenceBuilder",
    "TaggedToken",
    "Tagger",
    "create_phrase_extractor",
]
