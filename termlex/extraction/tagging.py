"""Tokenization and part-of-speech tagging.

A ``Tagger`` turns text into index-aligned token, tag and probability
sequences. ``TaggedSequenceBuilder`` wraps a tagger with the best-effort
contract used by the extractors: blank input and tagger failures both yield
an empty sequence instead of an exception.
"""

from __future__ import annotations

import math
from typing import List, Optional, Protocol, Sequence, Tuple

import spacy
from loguru import logger
from spacy.language import Language

from termlex.exceptions import BackendUnavailableError, ExtractionError
from termlex.extraction.models import TaggedToken
from termlex.utils.config import TaggerConfig

TagOutput = Tuple[Sequence[str], Sequence[str], Optional[Sequence[float]]]


class Tagger(Protocol):
    def tag(self, text: str) -> TagOutput: ...


def load_spacy_model(model_name: str) -> Language:
    """Load spaCy model with minimal validation."""
    try:
        return spacy.load(model_name)
    except OSError as exc:
        raise BackendUnavailableError(
            f"spaCy model '{model_name}' is not installed. "
            f"Install it with `python -m spacy download {model_name}`."
        ) from exc


class SpacyTagger:
    """Tagger backed by a spaCy pipeline.

    spaCy does not expose per-token tag probabilities, so every probability
    is NaN.
    """

    def __init__(
        self,
        config: Optional[TaggerConfig] = None,
        nlp: Optional[Language] = None,
    ) -> None:
        self.config = config or TaggerConfig()
        self.nlp: Language = nlp or load_spacy_model(self.config.model)
        self.attribute = "pos_" if self.config.tag_attribute == "pos" else "tag_"

        logger.info(
            "Initialized SpacyTagger",
            model=self.nlp.meta.get("name", self.config.model),
            attribute=self.attribute,
        )

    def tag(self, text: str) -> TagOutput:
        doc = self.nlp(text)
        tokens = [token.text for token in doc if not token.is_space]
        tags = [getattr(token, self.attribute) for token in doc if not token.is_space]
        return tokens, tags, None


class NltkTagger:
    """Tagger backed by NLTK's Treebank tokenizer and averaged perceptron tagger."""

    _RESOURCES = ("averaged_perceptron_tagger_eng", "averaged_perceptron_tagger")

    def __init__(self, config: Optional[TaggerConfig] = None) -> None:
        self.config = config or TaggerConfig(backend="nltk")

        import nltk
        from nltk.tag import PerceptronTagger
        from nltk.tokenize import TreebankWordTokenizer

        if self.config.download_resources:
            for resource in self._RESOURCES:
                nltk.download(resource, quiet=True)

        try:
            self._tagger = PerceptronTagger()
        except LookupError as exc:
            raise BackendUnavailableError(
                "NLTK perceptron tagger data is not installed. "
                "Install it with `python -m nltk.downloader averaged_perceptron_tagger_eng`."
            ) from exc
        self._tokenizer = TreebankWordTokenizer()

        logger.info("Initialized NltkTagger")

    def tag(self, text: str) -> TagOutput:
        tokens = self._tokenizer.tokenize(text)
        if not tokens:
            return [], [], None
        tagged = self._tagger.tag(tokens)
        return [tok for tok, _ in tagged], [tag for _, tag in tagged], None


class TaggedSequenceBuilder:
    """Builds ordered ``TaggedToken`` sequences from raw text."""

    def __init__(self, tagger: Tagger) -> None:
        self.tagger = tagger

    def tag(self, text: Optional[str]) -> List[TaggedToken]:
        """Tokenize and POS-tag text.

        Returns an empty list for blank input or when tagging fails.
        """
        tagged, _ = self.tag_with_diagnostic(text)
        return tagged

    def tag_with_diagnostic(
        self, text: Optional[str]
    ) -> Tuple[List[TaggedToken], Optional[str]]:
        """Like ``tag`` but also returns the failure reason (None on success)."""
        if text is None:
            return [], None
        normalized = text.strip()
        if not normalized:
            return [], None

        try:
            tokens, tags, probs = self.tagger.tag(normalized)
            return self._align(tokens, tags, probs), None
        except Exception as exc:  # noqa: BLE001
            logger.warning("POS tagging failed; returning empty list", reason=str(exc))
            return [], f"POS tagging failed: {exc}"

    @staticmethod
    def _align(
        tokens: Sequence[str],
        tags: Sequence[str],
        probs: Optional[Sequence[float]],
    ) -> List[TaggedToken]:
        if len(tags) < len(tokens):
            raise ExtractionError(
                f"Tagger returned {len(tags)} tags for {len(tokens)} tokens"
            )

        result: List[TaggedToken] = []
        for i, token in enumerate(tokens):
            p = probs[i] if probs is not None and len(probs) > i else None
            if p is None:
                p = math.nan
            result.append(TaggedToken(token=token, tag=tags[i], probability=p))
        return result


def create_tagger(config: Optional[TaggerConfig] = None) -> Tagger:
    """Instantiate the configured tagger backend."""
    config = config or TaggerConfig()
    if config.backend == "nltk":
        return NltkTagger(config)
    return SpacyTagger(config)
