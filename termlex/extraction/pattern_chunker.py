"""Tag-sequence phrase extractor.

Collects maximal runs of adjective/noun tokens that contain at least one noun,
then appends every standalone noun not already present.
"""

from typing import List, Optional

from loguru import logger

from termlex.extraction.models import ExtractionResult, TaggedToken
from termlex.extraction.pos_tags import is_adjective, is_noun
from termlex.extraction.tagging import TaggedSequenceBuilder, Tagger


class PatternChunker:
    """Extracts noun phrases from a POS tag sequence."""

    def __init__(self, tagger: Tagger | TaggedSequenceBuilder) -> None:
        if isinstance(tagger, TaggedSequenceBuilder):
            self.builder = tagger
        else:
            self.builder = TaggedSequenceBuilder(tagger)

    def extract_terms(self, text: Optional[str]) -> List[str]:
        return self.extract(text).phrases

    def extract(self, text: Optional[str]) -> ExtractionResult:
        if text is None or not text.strip():
            return ExtractionResult()

        tagged, diagnostic = self.builder.tag_with_diagnostic(text)
        phrases = self._chunk(tagged)

        logger.debug("Pattern chunker terms", tokens=len(tagged), terms=len(phrases))
        return ExtractionResult(phrases=phrases, diagnostic=diagnostic)

    def _chunk(self, tagged: List[TaggedToken]) -> List[str]:
        terms: List[str] = []
        current: List[str] = []
        seen_noun = False

        for tt in tagged:
            if is_adjective(tt.tag) or is_noun(tt.tag):
                word = tt.token.strip()
                if word:
                    current.append(word)
                if is_noun(tt.tag):
                    seen_noun = True
            else:
                if seen_noun and current:
                    terms.append(" ".join(current))
                current = []
                seen_noun = False

        if seen_noun and current:
            terms.append(" ".join(current))

        # dict preserves insertion order
        unique = dict.fromkeys(terms)
        for tt in tagged:
            word = tt.token.strip()
            if is_noun(tt.tag) and word:
                unique.setdefault(word)
        return list(unique)
