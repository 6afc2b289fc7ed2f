"""Part-of-speech tag taxonomy shared by both extraction strategies.

Both Universal Dependencies (NOUN, PROPN, ADJ) and Penn Treebank
(NN, NNS, NNP, NNPS, JJ, JJR, JJS) tag sets are recognized.
"""

from typing import Optional

ADJECTIVE_TAGS = frozenset({"ADJ", "JJ", "JJR", "JJS"})
NOUN_TAGS = frozenset({"NOUN", "PROPN"})
NOUN_TAG_PREFIX = "NN"


def is_noun(tag: Optional[str]) -> bool:
    if tag is None:
        return False
    return tag in NOUN_TAGS or tag.startswith(NOUN_TAG_PREFIX)


def is_adjective(tag: Optional[str]) -> bool:
    if tag is None:
        return False
    return tag in ADJECTIVE_TAGS
