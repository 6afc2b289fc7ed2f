"""Lexical relation package exports."""

from termlex.lexical.classifier import LexicalRelationClassifier
from termlex.lexical.database import LexicalDatabase, WordNetLexicalDatabase
from termlex.lexical.models import (
    MEDIUM_RELATION_SWEEP,
    LexicalChain,
    RelationPointer,
    RelationStrength,
    Word,
    WordRelation,
)

__all__ = [
    "LexicalChain",
    "LexicalDatabase",
    "LexicalRelationClassifier",
    "MEDIUM_RELATION_SWEEP",
    "RelationPointer",
    "RelationStrength",
    "Word",
    "WordNetLexicalDatabase",
    "WordRelation",
]
