"""Error taxonomy for term extraction and lexical relation lookup."""


class TermlexError(Exception):
    """Base class for all termlex errors."""


class BackendUnavailableError(TermlexError, RuntimeError):
    """A tagger, parser or dictionary could not be initialized.

    Raised once when the owning session object is constructed.
    """


class ExtractionError(TermlexError):
    """Per-call extraction failure; extractors absorb it into a diagnostic."""


class LookupMissError(TermlexError, LookupError):
    """A surface form has no entry in the lexical database."""
