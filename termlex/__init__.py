"""Term extraction and lexical relation classification."""

__version__ = "0.1.0"
