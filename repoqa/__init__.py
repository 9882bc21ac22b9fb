"""repoqa - question answering over a source-code repository."""

__version__ = "0.1.0"
