"""Exceptions raised by the I/O collaborators (network, cache)."""


class WordleError(Exception):
    """Base class for termwordle runtime errors."""


class ProviderError(WordleError):
    """The daily solution or word list could not be fetched or parsed."""
