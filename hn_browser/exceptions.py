"""
Error types raised by the fetch-and-pagination pipeline.
"""


class FeedError(Exception):
    """Base class for feed failures; the message is shown to the user."""


class NetworkError(FeedError):
    """Connection, timeout or HTTP status failure talking to the API."""


class DecodeError(FeedError):
    """Response body did not have the expected shape."""


class EmptyBatch(FeedError):
    """A requested slice was empty. Benign, never shown as an error."""
