"""Exception hierarchy for failures at the provider boundary."""

from __future__ import annotations


class ProviderError(Exception):
    """Base exception for all data-provider failures."""


class ProviderUnavailableError(ProviderError):
    """The provider could not be reached or did not answer in time."""


class MalformedRecordError(ProviderError):
    """A provider returned a record that does not match the expected shape."""

    def __init__(self, message: str, record: object = None) -> None:
        super().__init__(message)
        self.record = record
