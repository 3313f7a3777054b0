"""Custom exception hierarchy for pyawsconfig."""

from __future__ import annotations


class AwsError(Exception):
    """Base exception for all pyawsconfig errors."""


class AwsConfigError(AwsError):
    """Invalid or missing configuration.

    Raised while building the default configuration or one of the
    collaborators it points at (e.g. an empty credential chain, or an
    environment override that cannot be parsed).  Merging and copying
    configuration records never raise it.
    """

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)
