# SPDX-License-Identifier: MIT


class TrackerError(Exception):
    """Base class for every error the tracker reports to its callers."""

    pass


class ValidationError(TrackerError):
    """Raised when user input for an entry is incomplete or out of range."""

    pass


class DuplicateError(TrackerError):
    """Raised when an entry already exists for a participant and date."""

    pass


class NotFoundError(TrackerError):
    """Raised when an entry id does not resolve to a stored entry."""

    pass


class FormatError(TrackerError):
    """Raised when a backup payload does not have the expected shape."""

    pass


class StorageError(TrackerError):
    """Raised when the durable store cannot be read or written."""

    pass
