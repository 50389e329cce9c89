# SPDX-License-Identifier: MIT

from typing import Generic, Optional, TypedDict, TypeVar

from stepstracker.errors import TrackerError

T = TypeVar("T")


class MutationResult(TypedDict, Generic[T]):
    """
    Outcome of a controller mutation.

    A rejected mutation has `ok` False and `error` set. A mutation that was
    applied in memory but could not be persisted has `ok` True and a
    `storage_error`; the change stands.
    """

    ok: bool
    reason: str
    value: Optional[T]
    error: Optional[TrackerError]
    storage_error: Optional[TrackerError]
