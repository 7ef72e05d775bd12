from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..errors import PersistenceError
from .enums import PersistenceStatus

_OK_STATUSES = frozenset(
    {PersistenceStatus.SAVED, PersistenceStatus.LOADED, PersistenceStatus.ABSENT}
)


@dataclass(frozen=True)
class PersistenceResult:
    """Outcome of a single ``save`` or ``load`` call.

    ``ABSENT`` is a benign outcome: nothing was loaded and the target store
    was left as it was. Failure statuses always carry the matching error.
    """

    status: PersistenceStatus
    path: Path
    count: int = 0
    error: Optional[PersistenceError] = None

    @property
    def ok(self) -> bool:
        return self.status in _OK_STATUSES

    def raise_for_status(self) -> None:
        """Raise the carried error, if the call failed."""
        if self.error is not None:
            raise self.error
