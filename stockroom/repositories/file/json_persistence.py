"""
Whole-collection JSON persistence for a :class:`KeyedStore`.

- ``save`` writes ``store.list_all()`` as a JSON array, replacing the file.
- ``load`` reads the array back and replaces the store content. It never merges.
- Expected failures come back as a :class:`PersistenceResult`; nothing is raised.

The write goes to a sibling temp file that is then moved over the target with
``os.replace``. That keeps a half-written document from ever sitting at the
target path, but there is no fsync, so a crash can still lose the last save.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Generic

from pydantic import TypeAdapter, ValidationError

from stockroom.domain.errors import (
    DuplicateIdentityError,
    InvalidValueError,
    SerializationError,
    StorageIOError,
)
from stockroom.domain.interfaces import E
from stockroom.domain.value_objects.enums import PersistenceStatus
from stockroom.domain.value_objects.outcomes import PersistenceResult

from .. import EntityRepo

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2


class JsonPersistenceAdapter(Generic[E]):
    """Serialize a store to a JSON file and load it back.

    ``entity_type`` is the record type held by the store: a model class such
    as ``InventoryItem`` or a tagged union such as ``WarehouseItem``.
    """

    def __init__(self, entity_type: Any, *, indent: int | None = DEFAULT_INDENT) -> None:
        self._adapter: TypeAdapter[list[E]] = TypeAdapter(list[entity_type])  # type: ignore[valid-type]
        self._indent = indent

    def save(self, store: EntityRepo[E], path: Path | str) -> PersistenceResult:
        target = Path(path)
        items = store.list_all()
        try:
            payload = self._adapter.dump_json(items, indent=self._indent)
        except (TypeError, ValueError) as exc:
            logger.error("Could not encode store", extra={"path": str(target), "error": str(exc)})
            return PersistenceResult(
                status=PersistenceStatus.SERIALIZATION_FAILURE,
                path=target,
                error=SerializationError(target, str(exc)),
            )

        try:
            _write_replace(target, payload)
        except OSError as exc:
            logger.error("Could not write store", extra={"path": str(target), "error": str(exc)})
            return PersistenceResult(
                status=PersistenceStatus.IO_FAILURE,
                path=target,
                error=StorageIOError(target, str(exc)),
            )

        logger.info("Saved store", extra={"path": str(target), "count": len(items)})
        return PersistenceResult(status=PersistenceStatus.SAVED, path=target, count=len(items))

    def load(self, store: EntityRepo[E], path: Path | str) -> PersistenceResult:
        target = Path(path)
        if not target.exists():
            logger.info("No existing file found", extra={"path": str(target)})
            return PersistenceResult(status=PersistenceStatus.ABSENT, path=target)

        try:
            with target.open("rb") as f:
                raw = f.read()
        except OSError as exc:
            logger.error("Could not read store", extra={"path": str(target), "error": str(exc)})
            return PersistenceResult(
                status=PersistenceStatus.IO_FAILURE,
                path=target,
                error=StorageIOError(target, str(exc)),
            )

        try:
            items = self._adapter.validate_json(raw)
            store.replace_all(items)
        except (ValidationError, DuplicateIdentityError, InvalidValueError) as exc:
            logger.warning(
                "Malformed store document", extra={"path": str(target), "error": str(exc)}
            )
            return PersistenceResult(
                status=PersistenceStatus.SERIALIZATION_FAILURE,
                path=target,
                error=SerializationError(target, str(exc)),
            )

        logger.info("Loaded store", extra={"path": str(target), "count": len(items)})
        return PersistenceResult(status=PersistenceStatus.LOADED, path=target, count=len(items))


def _write_replace(target: Path, payload: bytes) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
        os.chmod(tmp_name, _target_mode(target))
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def _target_mode(target: Path) -> int:
    # mkstemp creates 0600; keep the existing file's mode, else the umask default
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
