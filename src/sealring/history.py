"""
Drawing history log.

Exported drawings are kept in a JSON file, newest first, capped at a fixed
number of entries. Entries are full part records, so loading one feeds it
straight back into the drawing engine.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path

from .config import DEFAULT_HISTORY_LIMIT
from .exceptions import HistoryError
from .parts import PartRecord

logger = logging.getLogger(__name__)


def new_record_id() -> str:
    """Millisecond timestamp identifier."""
    return str(int(time.time() * 1000))


class DrawingHistory:
    """
    Append-only history of exported drawings backed by a JSON file.

    Args:
        path: JSON file location (created on first append)
        limit: Maximum number of entries kept; the oldest are dropped
    """

    def __init__(self, path: str | Path, limit: int = DEFAULT_HISTORY_LIMIT):
        self.path = Path(path)
        self.limit = limit

    def _read_raw(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable history file %s: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.warning("Ignoring history file %s: expected a list", self.path)
            return []
        return [item for item in data if isinstance(item, dict)]

    def entries(self) -> list[PartRecord]:
        """All stored records, newest first. Undecodable entries are skipped."""
        records = []
        for item in self._read_raw():
            try:
                records.append(PartRecord.from_dict(item))
            except (TypeError, ValueError) as e:
                logger.warning("Skipping history entry %s: %s", item.get("id", "?"), e)
        return records

    def __len__(self) -> int:
        return len(self._read_raw())

    def get(self, record_id: str) -> PartRecord:
        """
        Load one record by id.

        Raises:
            HistoryError: if no entry has this id or it cannot be decoded
        """
        for item in self._read_raw():
            if str(item.get("id", "")) == record_id:
                try:
                    return PartRecord.from_dict(item)
                except (TypeError, ValueError) as e:
                    raise HistoryError(f"History entry {record_id} is corrupt: {e}") from e
        raise HistoryError(f"No history entry with id {record_id}")

    def append(self, record: PartRecord) -> PartRecord:
        """
        Store ``record`` under a fresh id at the top of the history.

        Returns:
            The stored record (with its new id)
        """
        existing = self._read_raw()
        taken = {str(item.get("id", "")) for item in existing}
        record_id = int(new_record_id())
        # ids must stay unique when several drawings are saved within one ms
        while str(record_id) in taken:
            record_id += 1

        stored = record.with_id(str(record_id))
        items = [stored.to_dict(), *existing][: self.limit]

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

        logger.info("Saved drawing %s to history (%d entries)", stored.metadata.drawing_no, len(items))
        return stored
