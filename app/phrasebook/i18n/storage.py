"""Key-value persistence for user preferences such as the chosen locale.

Values are JSON encoded and kept in a single JSON object on disk. The store
never raises: unreadable or unparsable data reads as "no stored value",
and a failed write is logged and leaves the previous file in place.
"""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from phrasebook.logging import get_module_logger

logger = get_module_logger()

UNDEFINED = "undefined"


class LocalePreferenceStore:
    """JSON-file backed key-value store.

    Each entry holds the JSON encoding of its value, so a hand-edited or
    corrupted entry only affects that key.

    Attributes:
        path: Backing file, or None when no store is available.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else None
        self._lock = threading.Lock()

    @property
    def available(self) -> bool:
        return self.path is not None

    def _read_entries(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                entries = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("preferences_unreadable", path=str(self.path), error=str(e))
            return {}
        if not isinstance(entries, dict):
            logger.warning("preferences_invalid_format", path=str(self.path))
            return {}
        return entries

    def _write_entries(self, entries: Dict[str, str]) -> bool:
        """Replace the backing file with ``entries``.

        The JSON is written to a temporary file in the same directory and
        moved into place, so an interrupted write leaves the old file intact.

        Returns:
            True on success, False if the file could not be written.
        """
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = f.name
                json.dump(entries, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning(
                "preferences_write_failed", path=str(self.path), error=str(e)
            )
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False
        return True

    def get_item(self, key: str) -> Any:
        """Return the decoded value for ``key``, or None.

        Args:
            key: Storage key (e.g. "locale").

        Returns:
            Stored value, or None if absent, unparsable, or the literal
            ``"undefined"``.
        """
        if not self.available:
            logger.info("preferences_store_unavailable", action="get", key=key)
            return None

        with self._lock:
            raw = self._read_entries().get(key)

        if raw is None or raw == UNDEFINED:
            return None
        try:
            return json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            logger.warning("preference_parse_error", key=key)
            return None

    def set_item(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        if not self.available:
            logger.info(
                "preferences_store_unavailable", action="set", key=key, value=value
            )
            return

        with self._lock:
            entries = self._read_entries()
            entries[key] = json.dumps(value)
            stored = self._write_entries(entries)
        if stored:
            logger.debug("preference_stored", key=key)

    def remove_item(self, key: str) -> None:
        if not self.available:
            logger.info("preferences_store_unavailable", action="remove", key=key)
            return

        with self._lock:
            entries = self._read_entries()
            if entries.pop(key, None) is not None:
                self._write_entries(entries)

    def clear(self) -> None:
        """Remove every stored value."""
        if not self.available:
            logger.info("preferences_store_unavailable", action="clear")
            return

        with self._lock:
            self._write_entries({})
