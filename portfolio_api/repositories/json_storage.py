"""
JSON-file persistence adapters.

``LedgerRepository`` owns the likes ledger file; ``read_document`` loads the
static catalog documents (projects/skills/timeline) shipped with the site.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict
import json
import os
import threading

from portfolio_api.core.config import get_settings


def _clean_ledger(raw: Any) -> Dict[str, int]:
    if not isinstance(raw, dict):
        return {}
    ledger: Dict[str, int] = {}
    for name, count in raw.items():
        # bool is an int subclass but never a count
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            continue
        ledger[str(name)] = count
    return ledger


class LedgerRepository:
    """Load/save helpers for the project-name -> likes mapping."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path else get_settings().likes_file
        self._lock = threading.Lock()

    def load(self) -> Dict[str, int]:
        """Read the whole ledger; a missing or unreadable file is an empty ledger."""
        with self._lock:
            return self._read()

    def _read(self) -> Dict[str, int]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            print(f"[likes] Unreadable ledger at {self.path}; treating as empty: {exc}")
            return {}
        return _clean_ledger(raw)

    def save(self, ledger: Dict[str, int]) -> None:
        with self._lock:
            self._write(ledger)

    def _write(self, ledger: Dict[str, int]) -> None:
        # Readers (other threads, the admin CLI) only ever see a complete file.
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(f"{self.path.name}.{os.getpid()}.tmp")
        tmp.write_text(json.dumps(ledger, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, self.path)

    def update(self, mutate: Callable[[Dict[str, int]], Any]) -> Any:
        """
        Read-modify-write the ledger under the repository lock.

        The lock serializes readers and writers inside this process; several worker
        processes sharing one file can still lose increments.
        """
        with self._lock:
            ledger = self._read()
            result = mutate(ledger)
            self._write(ledger)
            return result


def read_document(path: Path) -> Any:
    """Parse a catalog JSON document. Errors propagate to the caller."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)
