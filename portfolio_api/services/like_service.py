"""Like counter use cases (list counts, increment, admin overrides)."""

from __future__ import annotations

from typing import Dict, Tuple

from portfolio_api.repositories.json_storage import LedgerRepository


class LikeError(Exception):
    """Base exception for the like workflow."""


class ProjectNameError(LikeError):
    """Raised when the project key is an empty string."""


class LikeService:
    """Reads and mutates the likes ledger."""

    def __init__(self, repository: LedgerRepository | None = None) -> None:
        self.repository = repository or LedgerRepository()

    def _key(self, project: str | None) -> str:
        # Display names are kept verbatim, whitespace included.
        if not project:
            raise ProjectNameError("Project name is required")
        return project

    def counts(self) -> Dict[str, int]:
        return self.repository.load()

    def like(self, project: str) -> Tuple[str, int]:
        key = self._key(project)

        def _increment(ledger: Dict[str, int]) -> int:
            ledger[key] = ledger.get(key, 0) + 1
            return ledger[key]

        return key, self.repository.update(_increment)

    def set_count(self, project: str, count: int) -> int:
        key = self._key(project)
        if count < 0:
            raise LikeError("Count must be a non-negative integer")

        def _set(ledger: Dict[str, int]) -> int:
            ledger[key] = count
            return count

        return self.repository.update(_set)

    def reset(self, project: str | None = None) -> int:
        """Drop one entry (or every entry when project is None). Returns how many were removed."""
        if project is None:
            return self.repository.update(_clear)
        key = self._key(project)
        return self.repository.update(lambda ledger: 1 if ledger.pop(key, None) is not None else 0)


def _clear(ledger: Dict[str, int]) -> int:
    removed = len(ledger)
    ledger.clear()
    return removed
