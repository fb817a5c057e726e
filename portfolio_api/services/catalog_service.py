"""Catalog use cases: read projects/skills/timeline and query projects."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from portfolio_api.core.config import SUPPORTED_LANGS, get_settings
from portfolio_api.domain.catalog import (
    collect_tags,
    has_tag,
    localize_project,
    matches_query,
    paginate,
)
from portfolio_api.repositories.json_storage import read_document
from portfolio_api.services.like_service import LikeService

DOCUMENTS = {
    "projects": "projects.json",
    "skills": "skills.json",
    "timeline": "timeline.json",
}


class CatalogError(Exception):
    """Base exception for catalog reads."""


class CatalogNotFoundError(CatalogError):
    """Raised when a catalog document is absent from the data directory."""


class InvalidQueryError(CatalogError):
    """Raised for unsupported languages or out of range paging."""


class CatalogService:
    """Loads the static catalog documents and answers project queries."""

    def __init__(self, data_dir: Path | None = None, likes: LikeService | None = None) -> None:
        settings = get_settings()
        self.data_dir = Path(data_dir) if data_dir else settings.data_dir
        self.default_lang = settings.default_lang
        self.page_size = settings.page_size
        self.max_page_size = settings.max_page_size
        self.likes = likes or LikeService()

    def document(self, name: str) -> Any:
        filename = DOCUMENTS.get(name)
        if not filename:
            raise CatalogNotFoundError(f"Unknown catalog document '{name}'")
        path = self.data_dir / filename
        if not path.exists():
            raise CatalogNotFoundError(f"{filename} not found")
        try:
            return read_document(path)
        except (OSError, ValueError) as exc:
            print(f"[catalog] Failed to load {path}: {exc}")
            raise CatalogError(f"{filename} could not be read") from exc

    def projects(self) -> List[Dict[str, Any]]:
        doc = self.document("projects")
        items = doc.get("projects", []) if isinstance(doc, dict) else doc
        if not isinstance(items, list):
            raise CatalogError("projects.json must hold a list of projects")
        return [p for p in items if isinstance(p, dict)]

    def tags(self) -> List[str]:
        return collect_tags(self.projects())

    def query_projects(
        self,
        *,
        lang: str | None = None,
        tag: str | None = None,
        q: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> dict:
        lang = (lang or self.default_lang).strip().lower()
        if lang not in SUPPORTED_LANGS:
            raise InvalidQueryError(f"Unsupported language '{lang}'")
        per_page = self.page_size if per_page is None else per_page
        if page < 1 or not 1 <= per_page <= self.max_page_size:
            raise InvalidQueryError("Invalid pagination parameters")

        counts = self.likes.counts()
        selected = []
        for project in self.projects():
            item = localize_project(project, lang, self.default_lang)
            if not (has_tag(item, tag) and matches_query(item, q)):
                continue
            item["likes"] = counts.get(str(item.get("name") or ""), 0)
            selected.append(item)
        result = paginate(selected, page, per_page)
        result["lang"] = lang
        return result
