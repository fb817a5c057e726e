"""Domain helpers for the project catalog: localization, filtering, paging."""
from __future__ import annotations

import math
from typing import Any, Iterable, List, Mapping, Sequence

LOCALIZED_FIELDS = ("description", "longDescription", "caseStudy")


def localize(value: Any, lang: str, default_lang: str) -> Any:
    """
    Resolve a string-or-{lang: text} field.

    Falls back to the default language, then to the first value present.
    Plain strings (and anything that is not a mapping) are returned as is.
    """
    if not isinstance(value, Mapping):
        return value
    for key in (lang, default_lang):
        text = value.get(key)
        if text:
            return text
    for text in value.values():
        if text:
            return text
    return ""


def localize_project(project: Mapping[str, Any], lang: str, default_lang: str) -> dict:
    item = dict(project)
    for field in LOCALIZED_FIELDS:
        if field in item:
            item[field] = localize(item[field], lang, default_lang)
    return item


def technologies(project: Mapping[str, Any]) -> List[str]:
    techs = project.get("technologies") or []
    if isinstance(techs, str):
        techs = [techs]
    return [str(t) for t in techs if t]


def has_tag(project: Mapping[str, Any], tag: str | None) -> bool:
    """True when no tag is given or the project lists it (case-insensitive)."""
    needle = (tag or "").strip().lower()
    if not needle:
        return True
    return any(t.lower() == needle for t in technologies(project))


def matches_query(project: Mapping[str, Any], query: str | None) -> bool:
    """Substring search over name, (already localized) description and technologies."""
    needle = (query or "").strip().lower()
    if not needle:
        return True
    haystack = [str(project.get("name") or ""), str(project.get("description") or "")]
    haystack.extend(technologies(project))
    return any(needle in text.lower() for text in haystack)


def collect_tags(projects: Iterable[Mapping[str, Any]]) -> List[str]:
    seen: dict[str, str] = {}
    for project in projects:
        for tech in technologies(project):
            seen.setdefault(tech.lower(), tech)
    return sorted(seen.values(), key=str.lower)


def paginate(items: Sequence[Any], page: int, per_page: int) -> dict:
    total = len(items)
    start = (page - 1) * per_page
    return {
        "items": list(items[start : start + per_page]),
        "page": page,
        "per_page": per_page,
        "total": total,
        "pages": math.ceil(total / per_page) if total else 0,
    }
