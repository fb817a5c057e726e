from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from portfolio_api.services.catalog_service import (
    CatalogError,
    CatalogNotFoundError,
    CatalogService,
    InvalidQueryError,
)

router = APIRouter(tags=["catalog"])


def _get_catalog_service(request: Request) -> CatalogService:
    svc = getattr(getattr(request.app, "state", None), "catalog_service", None)
    if not svc:
        raise RuntimeError("CatalogService not configured")
    return svc


def _raise_http(exc: CatalogError) -> None:
    if isinstance(exc, CatalogNotFoundError):
        raise HTTPException(404, str(exc))
    if isinstance(exc, InvalidQueryError):
        raise HTTPException(422, str(exc))
    raise HTTPException(502, "Catalog unavailable")


@router.get("/projects")
def list_projects(
    request: Request,
    lang: Optional[str] = None,
    tag: Optional[str] = None,
    q: Optional[str] = None,
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, ge=1),
):
    svc = _get_catalog_service(request)
    try:
        return svc.query_projects(lang=lang, tag=tag, q=q, page=page, per_page=per_page)
    except CatalogError as exc:
        _raise_http(exc)


@router.get("/projects/tags")
def list_tags(request: Request):
    try:
        return _get_catalog_service(request).tags()
    except CatalogError as exc:
        _raise_http(exc)


@router.get("/skills")
def skills(request: Request):
    try:
        return _get_catalog_service(request).document("skills")
    except CatalogError as exc:
        _raise_http(exc)


@router.get("/timeline")
def timeline(request: Request):
    try:
        return _get_catalog_service(request).document("timeline")
    except CatalogError as exc:
        _raise_http(exc)
