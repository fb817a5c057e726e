from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from portfolio_api.services.like_service import LikeService, ProjectNameError

router = APIRouter(tags=["likes"])


def _get_like_service(request: Request) -> LikeService:
    svc = getattr(getattr(request.app, "state", None), "like_service", None)
    if not svc:
        raise RuntimeError("LikeService not configured")
    return svc


@router.get("/likes")
def list_likes(request: Request):
    return _get_like_service(request).counts()


# ":path" so an encoded slash (%2F) inside a project name still matches.
# One trailing slash is not part of the name: /like/foo/ likes "foo".
@router.post("/like/{project:path}")
def like_project(project: str, request: Request):
    svc = _get_like_service(request)
    if project.endswith("/"):
        project = project[:-1]
    try:
        name, likes = svc.like(project)
    except ProjectNameError:
        raise HTTPException(404, "Not Found")
    return {"project": name, "likes": likes}
