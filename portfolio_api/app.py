from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from portfolio_api.core.config import get_settings
from portfolio_api.repositories.json_storage import LedgerRepository
from portfolio_api.routers import catalog as catalog_router
from portfolio_api.routers import likes as likes_router
from portfolio_api.services.catalog_service import CatalogService
from portfolio_api.services.like_service import LikeService


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    app = FastAPI(title="Portfolio Likes API", debug=settings.app_env == "dev")

    # The static site is usually served from another origin.
    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    like_service = LikeService(LedgerRepository(settings.likes_file))
    app.state.like_service = like_service
    app.state.catalog_service = CatalogService(settings.data_dir, likes=like_service)

    app.include_router(likes_router.router)
    app.include_router(catalog_router.router)

    # Mounted last so API routes win over files with the same name.
    site_dir = settings.site_dir
    if site_dir and site_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(site_dir), html=True), name="site")
    elif site_dir:
        print(f"[server] SITE_DIR {site_dir} does not exist; static site not mounted")
    return app
