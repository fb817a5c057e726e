"""Run the service with uvicorn: ``python -m portfolio_api``."""

import uvicorn

from portfolio_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    shown_host = "localhost" if settings.host in ("0.0.0.0", "") else settings.host
    print(f"[server] Like server running at http://{shown_host}:{settings.port}")
    uvicorn.run("portfolio_api.app:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
