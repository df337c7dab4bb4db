from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.adapters.memory_store import InMemoryCategoryStore
from src.api.routes import categories
from src.shell.http.health import LIVENESS_TEXT, create_health_router

CATEGORIES_PREFIX = "/categories"


async def plain_text_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render every HTTP error as a plain-text message."""
    unrouted = exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED)
    path = request.url.path
    owned = path == CATEGORIES_PREFIX or path.startswith(CATEGORIES_PREFIX + "/")

    # Everything outside the category routes falls through to liveness
    if unrouted and not owned:
        return PlainTextResponse(LIVENESS_TEXT)
    # Unsupported methods on category paths answer 404, as the routes never existed for them
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return PlainTextResponse("404 page not found", status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def create_app(store: InMemoryCategoryStore | None = None) -> FastAPI:
    """
    Build the API application.

    The app owns its category store; pass one in to share or inspect it.
    """
    app = FastAPI(
        title="Simple Category API",
        version="1.0",
        description="Simple CRUD for categories over an in-memory store",
        docs_url="/docs",
        redoc_url="/redoc",
        redirect_slashes=False,
    )
    app.state.category_store = store if store is not None else InMemoryCategoryStore()

    # --- Routers ---
    app.include_router(create_health_router(service="api"))
    app.include_router(categories.router, prefix="/categories", tags=["Category"])

    app.add_exception_handler(
        StarletteHTTPException,
        plain_text_http_error,  # type: ignore[arg-type]
    )

    return app


app = create_app()
