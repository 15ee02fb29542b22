"""Storefront FastAPI application.

Every request runs inside the storefront domain context so that handlers can
reach repositories through ``current_domain``.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the domain.toml overlay:
#   - (unset)      → in-memory providers
#   - "production" → PostgreSQL at DATABASE_URL
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from storefront.bootstrap import init_storefront
from storefront.utils.logging import bind_request, unbind_request

storefront = init_storefront()


def create_app() -> FastAPI:
    from storefront.cart.api.routes import cart_router
    from storefront.catalogue.api import category_router, product_router
    from storefront.identity.api.routes import router as auth_router
    from storefront.ordering.api.routes import order_router
    from storefront.shared.handlers import register_error_handlers

    app = FastAPI(
        title="Storefront API",
        description="Catalogue, cart, checkout and order history",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context for each request."""
        bind_request(request.method, request.url.path)
        try:
            with storefront.domain_context():
                return await call_next(request)
        finally:
            unbind_request()

    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(category_router)
    app.include_router(cart_router)
    app.include_router(order_router)

    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app


app = create_app()
