# bootique/main.py
from contextlib import asynccontextmanager
from typing import Any, Dict, Iterable, List, Optional

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import core
from .config import Settings
from .database import BasketStore, ProductStore
from .errors import ProductNotFound
from .log import configure_logging
from .models import OrderItemIn, Product

logger = structlog.get_logger(__name__)


# ---------------------------
# Store dependencies
# ---------------------------
def get_product_store(request: Request) -> ProductStore:
    return request.app.state.products


def get_basket_store(request: Request) -> BasketStore:
    return request.app.state.baskets


# ---------------------------
# App factory
# ---------------------------
def create_app(settings: Optional[Settings] = None, products: Optional[Iterable[Product]] = None) -> FastAPI:
    """
    Build the API with its own product and basket stores.

    ``products`` overrides the catalog from ``settings``; tests use it to seed
    a custom catalog without touching the environment.
    """
    if settings is None:
        settings = Settings()
    catalog = list(products) if products is not None else settings.catalog()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level, settings.log_json)
        yield

    app = FastAPI(title="bootique (in-memory basket demo)", lifespan=lifespan)
    app.state.settings = settings
    app.state.products = ProductStore(catalog)
    app.state.baskets = BasketStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ProductNotFound)
    async def product_not_found_handler(request: Request, exc: ProductNotFound):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": exc.code, **exc.details},
        )

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.get("/")
    @app.get("/products")
    def list_products(store: ProductStore = Depends(get_product_store)) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in core.list_products(store)]

    @app.get("/products/{product_id}")
    def get_product(product_id: str, store: ProductStore = Depends(get_product_store)) -> Dict[str, Any]:
        return core.get_product(store, product_id).to_dict()

    # ---------------------------
    # Basket endpoints
    # ---------------------------
    @app.get("/baskets/{basket_id}")
    def get_basket(basket_id: str, baskets: BasketStore = Depends(get_basket_store)) -> Dict[str, Any]:
        return core.view_basket(baskets, basket_id).to_dict()

    @app.post("/baskets/{basket_id}/items")
    def add_to_basket(
        basket_id: str,
        item: OrderItemIn,
        store: ProductStore = Depends(get_product_store),
        baskets: BasketStore = Depends(get_basket_store),
    ) -> Dict[str, Any]:
        return core.add_to_basket(store, baskets, basket_id, item).to_dict()

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    logger.info("app_created", products=len(app.state.products))
    return app


# what `uvicorn bootique.main:app` serves; BOOTIQUE_* variables apply
app = create_app(Settings.from_env())


def run() -> None:
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
