# product_inventory/main.py
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_inventory.api.routers import health, products
from product_inventory.data.seed import seed
from product_inventory.repos.product_repo import ProductRepo
from product_inventory.utils.logging import get_logger
from product_inventory.utils.settings import HOST, PORT, PRODUCTS_FILE

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    #plik z produktami musi istnieć, zanim przyjmiemy pierwszy request
    seed(app.state.repo)
    logger.info(f"Server is running on http://localhost:{PORT}")
    yield


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error for {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Something went wrong!"})


def create_app(products_file: str | Path | None = None) -> FastAPI:
    app = FastAPI(
        title="Product Inventory API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.repo = ProductRepo(products_file or PRODUCTS_FILE)

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)

    return app


app = create_app()


def main() -> None:
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
