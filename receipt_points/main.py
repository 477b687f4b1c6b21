from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from .logging import get_logger
from .routes.receipts import router as receipts_router
from .services.scoring import ScoringService
from .store.repository import ReceiptStore

logger = get_logger(__name__)


async def _validation_error(request: Request, exc: RequestValidationError):
    errors = [
        f"{'.'.join(str(p) for p in err.get('loc', ()) if p != 'body') or 'body'}: {err.get('msg')}"
        for err in exc.errors()
    ]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, "; ".join(errors))
    return JSONResponse({"detail": "; ".join(errors)}, status_code=400)

async def _unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"detail": "Internal server error"}, status_code=500)


def create_app(store: ReceiptStore | None = None) -> FastAPI:
    app = FastAPI(title=settings.APP_NAME,
                  description="Scores submitted receipts against the points rules",
        version="0.1.0",
        docs_url="/docs",          # Swagger UI
        redoc_url="/redoc",        # ReDoc
        openapi_url="/openapi.json")

    app.state.scoring = ScoringService(
        store if store is not None else ReceiptStore(),
        count_underscore=settings.RETAILER_COUNT_UNDERSCORE,
    )

    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)
    app.include_router(receipts_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
