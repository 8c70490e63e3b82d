import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from chat_gateway.api import chat
from chat_gateway.core.config import settings
from chat_gateway.core.errors import ChatGatewayError
from chat_gateway.core.store import ChatStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Configure logging based on debug setting
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s" if settings.debug
        else "%(levelname)-8s %(name)s: %(message)s",
    )

    # State lives only as long as this process; nothing is persisted
    app.state.store = ChatStore(echo=settings.debug)

    yield

    app.state.store.close()


app = FastAPI(title=settings.app_name, lifespan=lifespan)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": ", ".join(settings.cors_origins),
    "Access-Control-Allow-Methods": ", ".join(settings.cors_methods),
    "Access-Control-Allow-Headers": ", ".join(settings.cors_headers),
}


@app.middleware("http")
async def cors(request: Request, call_next):
    # Every OPTIONS request is a preflight: answered before routing, empty body
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


app.include_router(chat.router, prefix="/api/chat", tags=["chat"])


@app.exception_handler(ChatGatewayError)
async def handle_gateway_error(request: Request, exc: ChatGatewayError):
    if exc.status_code >= 500:
        logger.exception(f"API Error: {exc.message}", exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(status_code=422, content={"error": "Invalid request", "details": details})


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unknown methods on known paths are both "not found"
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("API Error", exc_info=exc)
    # Runs outside the middleware stack, so the CORS headers are added here
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": str(exc)},
        headers=CORS_HEADERS,
    )


@app.get("/api/health")
async def health():
    return {"status": "ok", "app": settings.app_name}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
