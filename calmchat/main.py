# calmchat/main.py
from typing import Optional

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .handler import ChatHandler
from .logger import logger, setup_logging
from .schemas import ChatIn, ChatOut, ErrorOut, HealthOut

CHAT_PATH = "/api/chat"


def create_app(settings: Optional[Settings] = None,
               transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(title="CalmChat")
    app.state.settings = settings
    handler = ChatHandler(settings, transport=transport)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["POST"],
        allow_headers=["Content-Type"],
    )

    # -------------------- Error payloads --------------------

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        if exc.status_code == 405 and request.url.path == CHAT_PATH:
            detail = "Only POST allowed"
        return JSONResponse({"error": detail}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Bad request body at {request.url.path}")
        return JSONResponse({"error": "Invalid request body"}, status_code=400)

    # -------------------- Routes --------------------

    @app.get("/health", response_model=HealthOut)
    def health():
        return {"provider_configured": settings.provider_configured, "model": settings.model}

    @app.post(
        CHAT_PATH,
        response_model=ChatOut,
        response_model_exclude_none=True,
        responses={400: {"model": ErrorOut}, 405: {"model": ErrorOut}, 500: {"model": ErrorOut}},
    )
    async def chat(body: Optional[ChatIn] = None):
        if body is None or not body.message:
            raise HTTPException(400, detail="No message provided")
        try:
            return await handler.reply(body.message)
        except Exception:
            logger.exception("api/chat error")
            return JSONResponse({"error": "Server error"}, status_code=500)

    return app


app = create_app()
