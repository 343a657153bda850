# notes_api/main.py
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notes_api.config import settings
from notes_api.core.db import init_db, close_db
from notes_api.core.bootstrap import ensure_default_admin
from notes_api.api.deps import get_user_service
from notes_api.api.routers import users

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def on_startup():
    await init_db()
    # Ensure there's a default admin account on first run
    await ensure_default_admin(get_user_service())

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

@app.exception_handler(RequestValidationError)
async def on_validation_error(request: Request, exc: RequestValidationError):
    # Wrongly typed bodies are reported like missing fields: 400, not 422
    logger.info("[request] %s %s rejected: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"message": "All Fields Are Required"})

@app.exception_handler(Exception)
async def on_unhandled_error(request: Request, exc: Exception):
    logger.exception("[request] %s %s failed", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal Server Error", "isError": True})

# REST
app.include_router(users.router)

@app.get("/healthz")
def healthz():
    return {"ok": True}

def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port)
