"""MCAT CARS Practice - FastAPI app entry point."""
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from cars_practice.core.config import DEFAULT_SECRET_KEY, get_settings
from cars_practice.core.errors import AppError, NotFound, ValidationFailed
from cars_practice.core.logging import configure_logging
from cars_practice.db.base import Base
from cars_practice.db.session import AsyncSessionLocal, engine
from cars_practice.routers import auth, passages, progress, sessions
from cars_practice.services.seeding import seed_passages

settings = get_settings()
configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.secret_key == DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY is the development default; set it in the environment for production")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.seed_on_startup:
        async with AsyncSessionLocal() as db:
            await seed_passages(db)

    logger.info("{} {} ready", settings.app_name, settings.version)
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Practice MCAT CARS passages, timed or untimed, and review scored results",
    version=settings.version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("{} {} -> {} ({:.1f} ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


# ---------- error translation ----------

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:]) or err['loc'][0]}: {err['msg']}"
        for err in exc.errors()
    )
    error = ValidationFailed(details or None)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content=NotFound().to_dict())
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": str(exc)},
    )


# ---------- routes ----------

app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(passages.router, prefix=settings.api_prefix)
app.include_router(sessions.router, prefix=settings.api_prefix)
app.include_router(progress.router, prefix=settings.api_prefix)


@app.get("/")
async def health():
    return {"message": settings.app_name, "version": settings.version, "status": "healthy"}
