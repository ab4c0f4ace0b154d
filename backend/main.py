# backend/main.py
import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from database import engine, check_connection, dispose_engine
from utils.payload import describe_errors

# Routers
from routes.auth import router as auth_router
from routes.users import router as users_router
from routes.tasks import router as tasks_router
from routes.system import router as system_router

logger = logging.getLogger(__name__)

STATIC_DIR = Path(settings.STATIC_DIR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Server listening on http://{settings.HOST}:{settings.PORT}")
    # One-off connectivity check in a worker thread; serving starts without waiting on it
    loop = asyncio.get_running_loop()
    app.state.startup_check = loop.run_in_executor(None, check_connection, engine)
    yield
    dispose_engine()


app = FastAPI(title="Maintenance API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message}, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, exc.detail, getattr(exc, "headers", None))


# Malformed path or query values
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error(status.HTTP_400_BAD_REQUEST, describe_errors(exc.errors()))


# Storage failures are reported with the driver's message
@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} failed")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


# Static assets (HTML, CSS, JS)
if STATIC_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
else:
    logger.warning(f"Static directory {STATIC_DIR} not found, assets disabled")

# Router registration
app.include_router(system_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(tasks_router)


@app.get("/", include_in_schema=False)
def read_root():
    index = STATIC_DIR / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Route not found")
    return FileResponse(index)


# Terminal catch-all, must stay the last route registered
@app.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
def route_not_found(path: str):
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Route not found")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
