"""
Todo Service - multi-user todo lists with a free plan cap
In-memory storage only; the acting user is named by the `username` header.
"""

from pathlib import Path
import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from routers.users_router import users_router
from routers.todos_router import todos_router
from database import init_store
from config.settings import settings
from utils.errors import TodoServiceError
from utils.responses import error_response

# ============================================================================
# LOGGING
# ============================================================================

handlers = [logging.StreamHandler()]
if settings.log_file:
    log_path = Path(settings.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handlers.append(logging.FileHandler(log_path))

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=handlers
)
logger = logging.getLogger(__name__)

# ============================================================================
# FASTAPI APP SETUP
# ============================================================================

app = FastAPI(title=settings.app_name)
init_store(app)


# Uncaught exception middleware - logs all unhandled exceptions and returns 500
class UncaughtExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Uncaught exception: {e}\n{traceback.format_exc()}")
            return JSONResponse(
                status_code=500,
                content={"error": "Internal Server Error"}
            )


app.add_middleware(UncaughtExceptionMiddleware)

# CORS MUST be near the bottom
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TodoServiceError)
async def todo_service_error_handler(request: Request, exc: TodoServiceError):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.message}")
    return error_response(exc.message, status=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Report the first failing field as "<location>: <reason>"
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    reason = first.get("msg", "Invalid request")
    message = f"{location}: {reason}" if location else reason
    logger.info(f"{request.method} {request.url.path} -> 422 {message}")
    return error_response(message, status=422)


@app.on_event("startup")
async def log_startup():
    logger.info(
        f"{settings.app_name} started (free plan limit: {settings.free_plan_todo_limit} todos)"
    )


@app.get("/health")
async def health():
    return {"ok": True, "service": settings.app_name}


# ============================================================================
# INCLUDE ROUTERS
# ============================================================================
app.include_router(users_router)
app.include_router(todos_router)


def run():
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
