"""Main FastAPI application for the Task Management backend."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from taskmanagement import __version__
from taskmanagement.middleware.cors import add_cors_middleware
from taskmanagement.db.init import init_db
from taskmanagement.routers import auth_router, tasks_router
from taskmanagement.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Task Management API",
    description="REST API for personal task tracking with per-user ownership",
    version=__version__,
)

add_cors_middleware(app)


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup."""
    try:
        init_db()
    except Exception as e:
        logger.error("Database initialization failed", error=str(e))
        raise
    logger.info("Application startup complete")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 rather than FastAPI's default 422."""
    logger.warning("Validation error", method=request.method, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to the Task Management API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


app.include_router(auth_router, prefix="/auth")  # /auth/register, /auth/login
app.include_router(tasks_router, prefix="/tasks")  # /tasks, /tasks/{task_id}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "taskmanagement.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
