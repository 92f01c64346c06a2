from pathlib import Path

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import logging

from .api.routes import router as api_router
from .core.config import Settings, get_settings
from .core.errors import MealSuggestionError, UpstreamError
from .models.meal import ErrorResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

log = logging.getLogger(__name__)

settings = get_settings()
app = FastAPI(title="kondate", version="0.1.0", description="AI meal suggestion form")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MealSuggestionError)
async def meal_suggestion_error_handler(request: Request, exc: MealSuggestionError):
    log.error(f"❌ {type(exc).__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=ErrorResponse(message=exc.message).model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    log.warning(f"⚠️ Invalid request on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(message="入力内容が正しくありません。").model_dump(),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    log.exception(f"💥 Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message=UpstreamError.default_message).model_dump(),
    )


# Include API router BEFORE static files mount
app.include_router(api_router)


@app.get("/api/health")
async def health_check(current: Settings = Depends(get_settings)):
    return {"status": "ok", "message": "kondate API is running", "gemini_configured": bool(current.api_key)}


# Serve the form (this should be LAST)
if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("backend.kondate.main:app", host="0.0.0.0", port=8000, reload=True)
