from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from word_radar.api.routes import radar, health
from word_radar.utils.config import API_VERSION, CORS_ALLOW_ORIGINS, OPENROUTER_MODELS

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Word Radar API...")
    logger.info(f"LLM providers in fallback order: {', '.join(OPENROUTER_MODELS)}")

    yield

    logger.info("Shutting down Word Radar API...")

app = FastAPI(
    title="Word Radar API",
    description="Turns a word into a semantic radar dataset using a thesaurus and an LLM gateway",
    version=API_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        message = "Request body must be valid JSON."
    else:
        details = []
        for error in errors:
            location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            details.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
        message = f"Invalid request: {'; '.join(details)}"

    logger.info(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


app.include_router(radar.router)
app.include_router(health.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "word_radar.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["word_radar"],
        log_level="info"
    )
