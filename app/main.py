"""FastAPI app: /health, /analyze, /check, /report/download."""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from accessibility_checker.errors import FetchError, InvalidURLError, ParseError

from .config import configure_logging, get_host, get_port
from .dependencies import get_enrichment_config
from .routes import analyze_router, health_router, report_router
from .startup import validate_config

logger = logging.getLogger(__name__)

configure_logging()

app = FastAPI(
    title="AI-Powered Accessibility Checker API",
    description="Rule-based accessibility checks plus Together.ai explanations and suggested fixes.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(health_router)
app.include_router(analyze_router)
app.include_router(report_router)


@app.on_event("startup")
def _validate_config() -> None:
    validate_config(get_enrichment_config())


@app.exception_handler(InvalidURLError)
def _invalid_url(request: Request, exc: InvalidURLError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": str(exc.errors())},
    )


@app.exception_handler(FetchError)
@app.exception_handler(ParseError)
def _analysis_failed(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Analysis failed: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to analyze website", "details": str(exc)},
    )


def run() -> None:
    """Serve the API with uvicorn on HOST:PORT."""
    uvicorn.run(app, host=get_host(), port=get_port())


if __name__ == "__main__":
    run()
