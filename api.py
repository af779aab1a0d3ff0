"""
FastAPI web application for SEO Analyzer
"""
from fastapi import FastAPI, Depends
from fastapi.exceptions import RequestValidationError as BodyValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Dict, Optional
import logging
from datetime import datetime
import uvicorn

from config import config
from models import AnalysisRequest
from monitoring import setup_logging
from seo_scraper import SEOAnalyzer
from utils import AnalysisError, RequestValidationError

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


# Pydantic models for API requests
class SEOAnalysisRequest(BaseModel):
    url: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    providers: Dict[str, bool]


# Initialize FastAPI app
app = FastAPI(
    title="SEO Analyzer API",
    description="On-page and off-page SEO analysis with a composite rating",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global analyzer instance
seo_analyzer = None


@app.on_event("startup")
async def startup_event():
    """Configure logging and check credentials on startup"""
    setup_logging(config.log_level, config.log_dir)
    config.warn_missing_credentials()
    logger.info("SEO Analyzer API started successfully")


def get_analyzer() -> SEOAnalyzer:
    """Dependency to get the analyzer instance"""
    global seo_analyzer
    if seo_analyzer is None:
        seo_analyzer = SEOAnalyzer(config)
    return seo_analyzer


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# API Endpoints

@app.get("/", response_model=Dict[str, str])
async def root():
    """Root endpoint"""
    return {
        "message": "SEO API is running! Use POST /analyze-seo",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="degraded" if config.missing_credentials() else "healthy",
        timestamp=datetime.now(),
        providers={
            "pagespeed": bool(config.page_speed_api_key),
            "opengraph": bool(config.opengraph_api_key),
            "serp": bool(config.serp_api_key),
        }
    )


@app.post("/analyze-seo")
async def analyze_seo(
    payload: Optional[SEOAnalysisRequest] = None,
    analyzer: SEOAnalyzer = Depends(get_analyzer)
):
    """Analyze a single URL and return its SEO report"""
    try:
        request = AnalysisRequest(payload.url if payload else None)
    except RequestValidationError as e:
        return error_response(400, str(e))

    try:
        logger.info(f"Analyzing URL: {request.target_url}")
        report = await analyzer.analyze(request)
    except AnalysisError as e:
        logger.error(f"Error analyzing SEO for {request.target_url}: {e} (cause: {e.__cause__})")
        return error_response(500, "Failed to fetch SEO data")
    except Exception as e:
        logger.exception(f"Unexpected error analyzing SEO for {request.target_url}: {e}")
        return error_response(500, "Failed to fetch SEO data")

    return report.to_dict()


# Custom exception handlers
@app.exception_handler(BodyValidationError)
async def body_validation_handler(request, exc):
    """Malformed bodies ({"url": 123}, invalid JSON) get the same answer as a missing URL"""
    logger.warning(f"Rejected request body: {exc.errors()}")
    return error_response(400, "URL is required")


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}")
    return error_response(500, "Failed to fetch SEO data")


if __name__ == "__main__":
    uvicorn.run(
        "api:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower()
    )
