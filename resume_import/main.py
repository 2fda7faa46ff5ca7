import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from resume_import.api.routes.parse import router as parse_router
from resume_import.core import config

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Resume Import (Resume Extraction Service)",
    description="Heuristic resume extraction service that turns PDF/DOCX/TXT resumes into structured profile data with a confidence score",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "resume-import", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Resume Import API",
        version="0.1.0",
        description="Resume extraction API with completeness confidence scoring",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
