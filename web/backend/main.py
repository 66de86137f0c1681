"""
FastAPI backend for BindMaster

Cover wrap layout, SVG preview, PDF export and the print expert.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bindmaster import __version__
from bindmaster.config.logging_config import setup_logger
from web.backend.api import ai, cover, export_api
from web.backend.config import SERVER

logger = setup_logger(__name__)

app = FastAPI(
    title="BindMaster API",
    description="Hardcover cover wrap calculator with prepress export",
    version=__version__,
)

# CORS middleware - allow frontend to communicate
app.add_middleware(
    CORSMiddleware,
    allow_origins=SERVER.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Return unexpected errors as JSON"""
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": str(exc)},
    )


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "BindMaster API",
        "version": __version__,
        "docs": "/docs",
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "services": {
            "api": "running",
            "layout": "ready",
            "export": "ready",
        }
    }


app.include_router(cover.router, prefix="/api/cover", tags=["cover"])
app.include_router(export_api.router, prefix="/api/export", tags=["export"])
app.include_router(ai.router, prefix="/api/ai", tags=["ai"])

if __name__ == "__main__":
    import uvicorn
    logger.info("Starting BindMaster API on %s:%s (docs at /docs)", SERVER.host, SERVER.port)
    uvicorn.run(
        "web.backend.main:app",
        host=SERVER.host,
        port=SERVER.port,
        reload=SERVER.reload,
        timeout_keep_alive=120,  # print expert requests can be slow
    )
