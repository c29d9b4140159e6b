import os
import logging
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from datetime import datetime

from database import init_db
from errors import AppError

# ============================================================
# LOGGING
# ============================================================

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
STATIC_DIR = os.path.join(BASE_DIR, os.getenv("STATIC_DIR", "public"))


# ============================================================
# FASTAPI APP
# ============================================================

app = FastAPI(
    title='Garage Invoicing API',
    description='Invoices, quotes and printable documents for a small repair shop',
    version='1.0.0'
)


# ============================================================
# CORS CONFIGURATION
# ============================================================

cors_origins = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def _operation_message(request: Request) -> str:
    """Generic failure message named after the route: create_invoice -> Failed to create invoice."""
    route = request.scope.get("route")
    name = getattr(route, "name", None) or getattr(request.scope.get("endpoint"), "__name__", None)
    if not name:
        return "Invalid request"
    return "Failed to " + name.replace("_", " ")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = _operation_message(request)
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ============================================================
# INITIALIZE DOCUMENT STORE ON STARTUP
# ============================================================

@app.on_event("startup")
def startup():
    init_db()


# ============================================================
# ROUTERS
# ============================================================

from auth.router import router as auth_router
from business_config.router import router as config_router
from dashboard.router import router as dashboard_router
from diagnostics.router import router as diagnostics_router
from invoices.router import router as invoices_router
from line_items.router import router as line_items_router
from quotes.router import router as quotes_router

app.include_router(auth_router)
app.include_router(config_router)
app.include_router(dashboard_router)
app.include_router(invoices_router)
app.include_router(quotes_router)
app.include_router(line_items_router)
app.include_router(diagnostics_router)


# ============================================================
# ROOT & HEALTH ENDPOINTS
# ============================================================

@app.get("/")
def read_root():
    index_path = os.path.join(STATIC_DIR, "index.html")
    if os.path.exists(index_path):
        return FileResponse(index_path)

    return {
        "message": "Garage Invoicing API is running!",
        "version": "1.0.0",
    }


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "modules": [
            "auth", "config", "dashboard", "invoices",
            "quotes", "line-items", "pdf", "diagnostics"
        ]
    }


# ============================================================
# STATIC CLIENT (mounted last so API routes win)
# ============================================================

if os.path.isdir(STATIC_DIR):
    app.mount("/", StaticFiles(directory=STATIC_DIR), name="static")
