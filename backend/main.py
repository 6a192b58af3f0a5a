# backend/main.py
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from backend.errors import AppError, app_error_handler, unhandled_error_handler, validation_error_handler
from backend.routers import clients, company_settings, estimates, health, invoices, quality
from database.setup_db import init_db

load_dotenv()

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("PaintPro Manager API ready")
    yield


app = FastAPI(title="PaintPro Manager", lifespan=lifespan)

# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Every failure leaves as {"success": false, "error": ...}
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

# Logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"Status code: {response.status_code}")
    return response

# Include all routers
app.include_router(health.router, prefix="/api")
app.include_router(clients.router, prefix="/api")
app.include_router(estimates.router, prefix="/api")
app.include_router(invoices.router, prefix="/api")
app.include_router(company_settings.router, prefix="/api")
app.include_router(quality.router, prefix="/api")
