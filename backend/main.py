import os
import logging
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Routers
from routers.swot_router import router as swot_router
from utils.config import MissingCredentialError

# Exceptions
from exceptions import (
    global_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    missing_credential_exception_handler,
)

app = FastAPI(title="SWOT Analysis Assistant")

# ✅ CORS Support
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",")],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# ✅ Root route for health check
@app.get("/")
async def root():
    return {
        "status": "ok",
        "message": "SWOT Analysis Assistant API is running",
        "version": "1.0.0"
    }

# ✅ Routers
app.include_router(swot_router, prefix="/api")

# ✅ Global Exception Handlers
app.add_exception_handler(MissingCredentialError, missing_credential_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
