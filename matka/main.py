from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from matka.core.config import settings
from matka.core.logging import setup_logging
from matka.api.v1.router import api_router

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Payout calculation for Matka result declarations",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

@app.get("/")
def root():
    return {
        "status": "online",
        "message": "Matka Payout API",
        "version": "1.0.0"
    }
