# LMS performance engine entrypoint: stateless FastAPI app over the aggregation services.

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from lms_analytics.core.logging import setup_logging
from lms_analytics.core.settings import get_settings
from lms_analytics.api import analytics
from lms_analytics.api import grading

app = FastAPI()
settings = get_settings()

origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analytics.router)
app.include_router(grading.router)


@app.get("/")
def read_root():
    return {"app": "LMS performance engine", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def configure_logging():
    setup_logging(settings.log_level, json_format=settings.log_json)
