"""FastAPI dependencies resolving the app-owned services."""

from fastapi import Request

from ..config import AppConfig
from ..services.location_store import LocationStore
from ..services.refresh_service import RefreshService


def get_store(request: Request) -> LocationStore:
    return request.app.state.store


def get_refresh_service(request: Request) -> RefreshService:
    return request.app.state.refresh_service


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.config
