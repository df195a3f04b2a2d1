"""
api/dependencies.py -- Per-request service providers.

The DbContext and Settings are built once in the lifespan (api/main.py) and
kept on app.state. These providers wrap them in a fresh service object per
request, so handlers receive their collaborators through Depends() instead of
reaching into globals.
"""

from fastapi import Request

from core.config import Settings
from services.administrators import AdministratorService
from services.vehicles import VehicleService


def get_administrator_service(request: Request) -> AdministratorService:
    settings: Settings = request.app.state.settings
    return AdministratorService(
        request.app.state.db,
        page_size=settings.page_size,
        hash_passwords=settings.hash_passwords,
    )


def get_vehicle_service(request: Request) -> VehicleService:
    settings: Settings = request.app.state.settings
    return VehicleService(request.app.state.db, page_size=settings.page_size)
