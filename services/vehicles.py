"""services/vehicles.py -- Vehicle creation and paged listing."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from core.models import Vehicle
from db.context import DbContext
from services.pagination import page_bounds

logger = logging.getLogger("minimalapi.services.vehicles")


class VehicleService:
    def __init__(self, db: DbContext, page_size: int = 10) -> None:
        self.db = db
        self.page_size = page_size

    def create(self, vehicle: Vehicle) -> Vehicle:
        """Persist a vehicle and return it with its assigned id.

        Field checks are the caller's job (see core.validation).
        """
        new_id = self.db.add_vehicle(vehicle)
        logger.info("Vehicle %s %s (%d) created (id=%d)", vehicle.brand, vehicle.name, vehicle.year, new_id)
        return replace(vehicle, id=new_id)

    def list(self, page: Optional[int] = None) -> list[Vehicle]:
        """Return the whole collection, or page N of page_size rows when page is given."""
        offset, limit = page_bounds(page, self.page_size)
        return self.db.list_vehicles(offset=offset, limit=limit)
