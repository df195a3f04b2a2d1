"""
api/routes/vehicles.py -- Vehicle endpoints.

Routes:
  POST /veiculos   -- create a vehicle (Adm or Editor)
  GET  /veiculos   -- list vehicles, ?pagina=N (any authenticated administrator)
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from api.dependencies import get_vehicle_service
from api.models import ValidationErrors, VehicleCreate, VehicleResponse
from auth.dependencies import get_current_identity, require_roles
from core.models import Role, Vehicle
from core.validation import validate_vehicle
from services.pagination import MAX_PAGE
from services.vehicles import VehicleService

# Auth policy:
# - POST /veiculos: requires role Adm or Editor
# - GET  /veiculos: requires any valid token
router = APIRouter(prefix="/veiculos")


@router.post(
    "",
    response_model=VehicleResponse,
    status_code=201,
    dependencies=[Depends(require_roles(Role.ADM, Role.EDITOR))],
    responses={400: {"model": ValidationErrors}},
)
def create_vehicle(
    body: VehicleCreate,
    response: Response,
    service: VehicleService = Depends(get_vehicle_service),
):
    """Validate and store a vehicle; 201 with a Location header and the stored record."""
    messages = validate_vehicle(body.name, body.brand, body.year)
    if messages:
        return JSONResponse(status_code=400, content=ValidationErrors(messages=messages).model_dump(by_alias=True))

    created = service.create(Vehicle(name=body.name, brand=body.brand, year=body.year))
    response.headers["Location"] = f"/veiculo/{created.id}"
    return VehicleResponse.from_domain(created)


@router.get("", response_model=list[VehicleResponse], dependencies=[Depends(get_current_identity)])
def list_vehicles(
    pagina: Optional[int] = Query(
        default=None, ge=1, le=MAX_PAGE, description="1-based page number; omit for all rows"
    ),
    service: VehicleService = Depends(get_vehicle_service),
) -> list[VehicleResponse]:
    return [VehicleResponse.from_domain(v) for v in service.list(pagina)]
