"""
API request and response models for the Minimal API REST endpoints.

These Pydantic v2 models define the HTTP transport contract. They are
intentionally separate from the dataclasses in core/models.py, which own the
internal domain representation. Route handlers map between the two.

Wire names: JSON bodies keep the Portuguese camelCase names existing clients
already send and read (senha, perfil, nome, marca, ano, mensagens). Request
models also accept the English attribute names through AliasChoices. Response
models use a plain alias plus populate_by_name: handlers build them with the
English attribute names, and FastAPI dumps and re-validates them by alias.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from core.models import Administrator, Role, Vehicle

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class LoginRequest(BaseModel):
    """Request body for POST /administradores/login.

    Both fields default to empty so a partial body is a failed login (401),
    not a schema error.
    """

    email: Optional[str] = ""
    password: Optional[str] = Field(default="", validation_alias=AliasChoices("senha", "password"))


class AdministratorCreate(BaseModel):
    """Request body for POST /administradores.

    Fields are optional at the schema level: emptiness is reported by
    core.validation as a 400 message list, like the vehicle payload.
    An unknown perfil value is still a schema error (422).
    """

    email: Optional[str] = None
    password: Optional[str] = Field(default=None, validation_alias=AliasChoices("senha", "password"))
    role: Optional[Role] = Field(default=None, validation_alias=AliasChoices("perfil", "role"))


class VehicleCreate(BaseModel):
    """Request body for POST /veiculos."""

    name: Optional[str] = Field(default=None, validation_alias=AliasChoices("nome", "name"))
    brand: Optional[str] = Field(default=None, validation_alias=AliasChoices("marca", "brand"))
    year: Optional[int] = Field(default=None, validation_alias=AliasChoices("ano", "year"))


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class HomeResponse(BaseModel):
    """Response for GET /."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: str = Field(default="Bem vindo a API de veículos - Minimal API", alias="mensagem")
    doc: str = "/docs"


class AdministratorView(BaseModel):
    """Administrator projection without the password."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    email: str
    role: Role = Field(alias="perfil")

    @classmethod
    def from_domain(cls, administrator: Administrator) -> "AdministratorView":
        return cls(id=administrator.id, email=administrator.email, role=administrator.role)


class AuthenticatedAdministrator(BaseModel):
    """Response for a successful POST /administradores/login."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    email: str
    role: Role = Field(alias="perfil")
    token: str


class VehicleResponse(BaseModel):
    """A stored vehicle."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str = Field(alias="nome")
    brand: str = Field(alias="marca")
    year: int = Field(alias="ano")

    @classmethod
    def from_domain(cls, vehicle: Vehicle) -> "VehicleResponse":
        return cls(id=vehicle.id, name=vehicle.name, brand=vehicle.brand, year=vehicle.year)


class ValidationErrors(BaseModel):
    """400 body listing every rejected field, in check order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    messages: list[str] = Field(default_factory=list, alias="mensagens")


class ErrorDetail(BaseModel):
    """Machine-readable error payload."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: Optional[str] = None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned on 401/403/404/409/422/500."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Response for GET /health."""

    model_config = ConfigDict(frozen=True)

    status: str = "ok"
    version: str
