"""
core/validation.py -- Field checks for the creation payloads.

Each helper returns an ordered list of human-readable messages; an empty list
means the input is valid. No sanitisation and no format checks (an email is
only required to be non-empty).
"""

from typing import Optional

from core.models import MIN_VEHICLE_YEAR, Role

EMAIL_REQUIRED = "Email não pode ser vazio"
PASSWORD_REQUIRED = "Senha não pode ser vazia"
ROLE_REQUIRED = "Perfil não pode ser vazio"

NAME_REQUIRED = "O nome não pode ser vazio"
BRAND_REQUIRED = "A Marca não pode ficar em branco"
YEAR_TOO_OLD = f"Veículo muito antigo, aceito somente anos superiores a {MIN_VEHICLE_YEAR}"


def validate_administrator(email: Optional[str], password: Optional[str], role: Optional[Role]) -> list[str]:
    messages: list[str] = []
    if not email:
        messages.append(EMAIL_REQUIRED)
    if not password:
        messages.append(PASSWORD_REQUIRED)
    if role is None:
        messages.append(ROLE_REQUIRED)
    return messages


def validate_vehicle(name: Optional[str], brand: Optional[str], year: Optional[int]) -> list[str]:
    """Check a vehicle payload. The year bound is inclusive: 1950 is accepted."""
    messages: list[str] = []
    if not name:
        messages.append(NAME_REQUIRED)
    if not brand:
        messages.append(BRAND_REQUIRED)
    if year is None or year < MIN_VEHICLE_YEAR:
        messages.append(YEAR_TOO_OLD)
    return messages
