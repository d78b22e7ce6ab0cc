"""JSON API blueprints and the request helpers they share."""

from flask import request

from ryder.errors import ValidationError


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def require_str(value, field: str, default: str = '') -> str:
    """Stripped text field; missing or null reads as ``default``."""
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(f'{field} must be a string')
    return value.strip()


def require_int(value, field: str) -> int:
    """Coerce an id from a payload or query string; bools are not ids."""
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be an integer')
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f'{field} must be an integer')
    if number <= 0:
        raise ValidationError(f'{field} must be positive')
    return number


def optional_float(value, field: str):
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a number')
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f'{field} must be a number')
