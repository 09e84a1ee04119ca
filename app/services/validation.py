from typing import Any, Iterable

from app.errors import ValidationError


def missing_fields(data: dict[str, Any], names: Iterable[str]) -> list[str]:
    """Names whose value is absent, None or a blank string."""
    missing = []
    for name in names:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


def require_fields(
    data: dict[str, Any],
    names: Iterable[str],
    message: str = "Missing required fields",
    **extra: Any,
) -> None:
    names = list(names)
    missing = missing_fields(data, names)
    if missing:
        raise ValidationError(f"{message}: {', '.join(missing)}", fields=missing, **extra)
