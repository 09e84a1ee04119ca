from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader

from app.config import Settings
from app.db.connection import Database
from app.errors import Unauthorized

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.db


async def verify_api_key(
    api_key: str = Security(_api_key_header),
    settings: Settings = Depends(get_app_settings),
) -> str:
    if not api_key or api_key != settings.api_key:
        raise Unauthorized("Unauthorized: Invalid or missing API key")
    return api_key
