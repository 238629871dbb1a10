"""
Helpers to run the API in-process against an in-memory identity store.
"""

import httpx
from fastapi import FastAPI

from serrurier.config.settings import Settings
from serrurier.di.container import DIContainer
from serrurier.domain.services.i_identity_store import IIdentityStore
from serrurier.main import create_app


def build_settings(**overrides) -> Settings:
    """Settings pointing at a fake store; overrides win."""
    values = {
        "IDENTITY_STORE_ENDPOINT": "http://store.test/v1",
        "IDENTITY_STORE_PROJECT_ID": "test-project",
        "IDENTITY_STORE_API_KEY": "test-key",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def build_app(identity_store: IIdentityStore, **overrides) -> FastAPI:
    """Create the application with identity_store injected."""
    settings = build_settings(**overrides)
    container = DIContainer(settings, identity_store=identity_store)
    return create_app(settings, container)


def build_client(app: FastAPI) -> httpx.AsyncClient:
    """HTTP client bound to app without a network socket."""
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    )
