"""Request dependencies for the shared engine and config."""

from typing import Any

from fastapi import Request

from sentinels_setup import SetupEngine


def get_engine(request: Request) -> SetupEngine:
    return request.app.state.engine


def get_app_config(request: Request) -> dict[str, Any]:
    return request.app.state.config
