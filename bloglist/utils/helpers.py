from collections.abc import MutableMapping
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    for route in routes:
        if type(route) is APIRoute and route.matches(scope)[0] == Match.FULL:
            return route.summary
        if type(route) is Route and route.matches(scope)[0] == Match.FULL:
            return route.name

    return None
