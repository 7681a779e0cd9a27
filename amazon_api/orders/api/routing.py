"""
Route class that decodes JSON bodies with exact decimal numbers.

FastAPI parses request bodies with plain ``json.loads``, which turns
``12345678901234567.89`` into a float before pydantic ever sees it.
Order amounts are fixed-point, so the orders router swaps in a request
whose ``json()`` parses fractional numbers as ``Decimal``.
"""

import json
from decimal import Decimal
from typing import Any, Callable, Coroutine

from fastapi import Request, Response
from fastapi.routing import APIRoute


class DecimalJSONRequest(Request):
    async def json(self) -> Any:
        if not hasattr(self, "_json"):
            body = await self.body()
            self._json = json.loads(body, parse_float=Decimal)
        return self._json


class DecimalJSONRoute(APIRoute):
    """``APIRoute`` whose handler receives a :class:`DecimalJSONRequest`."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()

        async def decimal_route_handler(request: Request) -> Response:
            return await route_handler(DecimalJSONRequest(request.scope, request.receive))

        return decimal_route_handler
