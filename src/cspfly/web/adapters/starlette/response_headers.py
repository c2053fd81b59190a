# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Response headers middleware for Starlette: pure ASGI."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog
from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Receive, Scope, Send

from cspfly.config.auto import header_options_from_config
from cspfly.core.config import Config
from cspfly.headers.options import ResponseHeadersOptions, ResponseHeadersOptionsBuilder

logger = structlog.get_logger("cspfly.web")


class ResponseHeadersMiddleware:
    """Writes configured security headers onto every HTTP response.

    ``options`` is written as-is. ``configure`` is called with a fresh
    :class:`ResponseHeadersOptionsBuilder` for each response, after
    ``options`` has been copied into it, so it can add to or override them.

    Uses raw ASGI protocol instead of ``BaseHTTPMiddleware`` so streaming
    responses pass through untouched.
    """

    def __init__(
        self,
        app: ASGIApp,
        options: ResponseHeadersOptions | None = None,
        configure: Callable[[ResponseHeadersOptionsBuilder], Any] | None = None,
    ) -> None:
        self.app = app
        self._options = options or ResponseHeadersOptions()
        self._configure = configure

    @classmethod
    def from_config(cls, app: ASGIApp, config: Config) -> ResponseHeadersMiddleware:
        """Create the middleware with options bound from ``cspfly.headers``."""
        return cls(app, options=header_options_from_config(config))

    def _resolve_options(self) -> ResponseHeadersOptions:
        if self._configure is None:
            return self._options
        builder = ResponseHeadersOptionsBuilder()
        for name, value in self._options:
            builder.add(name, value)
        self._configure(builder)
        return builder.build()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message: Any) -> None:
            if message["type"] == "http.response.start":
                options = self._resolve_options()
                headers = MutableHeaders(scope=message)
                for name, value in options:
                    headers[name] = value
                logger.debug("response_headers_applied", path=scope.get("path"), count=len(options))
            await send(message)

        await self.app(scope, receive, send_with_headers)
