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
"""Response header options and the builder used to configure them."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

import structlog

from cspfly.csp.policy import PolicyBuilder

logger = structlog.get_logger("cspfly.headers")

CONTENT_SECURITY_POLICY = "Content-Security-Policy"
CONTENT_SECURITY_POLICY_REPORT_ONLY = "Content-Security-Policy-Report-Only"


@dataclass(frozen=True)
class ResponseHeadersOptions:
    """An ordered, immutable set of headers to write onto every response."""

    headers: tuple[tuple[str, str], ...] = ()

    def items(self) -> list[tuple[str, str]]:
        return list(self.headers)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of header *name* (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return default

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.headers)

    def __len__(self) -> int:
        return len(self.headers)


class ResponseHeadersOptionsBuilder:
    """Collects response headers through a fluent API.

    Header names are case-insensitive: adding a header that is already present
    replaces its value and keeps its position.
    """

    def __init__(self) -> None:
        self._headers: list[tuple[str, str]] = []

    def add(self, header_name: str, header_value: str) -> ResponseHeadersOptionsBuilder:
        """Add a header, replacing any previous value for the same name."""
        lowered = header_name.lower()
        for index, (existing, previous) in enumerate(self._headers):
            if existing.lower() == lowered:
                logger.debug("response_header_replaced", header=existing, previous=previous, value=header_value)
                self._headers[index] = (existing, header_value)
                return self
        self._headers.append((header_name, header_value))
        return self

    def add_content_security_policy(
        self,
        configure: Callable[[PolicyBuilder], Any],
        report_only: bool = False,
    ) -> ResponseHeadersOptionsBuilder:
        """Configure a Content Security Policy and add it as a header.

        Args:
            configure: Called once with a fresh :class:`PolicyBuilder`.
            report_only: Write ``Content-Security-Policy-Report-Only`` instead,
                so violations are reported but not enforced.
        """
        policy = PolicyBuilder()
        configure(policy)
        value = policy.to_header_value()
        if not value:
            logger.debug("csp_empty_policy_skipped", report_only=report_only)
            return self
        name = CONTENT_SECURITY_POLICY_REPORT_ONLY if report_only else CONTENT_SECURITY_POLICY
        return self.add(name, value)

    def build(self) -> ResponseHeadersOptions:
        return ResponseHeadersOptions(headers=tuple(self._headers))
