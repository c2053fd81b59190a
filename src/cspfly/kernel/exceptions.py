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
"""Exception hierarchy for cspfly.

Builders raise these synchronously at the call site; nothing is deferred to
``build()``.
"""

from __future__ import annotations

# =============================================================================
# Base Exception
# =============================================================================


class CspFlyException(Exception):
    """Base exception for all cspfly errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CSP_INVALID_STATE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Builder Exceptions
# =============================================================================


class InvalidStateException(CspFlyException):
    """A builder was asked to do something its current state forbids."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(CspFlyException):
    """Header configuration is malformed and cannot be applied."""
