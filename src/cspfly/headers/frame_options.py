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
"""X-Frame-Options header.

Controls whether user agents may display pages from the application in a
frame.
"""

from __future__ import annotations

from cspfly.headers.options import ResponseHeadersOptionsBuilder

X_FRAME_OPTIONS = "X-Frame-Options"

DENY = "DENY"
SAMEORIGIN = "SAMEORIGIN"
ALLOW_FROM = "ALLOW-FROM"


def add_frame_options(builder: ResponseHeadersOptionsBuilder, value: str) -> ResponseHeadersOptionsBuilder:
    """Add the ``X-Frame-Options`` header with a literal *value*."""
    return builder.add(X_FRAME_OPTIONS, value)


def allow_framing_from_same_origin(builder: ResponseHeadersOptionsBuilder) -> ResponseHeadersOptionsBuilder:
    """Only allow pages from the current origin to frame the application."""
    return add_frame_options(builder, SAMEORIGIN)


def allow_framing_from_origin(builder: ResponseHeadersOptionsBuilder, origin: str) -> ResponseHeadersOptionsBuilder:
    """Only allow pages from *origin* to frame the application."""
    return add_frame_options(builder, f"{ALLOW_FROM} {origin}")


def prevent_framing(builder: ResponseHeadersOptionsBuilder) -> ResponseHeadersOptionsBuilder:
    """Never allow the application to be displayed in a frame."""
    return add_frame_options(builder, DENY)
