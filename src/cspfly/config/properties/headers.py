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
"""Response header configuration properties."""

from __future__ import annotations

from dataclasses import dataclass, field

from cspfly.core.config import config_properties


@config_properties(prefix="cspfly.headers")
@dataclass
class HeadersProperties:
    """Configuration for the security response headers (cspfly.headers.*).

    ``content_security_policy`` holds ``report_only`` and a ``directives``
    mapping of directive name to a list of values (or a whitespace-separated
    string). An empty list declares a directive without values.
    """

    content_type_options: bool = True
    frame_options: str | None = "DENY"
    feature_policy: str | None = None
    content_security_policy: dict = field(default_factory=lambda: {"report_only": False, "directives": {}})
