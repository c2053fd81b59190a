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
"""Content Security Policy directive value object."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Directive:
    """A single named clause of a Content Security Policy, e.g. ``script-src``.

    The name is fixed at construction. ``values`` stays a mutable list so the
    builder that owns the directive can keep appending to it.
    """

    name: str
    values: list[str] = field(default_factory=list, hash=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("A directive requires a non-empty name")

    def __str__(self) -> str:
        if not self.values:
            return self.name
        return f"{self.name} {' '.join(self.values)}"
