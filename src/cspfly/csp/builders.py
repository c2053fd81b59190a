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
"""Fluent builders for Content Security Policy directives."""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from cspfly.csp.directive import Directive
from cspfly.kernel.exceptions import InvalidStateException

logger = structlog.get_logger("cspfly.csp")

NONE = "'none'"
SELF = "'self'"
STRICT_DYNAMIC = "'strict-dynamic'"
UNSAFE_EVAL = "'unsafe-eval'"
UNSAFE_INLINE = "'unsafe-inline'"


class DirectiveBuilder(ABC):
    """Base class for builders that configure a single directive.

    The builder owns exactly one :class:`Directive`. :meth:`build` hands out
    that same instance, so values added afterwards remain visible through it.
    """

    def __init__(self, name: str) -> None:
        self._directive = Directive(name)

    @property
    def name(self) -> str:
        return self._directive.name

    @abstractmethod
    def add(self, value: str) -> DirectiveBuilder:
        """Add a value to the directive and return this builder."""
        self._directive.values.append(value)
        return self

    def build(self) -> Directive:
        """Return the directive constructed by this builder."""
        return self._directive

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._directive!s})"


class SourceDirectiveBuilder(DirectiveBuilder):
    """Builder for directives that hold a list of source expressions.

    Once ``'none'`` is part of the directive every further :meth:`add` raises
    :class:`InvalidStateException`. Adding ``'none'`` after other sources is
    still accepted.
    """

    def add(self, value: str) -> SourceDirectiveBuilder:
        """Add a source expression to the directive.

        Raises:
            InvalidStateException: The directive already disallows all requests.
        """
        if NONE in self._directive.values:
            raise InvalidStateException(
                "Adding additional values to a directive after disallowing all requests will have no effect.",
                code="CSP_INVALID_STATE",
                context={"directive": self.name, "value": value},
            )
        if value == NONE and self._directive.values:
            logger.warning(
                "csp_disallow_all_after_sources",
                directive=self.name,
                values=list(self._directive.values),
            )
        super().add(value)
        return self

    def allow_eval(self) -> SourceDirectiveBuilder:
        """Allow unsafe evaluation of scripts or styles (``'unsafe-eval'``)."""
        return self.add(UNSAFE_EVAL)

    def allow_from_origin(self, origin: str) -> SourceDirectiveBuilder:
        """Allow everything on *origin*, e.g. ``https://example.com/``."""
        return self.add(origin)

    def allow_from_scheme(self, scheme: str) -> SourceDirectiveBuilder:
        """Allow any resource with *scheme*, e.g. ``data:``."""
        return self.add(scheme)

    def allow_from_self(self) -> SourceDirectiveBuilder:
        """Allow everything on the current origin (``'self'``)."""
        return self.add(SELF)

    def allow_from_url(self, url: str) -> SourceDirectiveBuilder:
        """Allow a single URL, e.g. ``https://example.com/path/to/file.js``."""
        return self.add(url)

    def allow_host(self, host: str) -> SourceDirectiveBuilder:
        """Allow *host* regardless of scheme, e.g. ``*.example.com``."""
        return self.add(host)

    def allow_inline(self) -> SourceDirectiveBuilder:
        """Allow unsafe execution of inline scripts or styles (``'unsafe-inline'``)."""
        return self.add(UNSAFE_INLINE)

    def disallow_all(self) -> SourceDirectiveBuilder:
        """Allow nothing (``'none'``)."""
        return self.add(NONE)

    def dynamic(self) -> SourceDirectiveBuilder:
        """Add the ``'strict-dynamic'`` expression."""
        return self.add(STRICT_DYNAMIC)


class MediaTypeDirectiveBuilder(DirectiveBuilder):
    """Builder for directives that hold a list of media types (``plugin-types``)."""

    def add(self, value: str) -> MediaTypeDirectiveBuilder:
        """Add a media type such as ``application/pdf``."""
        super().add(value)
        return self
