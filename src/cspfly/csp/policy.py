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
"""PolicyBuilder: configures a complete Content Security Policy."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import structlog

from cspfly.csp.builders import DirectiveBuilder, MediaTypeDirectiveBuilder, SourceDirectiveBuilder
from cspfly.csp.directive import Directive

logger = structlog.get_logger("cspfly.csp")

DIRECTIVE_SEPARATOR = "; "


def serialize_directives(directives: Iterable[Directive]) -> str:
    """Render *directives* and join them into a header value."""
    return DIRECTIVE_SEPARATOR.join(str(d) for d in directives)


class PolicyBuilder:
    """Provides an API for configuring a Content Security Policy.

    Every well-known fetch and navigation directive is exposed as an attribute
    holding its builder. Anything else can be added with :meth:`add`.

    Usage::

        policy = PolicyBuilder()
        policy.default.allow_from_self()
        policy.scripts.allow_from_self().allow_host("cdn.example.com")
        policy.objects.disallow_all()
        policy.add("upgrade-insecure-requests")
        header_value = policy.to_header_value()
    """

    def __init__(self) -> None:
        # Restricts the URLs which can be used in a document's <base> element.
        self.base_uri = SourceDirectiveBuilder("base-uri")
        # Frames and workers.
        self.child_src = SourceDirectiveBuilder("child-src")
        # fetch(), XHR, <a ping>, WebSocket and EventSource connections.
        self.fetch = SourceDirectiveBuilder("connect-src")
        # Fallback for every fetch directive that is not specified.
        self.default = SourceDirectiveBuilder("default-src")
        self.fonts = SourceDirectiveBuilder("font-src")
        # Targets of form submissions.
        self.form_action = SourceDirectiveBuilder("form-action")
        # Pages that may embed this application.
        self.frame_ancestors = SourceDirectiveBuilder("frame-ancestors")
        self.frames = SourceDirectiveBuilder("frame-src")
        self.images = SourceDirectiveBuilder("img-src")
        self.manifests = SourceDirectiveBuilder("manifest-src")
        # Video, audio and associated text tracks.
        self.media = SourceDirectiveBuilder("media-src")
        # Plugin content (<object>, <embed>, <applet>).
        self.objects = SourceDirectiveBuilder("object-src")
        self.plugin_types = MediaTypeDirectiveBuilder("plugin-types")
        # Prefetched or prerendered resources.
        self.prefetch = SourceDirectiveBuilder("prefetch-src")
        self.scripts = SourceDirectiveBuilder("script-src")
        self.styles = SourceDirectiveBuilder("style-src")
        # Worker, shared worker and service worker scripts.
        self.workers = SourceDirectiveBuilder("worker-src")

        self._named: list[tuple[str, DirectiveBuilder]] = [
            ("base_uri", self.base_uri),
            ("child_src", self.child_src),
            ("fetch", self.fetch),
            ("default", self.default),
            ("fonts", self.fonts),
            ("form_action", self.form_action),
            ("frame_ancestors", self.frame_ancestors),
            ("frames", self.frames),
            ("images", self.images),
            ("manifests", self.manifests),
            ("media", self.media),
            ("objects", self.objects),
            ("plugin_types", self.plugin_types),
            ("prefetch", self.prefetch),
            ("scripts", self.scripts),
            ("styles", self.styles),
            ("workers", self.workers),
        ]
        self._custom: list[Directive] = []

    def named_builders(self) -> list[tuple[str, DirectiveBuilder]]:
        """Return the ``(attribute, builder)`` pairs of the well-known directives."""
        return list(self._named)

    def builder_for(self, directive_name: str) -> DirectiveBuilder | None:
        """Return the well-known builder for *directive_name*, if there is one."""
        for _, builder in self._named:
            if builder.name == directive_name:
                return builder
        return None

    @property
    def custom_directives(self) -> list[Directive]:
        return list(self._custom)

    def add(
        self,
        directive: str | Directive,
        configure: Callable[[SourceDirectiveBuilder], Any] | None = None,
    ) -> PolicyBuilder:
        """Add a custom directive.

        Args:
            directive: The name of a directive to configure, or a directive
                that was already built.
            configure: Called once with a fresh :class:`SourceDirectiveBuilder`
                to specify the directive's values. Omit it for directives
                without values, such as ``upgrade-insecure-requests``.

        Returns:
            This builder.
        """
        if isinstance(directive, Directive):
            if configure is not None:
                raise TypeError("configure cannot be combined with an already built Directive")
            self._custom.append(directive)
            return self

        builder = SourceDirectiveBuilder(directive)
        if configure is not None:
            configure(builder)
        built = builder.build()
        logger.debug("csp_custom_directive_added", directive=built.name, values=list(built.values))
        self._custom.append(built)
        return self

    def build(self) -> list[Directive]:
        """Return the well-known directives followed by the custom ones.

        Well-known directives are always present, even without values.
        """
        return [builder.build() for _, builder in self._named] + list(self._custom)

    def to_header_value(self) -> str:
        """Serialize the policy into a ``Content-Security-Policy`` header value.

        Well-known directives without values are left out; custom directives
        are always written since many of them are plain flags.
        """
        directives = [d for d in (b.build() for _, b in self._named) if d.values]
        return serialize_directives([*directives, *self._custom])
