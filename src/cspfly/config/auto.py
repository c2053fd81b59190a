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
"""Builds response header options from bound configuration properties."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from cspfly.config.properties.headers import HeadersProperties
from cspfly.core.config import Config
from cspfly.csp.builders import DirectiveBuilder
from cspfly.csp.policy import PolicyBuilder
from cspfly.headers.content_type_options import prevent_content_type_sniffing
from cspfly.headers.feature_policy import add_feature_policy
from cspfly.headers.frame_options import (
    ALLOW_FROM,
    DENY,
    SAMEORIGIN,
    add_frame_options,
    allow_framing_from_origin,
    allow_framing_from_same_origin,
    prevent_framing,
)
from cspfly.headers.options import ResponseHeadersOptions, ResponseHeadersOptionsBuilder
from cspfly.kernel.exceptions import ConfigurationException

logger = structlog.get_logger("cspfly.config.auto")


def _directive_values(name: str, raw: Any) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return raw.split()
    if isinstance(raw, list | tuple) and all(isinstance(v, str) for v in raw):
        return list(raw)
    raise ConfigurationException(
        f"Values of CSP directive '{name}' must be a string or a list of strings",
        code="CONFIG_INVALID_DIRECTIVE",
        context={"directive": name, "values": raw},
    )


def _apply_frame_options(builder: ResponseHeadersOptionsBuilder, value: str) -> None:
    normalized = value.strip()
    if normalized.upper() == DENY:
        prevent_framing(builder)
    elif normalized.upper() == SAMEORIGIN:
        allow_framing_from_same_origin(builder)
    elif normalized.upper().startswith(f"{ALLOW_FROM} "):
        allow_framing_from_origin(builder, normalized[len(ALLOW_FROM) + 1 :].strip())
    else:
        add_frame_options(builder, value)


def configure_policy(policy: PolicyBuilder, directives: Mapping[str, Any]) -> PolicyBuilder:
    """Apply a ``{directive name: values}`` mapping to *policy*.

    Names of well-known directives go to their builder; anything else is
    added as a custom directive.
    """
    for name, raw in directives.items():
        values = _directive_values(name, raw)
        named: DirectiveBuilder | None = policy.builder_for(name)
        if named is not None:
            for value in values:
                named.add(value)
            continue

        def _configure(builder: DirectiveBuilder, values: list[str] = values) -> None:
            for value in values:
                builder.add(value)

        policy.add(name, _configure)
    return policy


def build_header_options(props: HeadersProperties) -> ResponseHeadersOptions:
    """Turn :class:`HeadersProperties` into the headers to write on each response."""
    builder = ResponseHeadersOptionsBuilder()

    if props.content_type_options:
        prevent_content_type_sniffing(builder)
    if props.frame_options:
        _apply_frame_options(builder, props.frame_options)
    if props.feature_policy:
        add_feature_policy(builder, props.feature_policy)

    csp = props.content_security_policy or {}
    if not isinstance(csp, Mapping):
        raise ConfigurationException(
            "content_security_policy must be a mapping",
            code="CONFIG_INVALID_CSP",
            context={"content_security_policy": csp},
        )
    directives = csp.get("directives") or {}
    if not isinstance(directives, Mapping):
        raise ConfigurationException(
            "content_security_policy.directives must be a mapping of directive name to values",
            code="CONFIG_INVALID_CSP",
            context={"directives": directives},
        )
    report_only = csp.get("report_only", False)
    if isinstance(report_only, str):
        report_only = report_only.lower() in ("true", "1", "yes")

    builder.add_content_security_policy(
        lambda policy: configure_policy(policy, directives),
        report_only=bool(report_only),
    )

    options = builder.build()
    logger.debug("header_options_configured", headers=[name for name, _ in options])
    return options


def header_options_from_config(config: Config) -> ResponseHeadersOptions:
    """Bind :class:`HeadersProperties` from *config* and build the header options."""
    return build_header_options(config.bind(HeadersProperties))
