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
"""cspfly: fluent builders for HTTP security response headers.

Content-Security-Policy directives are configured through
:class:`~cspfly.csp.PolicyBuilder`; the remaining headers through the
functions in :mod:`cspfly.headers`. :class:`~cspfly.web.ResponseHeadersMiddleware`
writes the result onto Starlette responses.
"""

from cspfly.csp import (
    Directive,
    DirectiveBuilder,
    MediaTypeDirectiveBuilder,
    PolicyBuilder,
    SourceDirectiveBuilder,
    serialize_directives,
)
from cspfly.headers import (
    ResponseHeadersOptions,
    ResponseHeadersOptionsBuilder,
    add_feature_policy,
    add_frame_options,
    allow_framing_from_origin,
    allow_framing_from_same_origin,
    prevent_content_type_sniffing,
    prevent_framing,
)
from cspfly.kernel import ConfigurationException, CspFlyException, InvalidStateException

__version__ = "0.1.0"

__all__ = [
    "ConfigurationException",
    "CspFlyException",
    "Directive",
    "DirectiveBuilder",
    "InvalidStateException",
    "MediaTypeDirectiveBuilder",
    "PolicyBuilder",
    "ResponseHeadersOptions",
    "ResponseHeadersOptionsBuilder",
    "SourceDirectiveBuilder",
    "__version__",
    "add_feature_policy",
    "add_frame_options",
    "allow_framing_from_origin",
    "allow_framing_from_same_origin",
    "prevent_content_type_sniffing",
    "prevent_framing",
    "serialize_directives",
]
