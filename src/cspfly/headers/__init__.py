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
"""cspfly Headers: response header options and the functions that fill them."""

from cspfly.headers.content_type_options import prevent_content_type_sniffing
from cspfly.headers.feature_policy import add_feature_policy
from cspfly.headers.frame_options import (
    add_frame_options,
    allow_framing_from_origin,
    allow_framing_from_same_origin,
    prevent_framing,
)
from cspfly.headers.options import ResponseHeadersOptions, ResponseHeadersOptionsBuilder

__all__ = [
    "ResponseHeadersOptions",
    "ResponseHeadersOptionsBuilder",
    "add_feature_policy",
    "add_frame_options",
    "allow_framing_from_origin",
    "allow_framing_from_same_origin",
    "prevent_content_type_sniffing",
    "prevent_framing",
]
