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
"""Tests for the directive builders."""

import pytest
import structlog
from structlog.testing import capture_logs

from cspfly.csp import builders as builders_module
from cspfly.csp.builders import DirectiveBuilder, MediaTypeDirectiveBuilder, SourceDirectiveBuilder
from cspfly.kernel.exceptions import CspFlyException, InvalidStateException


class TestDirectiveBuilderContract:
    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            DirectiveBuilder("script-src")  # type: ignore[abstract]

    def test_add_returns_builder_for_chaining(self):
        builder = SourceDirectiveBuilder("script-src")
        assert builder.add("'self'") is builder

    def test_build_returns_same_directive(self):
        builder = SourceDirectiveBuilder("script-src")
        assert builder.build() is builder.build()

    def test_mutation_after_build_is_visible(self):
        builder = SourceDirectiveBuilder("script-src")
        directive = builder.build()
        builder.allow_from_self()
        assert directive.values == ["'self'"]

    def test_name(self):
        assert SourceDirectiveBuilder("font-src").name == "font-src"


class TestSourceDirectiveBuilder:
    def test_allow_from_self_renders(self):
        builder = SourceDirectiveBuilder("script-src")
        builder.allow_from_self()
        assert str(builder.build()) == "script-src 'self'"

    @pytest.mark.parametrize(
        ("method", "expected"),
        [
            ("allow_from_self", "'self'"),
            ("allow_inline", "'unsafe-inline'"),
            ("allow_eval", "'unsafe-eval'"),
            ("dynamic", "'strict-dynamic'"),
            ("disallow_all", "'none'"),
        ],
    )
    def test_keyword_helpers(self, method, expected):
        builder = SourceDirectiveBuilder("script-src")
        getattr(builder, method)()
        assert builder.build().values == [expected]

    @pytest.mark.parametrize(
        ("method", "argument"),
        [
            ("allow_from_origin", "https://example.com/"),
            ("allow_from_url", "https://example.com/path/to/file.js"),
            ("allow_host", "*.example.com"),
            ("allow_from_scheme", "data:"),
        ],
    )
    def test_literal_helpers_pass_argument_through(self, method, argument):
        builder = SourceDirectiveBuilder("img-src")
        getattr(builder, method)(argument)
        assert builder.build().values == [argument]

    def test_insertion_order_preserved(self):
        builder = SourceDirectiveBuilder("connect-src")
        builder.allow_from_self().allow_host("api.example.com").allow_from_scheme("wss:")
        assert str(builder.build()) == "connect-src 'self' api.example.com wss:"

    def test_values_not_validated(self):
        builder = SourceDirectiveBuilder("script-src")
        builder.allow_from_origin("not a url;")
        assert builder.build().values == ["not a url;"]


class TestDisallowAll:
    def test_add_after_disallow_all_fails(self):
        builder = SourceDirectiveBuilder("object-src")
        builder.disallow_all()
        with pytest.raises(InvalidStateException):
            builder.allow_from_self()

    def test_values_unchanged_after_failed_add(self):
        builder = SourceDirectiveBuilder("object-src")
        builder.disallow_all()
        with pytest.raises(InvalidStateException):
            builder.allow_from_self()
        assert builder.build().values == ["'none'"]

    def test_disallow_all_twice_fails(self):
        builder = SourceDirectiveBuilder("object-src").disallow_all()
        with pytest.raises(InvalidStateException):
            builder.disallow_all()

    def test_error_carries_code_and_context(self):
        builder = SourceDirectiveBuilder("object-src").disallow_all()
        with pytest.raises(InvalidStateException) as exc_info:
            builder.add("https://example.com")
        assert isinstance(exc_info.value, CspFlyException)
        assert exc_info.value.code == "CSP_INVALID_STATE"
        assert exc_info.value.context == {"directive": "object-src", "value": "https://example.com"}
        assert "disallowing all requests" in str(exc_info.value)

    def test_disallow_all_after_other_values_is_accepted(self):
        builder = SourceDirectiveBuilder("script-src")
        builder.allow_from_self().disallow_all()
        assert builder.build().values == ["'self'", "'none'"]

    def test_disallow_all_after_other_values_warns(self, monkeypatch: pytest.MonkeyPatch):
        with capture_logs() as logs:
            monkeypatch.setattr(builders_module, "logger", structlog.get_logger("cspfly.csp"))
            SourceDirectiveBuilder("script-src").allow_from_self().disallow_all()

        warnings = [e for e in logs if e["event"] == "csp_disallow_all_after_sources"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert warnings[0]["directive"] == "script-src"
        assert warnings[0]["values"] == ["'self'"]

    def test_disallow_all_first_does_not_warn(self, monkeypatch: pytest.MonkeyPatch):
        with capture_logs() as logs:
            monkeypatch.setattr(builders_module, "logger", structlog.get_logger("cspfly.csp"))
            SourceDirectiveBuilder("object-src").disallow_all()

        assert [e for e in logs if e["event"] == "csp_disallow_all_after_sources"] == []


class TestMediaTypeDirectiveBuilder:
    def test_add_media_type(self):
        builder = MediaTypeDirectiveBuilder("plugin-types")
        assert builder.add("application/pdf") is builder
        assert str(builder.build()) == "plugin-types application/pdf"

    def test_none_literal_is_not_exclusive(self):
        builder = MediaTypeDirectiveBuilder("plugin-types")
        builder.add("'none'").add("application/pdf")
        assert builder.build().values == ["'none'", "application/pdf"]
