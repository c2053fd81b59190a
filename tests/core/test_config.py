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
"""Tests for Config loading, env overrides, placeholders and binding."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from cspfly.core.config import Config, config_properties


class TestConfig:
    def test_get_nested_value(self):
        config = Config({"cspfly": {"headers": {"frame_options": "SAMEORIGIN"}}})
        assert config.get("cspfly.headers.frame_options") == "SAMEORIGIN"

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "default") == "default"

    def test_get_through_non_dict(self):
        assert Config({"a": "scalar"}).get("a.b", 1) == 1

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CSPFLY_HEADERS_FRAME_OPTIONS", "SAMEORIGIN")
        config = Config({"cspfly": {"headers": {"frame_options": "DENY"}}})
        assert config.get("cspfly.headers.frame_options") == "SAMEORIGIN"

    def test_get_section(self):
        config = Config({"cspfly": {"headers": {"feature_policy": "camera 'none'"}}})
        assert config.get_section("cspfly.headers") == {"feature_policy": "camera 'none'"}
        assert config.get_section("cspfly.missing") == {}


class TestPlaceholders:
    def test_env_placeholder(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CDN_HOST", "cdn.example.com")
        config = Config({"csp": {"host": "https://${CDN_HOST}"}})
        assert config.get("csp.host") == "https://cdn.example.com"

    def test_config_reference(self):
        config = Config({"app": {"origin": "https://example.com"}, "csp": {"origin": "${app.origin}"}})
        assert config.get("csp.origin") == "https://example.com"

    def test_default_value(self):
        config = Config({"csp": {"report": "${REPORT_URI_NOT_SET:/csp-report}"}})
        assert config.get("csp.report") == "/csp-report"

    def test_unresolvable_placeholder(self):
        config = Config({"csp": {"report": "${REPORT_URI_NOT_SET}"}})
        with pytest.raises(ValueError):
            config.get("csp.report")

    def test_circular_reference(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError):
            config.get("a")


class TestConfigFiles:
    def test_from_yaml_file_with_defaults(self, tmp_path: Path):
        config_file = tmp_path / "headers.yaml"
        config_file.write_text("cspfly:\n  headers:\n    frame_options: SAMEORIGIN\n")
        config = Config.from_file(config_file)
        assert config.get("cspfly.headers.frame_options") == "SAMEORIGIN"
        assert config.get("cspfly.headers.content_type_options") is True
        assert config.loaded_sources[-1] == str(config_file)

    def test_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "headers.toml"
        config_file.write_text('[cspfly.headers]\nfeature_policy = "camera \'none\'"\n')
        config = Config.from_file(config_file, load_defaults=False)
        assert config.get("cspfly.headers.feature_policy") == "camera 'none'"

    def test_profile_overlay_for_plain_file(self, tmp_path: Path):
        (tmp_path / "headers.yaml").write_text("cspfly:\n  headers:\n    frame_options: DENY\n")
        (tmp_path / "headers-dev.yaml").write_text("cspfly:\n  headers:\n    frame_options: SAMEORIGIN\n")
        config = Config.from_file(tmp_path / "headers.yaml", active_profiles=["dev"], load_defaults=False)
        assert config.get("cspfly.headers.frame_options") == "SAMEORIGIN"

    def test_from_sources_merge_order(self, tmp_path: Path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "cspfly.yaml").write_text(
            "cspfly:\n  headers:\n    frame_options: SAMEORIGIN\n    feature_policy: a\n"
        )
        (tmp_path / "cspfly.yaml").write_text("cspfly:\n  headers:\n    feature_policy: b\n")
        (tmp_path / "cspfly-prod.yaml").write_text("cspfly:\n  headers:\n    frame_options: DENY\n")

        config = Config.from_sources(tmp_path, active_profiles=["prod"])

        assert config.get("cspfly.headers.feature_policy") == "b"
        assert config.get("cspfly.headers.frame_options") == "DENY"
        assert config.get("cspfly.logging.format") == "console"
        assert len(config.loaded_sources) == 4

    def test_conventional_name_uses_sources(self, tmp_path: Path):
        (tmp_path / "cspfly.yaml").write_text("cspfly:\n  headers:\n    feature_policy: x\n")
        config = Config.from_file(tmp_path / "cspfly.yaml", load_defaults=False)
        assert config.get("cspfly.headers.feature_policy") == "x"
        assert config.loaded_sources == [str(tmp_path / "cspfly.yaml")]

    def test_deep_merge_keeps_sibling_keys(self):
        merged = Config._deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}})
        assert merged == {"a": {"b": 1, "c": 3}}


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="app.csp")
        @dataclass
        class CspSettings:
            report_uri: str = "/csp"
            max_age: int = 0
            enforce: bool = True

        config = Config({"app": {"csp": {"report_uri": "/report", "max_age": "60", "enforce": "false"}}})
        settings = config.bind(CspSettings)
        assert settings.report_uri == "/report"
        assert settings.max_age == 60
        assert settings.enforce is False

    def test_bind_uses_defaults(self):
        @config_properties(prefix="app.csp")
        @dataclass
        class CspSettings:
            report_uri: str = "/csp"

        assert Config({}).bind(CspSettings).report_uri == "/csp"

    def test_bind_requires_decorator(self):
        @dataclass
        class Plain:
            value: int = 1

        with pytest.raises(ValueError):
            Config({}).bind(Plain)

    def test_bind_applies_env_override(self, monkeypatch: pytest.MonkeyPatch):
        @config_properties(prefix="app.csp")
        @dataclass
        class CspSettings:
            max_age: int = 0

        monkeypatch.setenv("CSPFLY_APP_CSP_MAX_AGE", "30")
        assert Config({"app": {"csp": {"max_age": 10}}}).bind(CspSettings).max_age == 30

    def test_bind_resolves_nested_placeholders(self, monkeypatch: pytest.MonkeyPatch):
        @config_properties(prefix="app.csp")
        @dataclass
        class CspSettings:
            sources: dict = field(default_factory=dict)

        monkeypatch.setenv("CDN_HOST", "cdn.example.com")
        config = Config({"app": {"csp": {"sources": {"script-src": ["'self'", "${CDN_HOST}"]}}}})
        assert config.bind(CspSettings).sources == {"script-src": ["'self'", "cdn.example.com"]}
