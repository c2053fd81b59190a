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
"""Tests for the cspfly CLI."""

from pathlib import Path

from click.testing import CliRunner

from cspfly.cli.main import cli


def _write_config(tmp_path: Path) -> Path:
    config_file = tmp_path / "headers.yaml"
    config_file.write_text(
        "cspfly:\n"
        "  headers:\n"
        "    frame_options: SAMEORIGIN\n"
        "    content_security_policy:\n"
        "      directives:\n"
        "        default-src: [\"'self'\"]\n"
        "        upgrade-insecure-requests: []\n"
    )
    return config_file


class TestCLI:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "render" in result.output

    def test_render_plain(self, tmp_path: Path):
        config_file = _write_config(tmp_path)
        result = CliRunner().invoke(cli, ["render", "--config", str(config_file), "--format", "plain"])

        assert result.exit_code == 0, result.output
        assert "X-Content-Type-Options: nosniff" in result.output
        assert "X-Frame-Options: SAMEORIGIN" in result.output
        assert "Content-Security-Policy: default-src 'self'; upgrade-insecure-requests" in result.output

    def test_render_table(self, tmp_path: Path):
        config_file = _write_config(tmp_path)
        result = CliRunner().invoke(cli, ["render", "--config", str(config_file)])

        assert result.exit_code == 0, result.output
        assert "X-Frame-Options" in result.output
        assert "SAMEORIGIN" in result.output

    def test_render_profile(self, tmp_path: Path):
        config_file = _write_config(tmp_path)
        (tmp_path / "headers-strict.yaml").write_text("cspfly:\n  headers:\n    frame_options: DENY\n")
        result = CliRunner().invoke(
            cli, ["render", "--config", str(config_file), "--profile", "strict", "--format", "plain"]
        )

        assert result.exit_code == 0, result.output
        assert "X-Frame-Options: DENY" in result.output

    def test_render_invalid_configuration(self, tmp_path: Path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("cspfly:\n  headers:\n    content_security_policy:\n      directives: [oops]\n")
        result = CliRunner().invoke(cli, ["render", "--config", str(config_file)])
        assert result.exit_code == 1
