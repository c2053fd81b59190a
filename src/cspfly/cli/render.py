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
"""'cspfly render': Print the response headers a configuration produces."""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from cspfly.cli.console import console
from cspfly.config.auto import header_options_from_config
from cspfly.core.config import Config
from cspfly.kernel.exceptions import CspFlyException
from cspfly.logging.structlog_adapter import StructlogAdapter


def _load_config(path: Path | None, profiles: tuple[str, ...]) -> Config:
    if path is None:
        return Config.from_sources(Path.cwd(), active_profiles=list(profiles))
    return Config.from_file(path, active_profiles=list(profiles))


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (defaults to cspfly.yaml/cspfly.toml in the current directory).",
)
@click.option("--profile", "profiles", multiple=True, help="Active profile overlay (repeatable).")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "plain"]),
    default="table",
    show_default=True,
    help="Output format.",
)
def render_command(config_path: Path | None, profiles: tuple[str, ...], output_format: str) -> None:
    """Render the security response headers defined by the configuration."""
    config = _load_config(config_path, profiles)
    StructlogAdapter().configure(config)

    try:
        options = header_options_from_config(config)
    except CspFlyException as exc:
        console.print(f"[error]Error:[/error] {exc}")
        raise SystemExit(1) from exc

    if output_format == "plain":
        for name, value in options:
            click.echo(f"{name}: {value}")
        return

    table = Table(title="[cspfly]Response Headers[/cspfly]", border_style="dim")
    table.add_column("Header", style="info", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for name, value in options:
        table.add_row(name, value)
    console.print(table)

    if config.loaded_sources:
        console.print(f"  [dim]Sources: {', '.join(config.loaded_sources)}[/dim]")
