# viewkit/cli/interface.py
import json
from pathlib import Path
from typing import Any, Optional, Tuple

import click
from click_option_group import optgroup
from rich.console import Console as RichConsole
from rich.table import Table
import structlog

from viewkit import __version__ as app_version
from viewkit.config import OptionsHost, apply_config, load_and_merge_configs, select_profile
from viewkit.core.discovery import try_require
from viewkit.core.matching import MatchOptions, match_key, match_keys
from viewkit.core.templating import get_locals
from viewkit.exceptions import ViewkitError
from viewkit.logging_setup import configure_logging

log = structlog.get_logger(__name__)

def _to_json(value: Any) -> str:
    return json.dumps(value, indent=2, sort_keys=False, default=repr)

def _load_mapping_file(file_path: Path) -> dict:
    data = try_require(file_path)
    if not isinstance(data, dict):
        raise click.ClickException(f"{file_path} does not contain a JSON or TOML mapping.")
    return data

def _parse_json_option(raw: Optional[str], option_name: str) -> Optional[dict]:
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint=option_name)
    if not isinstance(value, dict):
        raise click.BadParameter("expected a JSON object.", param_hint=option_name)
    return value


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@click.option("--json-logs", "json_logs", is_flag=True, default=False, help="Emit log records as JSON.")
@click.version_option(version=app_version, package_name="viewkit", prog_name="viewkit", help="Show version and exit.")
@click.pass_context
def main_cli_group(ctx: click.Context, verbosity_level: int, json_logs: bool):
    """viewkit: inspect key matching, helper locals and option
    configuration used by template rendering pipelines."""
    log_level = "warning"
    if verbosity_level == 1: log_level = "info"
    elif verbosity_level >= 2: log_level = "debug"
    configure_logging(log_level, json_logs=json_logs)
    ctx.ensure_object(dict)


@main_cli_group.command("match")
@click.argument("mapping_file", type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path))
@click.argument("patterns", nargs=-1, required=True)
@optgroup.group("Matching Options", help="How keys are compared against the patterns.")
@optgroup.option("--ignore-case", "ignore_case", is_flag=True, default=False, help="Compare keys case-insensitively.")
@optgroup.option("--basename", "basename", is_flag=True, default=False, help="Match only the last path segment of each key.")
@optgroup.group("Output Options", help="What to print for the matched entries.")
@optgroup.option("--first", "first_only", is_flag=True, default=False, help="Print only the value of the first matching key.")
@optgroup.option("--table", "as_table", is_flag=True, default=False, help="Print matched keys as a table.")
def match_command(mapping_file: Path, patterns: Tuple[str, ...], ignore_case: bool, basename: bool,
                  first_only: bool, as_table: bool):
    """Match PATTERNS against the keys of a JSON or TOML MAPPING_FILE."""
    mapping = _load_mapping_file(mapping_file)
    options = MatchOptions(ignore_case=ignore_case, basename=basename)
    try:
        if first_only:
            value = match_key(mapping, list(patterns), options)
            if value is None:
                raise click.ClickException(f"no key matches {', '.join(patterns)}")
            click.echo(_to_json(value))
            return
        matched = match_keys(mapping, list(patterns), options)
    except ViewkitError as e:
        raise click.ClickException(str(e))

    if as_table:
        table = Table(title=f"keys matching {', '.join(patterns)}")
        table.add_column("key")
        table.add_column("value")
        for key, value in matched.items():
            table.add_row(key, json.dumps(value, default=repr))
        RichConsole().print(table)
        return
    click.echo(_to_json(matched))


@main_cli_group.command("locals")
@click.option("--locals", "locals_json", default=None, metavar="JSON", help="Helper locals as a JSON object.")
@click.option("--options", "options_json", default=None, metavar="JSON", help="Helper invocation options as a JSON object.")
def locals_command(locals_json: Optional[str], options_json: Optional[str]):
    """Print the render context a helper would receive."""
    context = get_locals(
        _parse_json_option(locals_json, "--locals"),
        _parse_json_option(options_json, "--options"),
    )
    click.echo(_to_json(context))


@main_cli_group.command("rename")
@click.argument("paths", nargs=-1, required=True)
def rename_command(paths: Tuple[str, ...]):
    """Print the lookup key the default rename transform gives each path."""
    host = OptionsHost()
    for path in paths:
        click.echo(f"{path}\t{host.rename_key(path)}")


@main_cli_group.command("options")
@click.option("--config-profile", "profile_name", default=None, help="Overlay a profile from the config file(s).")
def options_command(profile_name: Optional[str]):
    """Print the options a host gets from the TOML configuration files."""
    try:
        config_data = select_profile(load_and_merge_configs(), profile_name)
    except ViewkitError as e:
        raise click.ClickException(str(e))
    host = apply_config(OptionsHost(), config_data)
    printable = {k: v for k, v in host.options.items() if not callable(v)}
    click.echo(_to_json(printable))
