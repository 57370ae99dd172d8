"""
Configuration Commands
-----------------------

Commands:
    - config show: Print the effective configuration
    - config set: Change and persist one setting

Usage:
    genee config set graph_days 14
"""
import click

from genee.core.config import save_config, set_config_value
from genee.core.exceptions import ConfigError
from genee.core.logging_manager import handle_cli_error
from . import get_config


@click.group()
def config():
    """Show or change settings."""


@config.command()
@click.pass_context
def show(ctx):
    """Print the effective configuration."""
    click.echo(f"# {ctx.obj['config_path']}")
    click.echo(get_config(ctx).to_yaml(), nl=False)


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_value(ctx, key, value):
    """Set KEY to VALUE and save."""
    try:
        updated = set_config_value(get_config(ctx), key, value)
        path = save_config(updated, ctx.obj["config_path"])
        click.echo(f"✅ {key} = {getattr(updated, key)} (saved to {path})")

    except ConfigError as e:
        handle_cli_error(ctx, e, "config_set", additional_context={"key": key})
