"""
Category Commands
------------------

Commands:
    - add-category: Add a habit or make a hidden one visible again
    - hide-category: Hide a habit, keeping its history
"""
import click

from genee.core.logging_manager import handle_cli_error
from genee.datafile import AddCategoryResult, HideCategoryResult
from . import DIARY_ERRORS, get_diary

ADD_MESSAGES = {
    AddCategoryResult.ADDED_NEW: "✅ Added category '{name}'",
    AddCategoryResult.UNHIDE: "✅ Category '{name}' is visible again",
    AddCategoryResult.ALREADY_PRESENT: "Category '{name}' already exists",
}

HIDE_MESSAGES = {
    HideCategoryResult.HIDDEN: "✅ Hid category '{name}'",
    HideCategoryResult.ALREADY_HIDDEN: "Category '{name}' is already hidden",
    HideCategoryResult.NON_EXISTING_CATEGORY: "⚠️  No category named '{name}'",
}


@click.command("add-category")
@click.argument("name")
@click.pass_context
def add_category(ctx, name):
    """Add category NAME."""
    try:
        result = get_diary(ctx).add_category(name)
        click.echo(ADD_MESSAGES[result].format(name=name.strip()))

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "add_category", additional_context={"name": name})


@click.command("hide-category")
@click.argument("name")
@click.pass_context
def hide_category(ctx, name):
    """Hide category NAME."""
    try:
        result = get_diary(ctx).hide_category(name)
        click.echo(HIDE_MESSAGES[result].format(name=name.strip()))

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "hide_category", additional_context={"name": name})
