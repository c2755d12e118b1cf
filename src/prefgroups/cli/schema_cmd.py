"""Schema CLI commands - validate, types, render and check."""

import json
from pathlib import Path

import click

from prefgroups.config import SerializerSettings
from prefgroups.core.types import PREFERENCE_TYPES
from prefgroups.jsonc import LexerError, serialize, update_from_string
from prefgroups.schema.loader import SchemaError, SchemaLoader
from prefgroups.schema.validator import validate_schema_file
from prefgroups.stores import PreferenceStore
from prefgroups.validation.presets import register_presets
from prefgroups.validation.registry import PresetRegistry
from prefgroups.validation.types import SetValueError


def _settings() -> SerializerSettings:
    ctx = click.get_current_context()
    return ctx.find_object(SerializerSettings) or SerializerSettings()


def _report_set_value_error(e: SetValueError) -> None:
    click.echo(
        click.style(f"[{e.step_failure.name}] {e}", fg="red"),
        err=True,
    )


def _load_store(schema_path: Path) -> PreferenceStore:
    """Load a schema file, reporting failures and exiting with status 1."""
    try:
        return SchemaLoader(_settings()).load_file(schema_path)
    except SchemaError as e:
        for issue in e.issues:
            click.echo(click.style(str(issue), fg="red"), err=True)
        click.echo(
            click.style(f"\n{len(e.issues)} schema error(s) found", fg="red", bold=True),
            err=True,
        )
        raise SystemExit(1)
    except SetValueError as e:
        _report_set_value_error(e)
        raise SystemExit(1)
    except ValueError as e:
        click.echo(click.style(f"Invalid schema: {e}", fg="red"), err=True)
        raise SystemExit(1)


@click.group()
def schema():
    """Schema commands."""
    pass


@schema.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(schema_path: Path):
    """Validate a YAML schema file against the preference store JSON Schema."""
    issues = validate_schema_file(schema_path)

    for issue in issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    if issues:
        click.echo(click.style(f"\n{len(issues)} schema error(s) found", fg="red", bold=True))
        raise SystemExit(1)

    # Building the store catches unknown presets and rejected values
    store = _load_store(schema_path)
    click.echo(f"Loaded {len(store)} item(s):")
    for name, item in store.items():
        click.echo(f"  ✓ {name} ({item.kind.value})")

    click.echo(click.style("\nSchema is valid.", fg="green", bold=True))


@schema.command("types")
def types_cmd():
    """List preference types and registered validity presets."""
    click.echo("Preference types:")
    for name, ptype in PREFERENCE_TYPES.items():
        click.echo(f"  {name:<10} {ptype.json_type}")

    register_presets()
    click.echo("\nValidity presets:")
    for name in PresetRegistry.list_registered():
        click.echo(f"  {name}")


@click.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    "output_path",
    default=None,
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the document to a file instead of stdout.",
)
def render(schema_path: Path, output_path: Path | None):
    """Write the JSONC settings document for a schema."""
    store = _load_store(schema_path)
    text = serialize(store, _settings())

    if output_path is None:
        click.echo(text)
        return

    output_path.write_text(text + "\n", encoding="utf-8")
    click.echo(click.style(f"Wrote {output_path}", fg="green"), err=True)


@click.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("settings_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(schema_path: Path, settings_path: Path):
    """Load a JSONC settings file into a schema's store and report what changed."""
    store = _load_store(schema_path)

    try:
        changed = update_from_string(store, settings_path.read_text(encoding="utf-8"))
    except SetValueError as e:
        _report_set_value_error(e)
        raise SystemExit(1)
    except (LexerError, json.JSONDecodeError) as e:
        click.echo(click.style(f"Cannot read {settings_path}: {e}", fg="red"), err=True)
        raise SystemExit(1)

    if not changed:
        click.echo("No settings changed.")
    else:
        click.echo(f"Updated {len(changed)} item(s):")
        for name in changed:
            click.echo(f"  ✓ {name}")

    click.echo(click.style("\nSettings are valid.", fg="green", bold=True))
