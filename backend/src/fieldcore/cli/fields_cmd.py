"""Field CLI commands — check and simulate."""

import json
from pathlib import Path

import click

from fieldcore.config.loader import FieldConfigLoader
from fieldcore.config.schema import validate_fields_file
from fieldcore.errors import ConfigurationError
from fieldcore.fields.scheduling import PostFrameQueue

_FILE_ARG = click.argument(
    "path",
    envvar="FIELDCORE_FIELDS_PATH",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


def _load(path: Path) -> FieldConfigLoader:
    """Schema-check and load a definition file, exiting on any problem."""
    issues = validate_fields_file(path)
    for issue in issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    errors = [i for i in issues if i.severity == "error"]
    if errors:
        click.echo(click.style(f"\n{len(errors)} schema error(s) found", fg="red", bold=True))
        raise SystemExit(1)

    loader = FieldConfigLoader(path)
    try:
        loader.load()
        # Building resolves validator references
        for name in loader.list_fields():
            loader.build_field(name)
    except ConfigurationError as e:
        click.echo(click.style(f"Semantic validation failed: {e}", fg="red"), err=True)
        raise SystemExit(1)
    return loader


@click.group()
def fields():
    """Field definition commands."""
    pass


@fields.command()
@_FILE_ARG
def check(path: Path):
    """Validate a field definition YAML file."""
    loader = _load(path)

    names = loader.list_fields()
    click.echo(f"Loaded {len(names)} field(s):")
    for name in names:
        definition = loader.get_field(name)
        click.echo(
            f"  ✓ {name} ({definition.kind.value}, "
            f"{len(definition.pre_validators)} pre-validator(s), "
            f"{len(definition.rules)} rule(s))"
        )

    click.echo(click.style("\nAll field definitions are valid.", fg="green", bold=True))


@fields.command()
@_FILE_ARG
@click.option("--field", "field_name", required=True, help="Field to drive.")
@click.option(
    "--deferred",
    is_flag=True,
    default=False,
    help="Post reverts to a frame queue and drain it after each event.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit JSON.")
@click.argument("events", nargs=-1, required=True)
def simulate(path: Path, field_name: str, deferred: bool, as_json: bool, events: tuple[str, ...]):
    """Replay EVENTS through a field and show its state after each one.

    Events: focus, blur, type:<text>, external:<value>.
    """
    loader = _load(path)
    if loader.get_field(field_name) is None:
        click.echo(f"Error: unknown field '{field_name}'", err=True)
        raise SystemExit(1)

    errors: list[str] = []
    queue = PostFrameQueue() if deferred else None
    configured = loader.build_field(field_name, on_error=errors.append, scheduler=queue)
    engine = configured.engine

    steps = []
    for event in events:
        kind, _, arg = event.partition(":")
        errors.clear()

        if kind == "focus":
            result = engine.focus_gained()
        elif kind == "blur":
            result = engine.focus_lost()
        elif kind == "type":
            result = engine.text_changed(arg)
        elif kind == "external":
            value = engine.parse_text(arg)
            configured.validator.value = value
            result = engine.external_value_changed(value)
        else:
            click.echo(f"Error: unknown event '{event}'", err=True)
            raise SystemExit(2)

        pending = engine.has_pending_revert
        if queue is not None:
            queue.flush()

        steps.append(
            {
                "event": event,
                "result": result.to_dict() if result is not None else None,
                "errors": list(errors),
                "revertDeferred": pending,
                "value": configured.validator.value,
                "state": engine.snapshot().to_dict(),
            }
        )

    if as_json:
        click.echo(json.dumps(steps, indent=2, ensure_ascii=False))
        return

    for i, step in enumerate(steps, 1):
        state = step["state"]
        click.echo(
            f"{i:>3}. {step['event']:<20} text={state['displayedText']!r} "
            f"state={state['state']} value={step['value']!r}"
        )
        for message in step["errors"]:
            click.echo(click.style(f"       ! {message}", fg="yellow"))
