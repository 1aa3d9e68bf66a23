"""contactbook CLI - personal contact manager."""

import json
import logging
import sys
from functools import wraps

import click

from . import workflows
from .adapters.json_storage import person_to_dict
from .config import load_config
from .core.errors import ValidationError
from .core.person import Person


def _run(func):
    """Load the model, run the command, save on success, report CommandError."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        config = load_config()
        model = workflows.load_model(config)
        try:
            message = func(model, *args, **kwargs)
        except workflows.CommandError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        workflows.save_model(model)
        if message:
            click.echo(message)

    return wrapper


def _show_persons(persons: tuple[Person, ...], as_json: bool, empty_msg: str) -> None:
    """Shared person display logic."""
    if as_json:
        click.echo(json.dumps([person_to_dict(p) for p in persons], indent=2))
        return

    if not persons:
        click.echo(empty_msg)
        return

    for i, person in enumerate(persons, start=1):
        click.echo(f"{i:3}. {person}")
        for j, reminder in enumerate(person.reminders, start=1):
            click.echo(f"       {j}) {reminder}")


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """contactbook - personal contact manager."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_command(as_json: bool):
    """List active persons."""
    model = workflows.load_model(load_config())
    _show_persons(workflows.list_persons(model), as_json, "No persons.")


@main.command("archivelist")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def archivelist(as_json: bool):
    """List archived persons."""
    model = workflows.load_model(load_config())
    _show_persons(workflows.list_archived(model), as_json, "No archived persons.")


@main.command()
@click.argument("name")
@click.option("--phone", "-p", default="", help="Phone number")
@click.option("--email", "-e", default="", help="Email address")
@click.option("--address", "-a", default="", help="Address")
@click.option("--tag", "-t", "tags", multiple=True, help="Tag (repeatable)")
@_run
def add(model, name: str, phone: str, email: str, address: str, tags: tuple[str, ...]):
    """Add a person."""
    try:
        person = Person(name=name, phone=phone, email=email, address=address, tags=list(tags))
    except ValidationError as e:
        raise workflows.CommandError(str(e)) from e
    return workflows.add_person(model, person)


@main.command()
@click.argument("index", type=int)
@click.option("--name", "-n", default=None, help="New name")
@click.option("--phone", "-p", default=None, help="New phone number")
@click.option("--email", "-e", default=None, help="New email address")
@click.option("--address", "-a", default=None, help="New address")
@click.option("--tag", "-t", "tags", multiple=True, help="Replace tags (repeatable)")
@_run
def edit(model, index: int, name, phone, email, address, tags: tuple[str, ...]):
    """Edit the person at INDEX in the active list."""
    changes = {
        key: value
        for key, value in {"name": name, "phone": phone, "email": email, "address": address}.items()
        if value is not None
    }
    if tags:
        changes["tags"] = list(tags)
    if not changes:
        raise workflows.CommandError("At least one field to edit must be provided.")
    return workflows.edit_person(model, index, **changes)


@main.command()
@click.argument("index", type=int)
@_run
def delete(model, index: int):
    """Delete the person at INDEX in the active list."""
    return workflows.delete_person(model, index)


@main.command()
@click.argument("index", type=int)
@_run
def archive(model, index: int):
    """Archive the person at INDEX in the active list."""
    return workflows.archive_person(model, index)


@main.command()
@click.argument("index", type=int)
@_run
def unarchive(model, index: int):
    """Unarchive the person at INDEX in the archived list."""
    return workflows.unarchive_person(model, index)


@main.command()
@click.argument("index", type=int)
@click.argument("header")
@click.option("--by", "deadline", required=True, help="Deadline (YYYY-MM-DD HH:MM)")
@_run
def remind(model, index: int, header: str, deadline: str):
    """Add a reminder to the person at INDEX."""
    return workflows.add_reminder(model, index, header, deadline)


@main.command()
@click.argument("index", type=int)
@click.argument("reminder_index", type=int)
@_run
def unremind(model, index: int, reminder_index: int):
    """Delete reminder REMINDER_INDEX of the person at INDEX."""
    return workflows.delete_reminder(model, index, reminder_index)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def reminders(as_json: bool):
    """Show all reminders, soonest first."""
    model = workflows.load_model(load_config())
    feed = model.general_reminder_list

    if as_json:
        click.echo(
            json.dumps(
                [
                    {"person": p.name, "header": r.header, "deadline": r.deadline_text}
                    for p, r in feed
                ],
                indent=2,
            )
        )
        return

    if not feed:
        click.echo("No reminders.")
        return

    for person, reminder in feed:
        click.echo(f"{reminder.deadline_text}  {reminder.header} ({person.name})")


if __name__ == "__main__":
    main()
