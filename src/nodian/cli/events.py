import json

from click import argument, echo, option

from nodian.cli.base import cli, surface
from nodian.json import Encoder
from nodian.sqla import add_event as _add_event, delete_event, get_events

db_path_opt = option('-D', '--db-path', help='Path to the events SQLite DB; default: $NODIAN_DB, or events.db in the nodian config dir')


@cli.command
@db_path_opt
@argument('date')
def events(db_path: str | None, date: str):
    """Print events on DATE, one JSON object per line."""
    with surface():
        rows = get_events(date, sqlite_path=db_path)
    for event in rows:
        echo(json.dumps(event, cls=Encoder))


@cli.command('add-event')
@db_path_opt
@option('-d', '--description', help='Event description')
@argument('date')
@argument('title')
def add_event(db_path: str | None, description: str | None, date: str, title: str):
    """Add an event titled TITLE on DATE, and print its id."""
    with surface():
        event = _add_event(title, description, date, sqlite_path=db_path)
    echo(event.id)


@cli.command('rm-event')
@db_path_opt
@argument('id', type=int)
def rm_event(db_path: str | None, id: int):
    """Delete the event with ID (no-op if absent)."""
    with surface():
        delete_event(id, sqlite_path=db_path)
