
from click import argument, echo

from nodian import entries
from nodian.cli.base import cli, surface


@cli.command
@argument('path')
def cat(path: str):
    """Print a note's content."""
    with surface():
        content = entries.read_file(path)
    echo(content, nl=False)


@cli.command
@argument('path')
def mkdir(path: str):
    """Create a folder (and any missing parents)."""
    with surface():
        entries.create_folder(path)


@cli.command
@argument('path')
def touch(path: str):
    """Create an empty note."""
    with surface():
        entries.create_file(path)


@cli.command
@argument('old_path')
@argument('new_path')
def mv(old_path: str, new_path: str):
    """Rename a note or folder."""
    with surface():
        entries.rename_item(old_path, new_path)


@cli.command
@argument('path')
def rm(path: str):
    """Delete a note, or a folder and everything in it."""
    with surface():
        entries.delete_item(path)
