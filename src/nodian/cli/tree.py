import json

from click import argument, echo, option

from nodian.cli.base import cli, surface
from nodian.config import get_root_folder
from nodian.json import Encoder
from nodian.tree import FileNode, get_file_tree


def lines(node: FileNode, indent: str = ''):
    suffix = '/' if node.is_dir else ''
    yield f'{indent}{node.name}{suffix}'
    for child in node.children:
        yield from lines(child, indent + '  ')


@cli.command
def root():
    """Print the workspace root, creating it if necessary."""
    with surface():
        echo(get_root_folder())


@cli.command
@option('-d', '--max-depth', type=int, help='Only descend this many levels below PATH')
@option('-j', '--json', 'as_json', is_flag=True, help='Print the snapshot as JSON')
@argument('path', required=False)
def tree(max_depth: int | None, as_json: bool, path: str | None):
    """Print a snapshot of PATH (default: the workspace root)."""
    with surface():
        path = path or get_root_folder()
        node = get_file_tree(path, max_depth=max_depth)
    if as_json:
        echo(json.dumps(node, cls=Encoder, indent=2))
    else:
        echo('\n'.join(lines(node)))
