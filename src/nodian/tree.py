from dataclasses import dataclass, field
from os import scandir, sep
from os.path import abspath, basename, exists, isdir, join, realpath

from utz import err

from .errors import PathNotFound


@dataclass
class FileNode:
    name: str
    path: str
    is_dir: bool
    children: list["FileNode"] = field(default_factory=list)


def normalize(path: str) -> str:
    path = abspath(path)
    if path != sep:
        path = path.rstrip(sep)
    return path


def entry_is_dir(entry) -> bool:
    try:
        return entry.is_dir()
    except OSError as e:
        err(f'Error reading {entry.path}: {e}')
        return False


def build_file_tree(
    path: str,
    is_root: bool = False,
    is_dir: bool | None = None,
    ancestors: frozenset[str] = frozenset(),
    max_depth: int | None = None,
    depth: int = 0,
) -> FileNode:
    """Depth-first, pre-order snapshot of ``path``.

    Directory-read failures are logged and leave that node's ``children`` empty. Symlinked
    directories are followed unless they resolve to a directory already on the current ancestor
    chain, which would otherwise recurse forever.
    """
    name = basename(path) or path
    if is_dir is None:
        is_dir = isdir(path)
    is_dir = is_dir or is_root
    node = FileNode(name=name, path=path, is_dir=is_dir)
    if not is_dir:
        return node
    if max_depth is not None and depth >= max_depth:
        return node

    real = realpath(path)
    if real in ancestors:
        err(f'Skipping symlink cycle: {path} -> {real}')
        return node
    ancestors = ancestors | {real}

    try:
        with scandir(path) as it:
            entries = [ (entry.name, entry_is_dir(entry)) for entry in it ]
    except OSError as e:
        err(f'Error reading directory {path}: {e}')
        return node

    node.children = [
        build_file_tree(
            join(path, child_name),
            is_dir=child_is_dir,
            ancestors=ancestors,
            max_depth=max_depth,
            depth=depth + 1,
        )
        for child_name, child_is_dir in entries
    ]
    return node


def get_file_tree(path: str, max_depth: int | None = None) -> FileNode:
    """Snapshot the hierarchy under ``path``; the top node is always marked as a directory."""
    if not exists(path):
        raise PathNotFound(f'Path does not exist: {path}')
    path = normalize(path)
    return build_file_tree(path, is_root=True, max_depth=max_depth)
