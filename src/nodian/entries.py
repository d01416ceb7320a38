from contextlib import contextmanager
from os import makedirs, remove, rename
from os.path import isdir, islink
import shutil

from .errors import IoError


@contextmanager
def surface(path: str):
    """Re-raise OS and decoding failures as `IoError` (or `PathNotFound`)."""
    try:
        yield
    except (OSError, UnicodeError) as e:
        raise IoError.wrap(e, path) from e


def read_file(path: str) -> str:
    with surface(path), open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def write_file(path: str, content: str):
    # Encode first; opening with 'wb' truncates
    with surface(path):
        data = content.encode('utf-8')
        with open(path, 'wb') as f:
            f.write(data)


def create_folder(path: str):
    with surface(path):
        makedirs(path, exist_ok=True)


def create_file(path: str):
    # Truncates an existing file, like the OS "create" primitive
    with surface(path), open(path, 'w', encoding='utf-8'):
        pass


def rename_item(old_path: str, new_path: str):
    with surface(old_path):
        rename(old_path, new_path)


def delete_item(path: str):
    """Delete ``path``; directories are removed recursively, with no confirmation or undo."""
    with surface(path):
        if isdir(path) and not islink(path):
            shutil.rmtree(path)
        else:
            remove(path)
