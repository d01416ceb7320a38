import warnings
from os import environ as env, makedirs, sep
from os.path import abspath, exists, expanduser, isdir, join

from utz import err

from .errors import DegradedDefault, IoError

APP_NAME = 'nodian'
NODIAN_ROOT_VAR = 'NODIAN_ROOT'
NODIAN_DB_VAR = 'NODIAN_DB'
DB_NAME = 'events.db'


def home_dir() -> str:
    home = env.get('HOME') or expanduser('~')
    if not home or home == '~':
        warnings.warn(DegradedDefault(f'Home directory not found, using {sep}'), stacklevel=2)
        err(f'Home directory not found, falling back to {sep}')
        return sep
    return home


def root_path() -> str:
    """Workspace root location, without touching disk."""
    root = env.get(NODIAN_ROOT_VAR)
    if root:
        return abspath(expanduser(root))
    return abspath(join(home_dir(), APP_NAME))


def get_root_folder() -> str:
    """Return the workspace root, creating it (and any missing ancestors) first if necessary."""
    root = root_path()
    if not isdir(root):
        try:
            makedirs(root, exist_ok=True)
        except OSError as e:
            raise IoError.wrap(e, root) from e
        err(f'Created workspace root: {root}')
    return root


def config_dir() -> str:
    home = home_dir()
    config = join(home, '.config')
    if exists(config):
        return join(config, APP_NAME)
    else:
        return join(home, f'.{APP_NAME}')


def db_path() -> str:
    path = env.get(NODIAN_DB_VAR)
    if path:
        return abspath(expanduser(path))
    return join(config_dir(), DB_NAME)
