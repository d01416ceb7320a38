import sys
from contextlib import contextmanager

from click import echo, group

from nodian.errors import NodianError


@group('nodian')
def cli():
    """Note workspace tree and calendar event ledger."""
    pass


@contextmanager
def surface():
    """Print core errors as plain messages and exit non-zero."""
    try:
        yield
    except NodianError as e:
        echo(str(e), err=True)
        sys.exit(1)
