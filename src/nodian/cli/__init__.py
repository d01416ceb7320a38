from .base import cli
from . import entries, events, serve, tree
