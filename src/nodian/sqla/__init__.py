from .db import connect
from .model import Event, add_event, delete_event, get_events
