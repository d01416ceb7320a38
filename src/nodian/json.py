from dataclasses import is_dataclass, asdict
from json import JSONEncoder


class Encoder(JSONEncoder):
    def default(self, o):
        if is_dataclass(o):
            return asdict(o)
        else:
            return super().default(o)
