from os import strerror


class NodianError(Exception):
    """Base class for errors surfaced by workspace and ledger operations."""


class IoError(NodianError):
    """Permission, encoding, cross-device, or other OS-level failure."""

    @classmethod
    def wrap(cls, e: BaseException, path: str | None = None) -> 'IoError':
        if isinstance(e, FileNotFoundError):
            cls = PathNotFound
        if isinstance(e, OSError) and e.errno is not None:
            msg = e.strerror or strerror(e.errno)
            filename = e.filename if e.filename is not None else path
            if e.filename2 is not None:
                return cls(f'{msg}: {filename} -> {e.filename2}')
            if filename is not None:
                return cls(f'{msg}: {filename}')
            return cls(msg)
        if path is not None:
            return cls(f'{e}: {path}')
        return cls(str(e))


class PathNotFound(IoError):
    """Operation targets a path that does not exist."""


class StoreError(NodianError):
    """Event ledger open or query failure."""


class DegradedDefault(UserWarning):
    """Non-fatal fallback, e.g. the home directory could not be resolved."""
