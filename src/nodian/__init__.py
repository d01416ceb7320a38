from .errors import DegradedDefault, IoError, NodianError, PathNotFound, StoreError
from .tree import FileNode, get_file_tree
