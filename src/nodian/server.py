from dataclasses import asdict

from flask import Flask, jsonify, request
from flask_cors import CORS
from utz import err

from nodian import clipboard, config, entries, sqla
from nodian.errors import NodianError, PathNotFound
from nodian.tree import get_file_tree

app = Flask(__name__)
CORS(app)

# Ledger location; `None` means "resolve from config on every call"
DB_PATH = None


class MissingParam(NodianError):
    pass


class BadParam(NodianError):
    pass


@app.errorhandler(NodianError)
def handle_error(e: NodianError):
    """Render core errors as plain strings at the API boundary."""
    if isinstance(e, (MissingParam, BadParam)):
        status = 400
    elif isinstance(e, PathNotFound):
        status = 404
    else:
        status = 500
        err(f'{request.method} {request.path}: {e}')
    return jsonify({'error': str(e)}), status


def arg(name: str) -> str:
    value = request.args.get(name)
    if value is None:
        raise MissingParam(f'Missing query parameter: {name}')
    return value


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadParam('Request body must be a JSON object')
    return data


def body(*names: str) -> list:
    """Required string fields of the JSON request body."""
    data = json_body()
    missing = [ name for name in names if name not in data ]
    if missing:
        raise MissingParam(f'Missing JSON field(s): {", ".join(missing)}')
    bad = [ name for name in names if not isinstance(data[name], str) ]
    if bad:
        raise BadParam(f'JSON field(s) must be strings: {", ".join(bad)}')
    return [ data[name] for name in names ]


def ok():
    return jsonify({'success': True})


@app.route('/api/root')
def get_root_folder():
    return jsonify({'path': config.get_root_folder()})


@app.route('/api/tree')
def get_tree():
    """Snapshot the hierarchy under ``path`` (default: workspace root).

    Query params:
        path: Directory to snapshot
        depth: Optional max depth
    """
    path = request.args.get('path') or config.get_root_folder()
    depth = request.args.get('depth', type=int)
    tree = get_file_tree(path, max_depth=depth)
    return jsonify(asdict(tree))


@app.route('/api/file')
def read_file():
    path = arg('path')
    return jsonify({'path': path, 'content': entries.read_file(path)})


@app.route('/api/file', methods=['PUT'])
def write_file():
    path, content = body('path', 'content')
    entries.write_file(path, content)
    return ok()


@app.route('/api/file', methods=['POST'])
def create_file():
    path, = body('path')
    entries.create_file(path)
    return ok()


@app.route('/api/folder', methods=['POST'])
def create_folder():
    path, = body('path')
    entries.create_folder(path)
    return ok()


@app.route('/api/rename', methods=['POST'])
def rename_item():
    old_path, new_path = body('old_path', 'new_path')
    entries.rename_item(old_path, new_path)
    return ok()


@app.route('/api/delete', methods=['POST'])
def delete_item():
    path, = body('path')
    entries.delete_item(path)
    return ok()


@app.route('/api/clipboard')
def get_clipboard_content():
    return jsonify({'content': clipboard.get_clipboard_content()})


@app.route('/api/clipboard', methods=['PUT'])
def set_clipboard_content():
    content, = body('content')
    clipboard.set_clipboard_content(content)
    return ok()


@app.route('/api/events')
def get_events():
    date = arg('date')
    events = sqla.get_events(date, sqlite_path=DB_PATH)
    return jsonify([ asdict(event) for event in events ])


@app.route('/api/events', methods=['POST'])
def add_event():
    title, date = body('title', 'date')
    description = json_body().get('description')
    if description is not None and not isinstance(description, str):
        raise BadParam('JSON field(s) must be strings: description')
    event = sqla.add_event(title, description, date, sqlite_path=DB_PATH)
    return jsonify({'success': True, 'id': event.id})


@app.route('/api/events/<int:id>', methods=['DELETE'])
def delete_event(id: int):
    sqla.delete_event(id, sqlite_path=DB_PATH)
    return ok()


def main(host: str = '127.0.0.1', port: int = 5001, debug: bool = False):
    err(f"Workspace root: {config.get_root_folder()}")
    err(f"Event store: {DB_PATH or config.db_path()}")
    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    main()
