from click import option

from nodian.cli.base import cli


@cli.command
@option('-d', '--debug', is_flag=True, help='Run Flask in debug mode')
@option('-D', '--db-path', help='Path to the events SQLite DB')
@option('-h', '--host', default='127.0.0.1', help='Interface to bind; default: 127.0.0.1')
@option('-p', '--port', type=int, default=5001, help='Port to listen on; default: 5001')
def serve(debug: bool, db_path: str | None, host: str, port: int):
    """Serve the workspace and event APIs over HTTP."""
    from nodian import server
    if db_path:
        server.DB_PATH = db_path
    server.main(host=host, port=port, debug=debug)
