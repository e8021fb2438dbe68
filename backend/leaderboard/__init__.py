from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.exceptions import HTTPException
import click
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config, redis_client=None):
    """Build the application.

    ``redis_client`` replaces the client built from ``REDIS_URL``; tests pass
    an in-memory fake here.
    """
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    origins = flask_app.config.get('CORS_ORIGINS') or '*'
    if origins == ['*']:
        origins = '*'
    CORS(flask_app, origins=origins)

    from leaderboard.store import create_client
    flask_app.extensions['redis'] = redis_client if redis_client is not None else create_client(flask_app.config)

    socketio.init_app(flask_app, cors_allowed_origins=origins)

    from leaderboard.main import main
    flask_app.register_blueprint(main)

    from leaderboard.api.boards import boards
    flask_app.register_blueprint(boards, url_prefix='/board')

    from leaderboard.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/score')

    from leaderboard.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    from leaderboard.errors import LeaderboardError, failure

    @flask_app.errorhandler(LeaderboardError)
    def handle_leaderboard_error(exc):
        # the one place server-side failures are logged
        if exc.status_code >= 500:
            flask_app.logger.error(
                f"[server-error] status={exc.status_code} error={type(exc).__name__} detail={exc.detail or exc.message}"
            )
        return exc.to_response()

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return failure(exc.description or exc.name, exc.code or 500)

    @click.command('create-board')
    @click.argument('name')
    @click.argument('order', type=click.Choice(['ASC', 'DSC']))
    def create_board_command(name, order):
        """Create a board without the creation token and print its token."""
        from leaderboard.services.ordering import SortingOrder
        from leaderboard.services.registry import create_board, require_name
        with flask_app.app_context():
            try:
                board = create_board(flask_app.extensions['redis'], require_name(name), SortingOrder(order))
            except LeaderboardError as exc:
                raise click.ClickException(exc.message)
        click.echo(f"Created board {board['name']} ({board['order']})")
        click.echo(f"Token: {board['token']}")

    @click.command('ping-store')
    def ping_store_command():
        """Check that Redis answers PING."""
        from leaderboard.store import ping
        with flask_app.app_context():
            try:
                ok = ping(flask_app.extensions['redis'])
            except LeaderboardError as exc:
                raise click.ClickException(exc.message)
        click.echo('Redis is reachable' if ok else 'Redis gave an unexpected response')

    flask_app.cli.add_command(create_board_command)
    flask_app.cli.add_command(ping_store_command)

    return flask_app
