from flask import Blueprint, current_app

from leaderboard.errors import UnexpectedStoreState
from leaderboard.store import get_client, ping

main = Blueprint('main', __name__)


@main.route('/', methods=['GET'])
def home():
    return '', 204


@main.route('/', methods=['POST'])
def store_health():
    """Send PING to Redis and expect PONG."""
    current_app.logger.debug('[health] pinging redis')
    if not ping(get_client()):
        raise UnexpectedStoreState()
    return '', 204
