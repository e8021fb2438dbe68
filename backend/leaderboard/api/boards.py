from flask import Blueprint, current_app, request

from leaderboard.errors import InvalidRequest, success
from leaderboard.services.ordering import SortingOrder
from leaderboard.services.registry import (
    authorize_creation, create_board, describe_board, list_scores, require_name,
)
from leaderboard.store import get_client

boards = Blueprint('boards', __name__)


def _int_arg(name, default):
    raw = request.args.get(name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidRequest(f"{name} must be an integer")


@boards.route('/', methods=['POST'])
def create():
    """Create a board. The token in the response is never shown again."""
    authorize_creation(request.headers, current_app.config)

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest('Expected a JSON object with name and order')
    name = require_name(data.get('name'))
    order = SortingOrder.from_code(data.get('order'))

    board = create_board(get_client(), name, order)
    return success(board, 201)


@boards.route('/', methods=['GET'])
def list_board():
    name = require_name(request.args.get('board'))
    offset = _int_arg('offset', 0)
    size = _int_arg('size', 100)
    page = list_scores(
        get_client(), name, offset, size,
        max_size=current_app.config.get('MAX_PAGE_SIZE', 500),
    )
    return success(page)


@boards.route('/<string:name>', methods=['GET'])
def describe(name):
    return success(describe_board(get_client(), require_name(name)))
