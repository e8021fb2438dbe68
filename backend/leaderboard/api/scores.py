from flask import Blueprint, current_app, request

from leaderboard import socketio
from leaderboard.errors import InvalidRequest, success
from leaderboard.services.ledger import get_score, require_score, submit_score
from leaderboard.services.registry import require_name
from leaderboard.store import get_client

scores = Blueprint('scores', __name__)


def _names():
    board = require_name(request.args.get('board'))
    player = require_name(request.args.get('player'), 'player')
    return board, player


def _score_from_body():
    data = request.get_json(silent=True)
    # Accept a bare JSON number or {"score": n}
    if isinstance(data, dict):
        if 'score' not in data:
            raise InvalidRequest('Score must be a number')
        data = data['score']
    return require_score(data)


@scores.route('/', methods=['GET'])
def get():
    board, player = _names()
    return success(get_score(get_client(), board, player))


@scores.route('/', methods=['PUT'])
def put():
    board, player = _names()
    score = _score_from_body()

    result = submit_score(
        get_client(), board, player, score, request.headers,
        scheme=current_app.config.get('BOARD_AUTH_SCHEME', 'Bearer'),
    )

    if result['accepted']:
        # Live update for clients watching the board
        socketio.emit('score_update', {
            'board': board,
            'player': player,
            'score': result['score'],
            'rank': result['rank'],
        }, to=f"board:{board}", namespace='/ws')
        return success(result, 201)
    return success(result, 200)
