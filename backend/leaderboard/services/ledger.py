import math

import redis
from flask import current_app

from leaderboard.errors import (
    BoardNotFound, InvalidBoardToken, InvalidRequest, ScoreNotFound, UnexpectedStoreState,
)
from leaderboard.store import board_keys, translate_errors
from .auth import credentials_match, get_authorization
from .ordering import SortingOrder
from .registry import get_order


def require_score(value) -> float:
    # bool is an int subclass; JSON true/false is not a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRequest('Score must be a number')
    try:
        value = float(value)
    except OverflowError:
        raise InvalidRequest('Score must be a finite number')
    if not math.isfinite(value):
        raise InvalidRequest('Score must be a finite number')
    return value


def _read_order(client: redis.Redis, name: str, order_key: str) -> SortingOrder:
    with translate_errors('score-order'):
        stored = client.get(order_key)
    try:
        return SortingOrder.from_stored(stored)
    except UnexpectedStoreState as exc:
        exc.detail = f"board={name} has token but order={stored!r}"
        raise


def _current_standing(client: redis.Redis, order: SortingOrder, scores_key: str, player: str):
    with translate_errors('score-read'):
        score = client.zscore(scores_key, player)
        rank = order.rank(client, scores_key, player) if score is not None else None
    return score, rank


def submit_score(client: redis.Redis, board: str, player: str, score: float, headers, scheme: str = 'Bearer') -> dict:
    """Record ``score`` for ``player`` if it beats the stored best.

    ``board`` and ``player`` must already be canonical. Returns the player's
    current (possibly unchanged) score and rank, and whether this submission
    was accepted as the new best.

    The compare-and-write is a single ``ZADD GT|LT CH``, so concurrent
    submissions for one player converge on the best value.
    """
    order_key, token_key, scores_key = board_keys(board)

    with translate_errors('score-token'):
        board_token = client.get(token_key)
    if not board_token:
        current_app.logger.debug(f"[score-submit] board={board} has no token, board does not exist")
        raise BoardNotFound()

    supplied = get_authorization(headers, scheme)
    if not credentials_match(supplied, board_token):
        current_app.logger.warning(f"[score-submit] board={board} token mismatch")
        raise InvalidBoardToken()

    order = _read_order(client, board, order_key)

    current_app.logger.debug(f"[score-submit] board={board} player={player} ZADD {order.zadd_mode} CH {score}")
    with translate_errors('score-zadd'):
        changed = client.zadd(scores_key, {player: score}, ch=True, **order.zadd_flags)

    current, rank = _current_standing(client, order, scores_key, player)
    if current is None or rank is None:
        raise UnexpectedStoreState(detail=f"board={board} player={player} missing after ZADD")

    accepted = changed > 0
    if accepted:
        current_app.logger.info(f"[score-submit] board={board} player={player} new best={current} rank={rank}")
    else:
        current_app.logger.debug(f"[score-submit] board={board} player={player} ignored {score}, best stays {current}")

    return {'score': current, 'rank': rank, 'accepted': accepted}


def get_score(client: redis.Redis, board: str, player: str) -> dict:
    """Current score and zero-based rank of ``player`` on ``board``."""
    order = get_order(client, board)
    _, _, scores_key = board_keys(board)
    current, rank = _current_standing(client, order, scores_key, player)
    if current is None or rank is None:
        raise ScoreNotFound()
    return {'score': current, 'rank': rank}
