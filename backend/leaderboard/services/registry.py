from typing import Optional

import redis
from flask import current_app

from leaderboard.errors import (
    BoardExists, BoardNotFound, InvalidCreationToken, InvalidRequest,
    UnexpectedStoreState,
)
from leaderboard.store import board_keys, translate_errors
from .auth import credentials_match, get_authorization
from .naming import canonicalize
from .ordering import SortingOrder
from .tokens import generate_token

# Redis sorted-set indexes are signed 64-bit
MAX_INDEX = 2 ** 63 - 1


def require_name(raw, what: str = 'board') -> str:
    """Canonicalize a client supplied name, rejecting empty ones."""
    if not isinstance(raw, str) or not raw:
        raise InvalidRequest(f"A {what} name is required")
    return canonicalize(raw)


def authorize_creation(headers, config) -> None:
    """Check the creation credential when the creation gate is enabled."""
    if not config.get('REQUIRE_CREATION_TOKEN'):
        return
    supplied = get_authorization(headers, config.get('CREATION_AUTH_SCHEME', 'Master'))
    if not credentials_match(supplied, config.get('CREATION_TOKEN') or ''):
        current_app.logger.warning("[board-create] rejected creation credential")
        raise InvalidCreationToken()


def _ensure_key_is_empty(pipe, key: str) -> None:
    if pipe.type(key) != 'none':
        raise BoardExists()


def create_board(client: redis.Redis, name: str, order: SortingOrder) -> dict:
    """Create a board, refusing to overwrite an existing one.

    The emptiness checks run under WATCH, so a competing creator that writes
    any of the keys between our check and EXEC makes the transaction abort;
    that is reported as a conflict, not retried. Boards cannot be deleted
    through the service.
    """
    order_key, token_key, scores_key = board_keys(name)

    with translate_errors('board-create'):
        with client.pipeline() as pipe:
            try:
                pipe.watch(order_key, token_key, scores_key)
                _ensure_key_is_empty(pipe, order_key)
                _ensure_key_is_empty(pipe, token_key)
                _ensure_key_is_empty(pipe, scores_key)

                token = generate_token()

                pipe.multi()
                pipe.set(order_key, order.value)
                pipe.set(token_key, token)
                pipe.execute()
            except BoardExists:
                current_app.logger.warning(f"[board-create] board={name} already exists")
                raise
            except redis.exceptions.WatchError:
                current_app.logger.warning(f"[board-create] board={name} lost creation race")
                raise BoardExists()

    current_app.logger.info(f"[board-create] board={name} order={order.value}")
    return {'name': name, 'order': order.value, 'token': token}


def get_order(client: redis.Redis, name: str) -> SortingOrder:
    """Read a board's sorting order; 404 when the board does not exist."""
    order_key = board_keys(name)[0]
    with translate_errors('board-order'):
        stored: Optional[str] = client.get(order_key)
    if stored is None:
        raise BoardNotFound()
    try:
        return SortingOrder.from_stored(stored)
    except UnexpectedStoreState as exc:
        exc.detail = f"board={name} has unrecognized order {stored!r}"
        raise


def list_scores(client: redis.Redis, name: str, offset: int, size: int, max_size: int = 500) -> dict:
    """Return one page of a board's scores in the board's own order."""
    if size > max_size:
        raise InvalidRequest(f"Cannot request more than {max_size} scores at a time")
    if size < 1:
        raise InvalidRequest('size must be at least 1')
    if offset < 0:
        raise InvalidRequest('offset cannot be negative')
    if offset + size - 1 > MAX_INDEX:
        raise InvalidRequest('offset is out of range')

    order = get_order(client, name)
    _, _, scores_key = board_keys(name)
    with translate_errors('board-list'):
        rows = order.page(client, scores_key, offset, offset + size - 1)

    scores = [{'name': member, 'score': score} for member, score in rows]
    return {'offset': offset + len(scores), 'scores': scores}


def describe_board(client: redis.Redis, name: str) -> dict:
    order = get_order(client, name)
    _, _, scores_key = board_keys(name)
    with translate_errors('board-describe'):
        size = client.zcard(scores_key)
    return {'name': name, 'order': order.value, 'size': size}
