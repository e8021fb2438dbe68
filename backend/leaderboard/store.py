from contextlib import contextmanager

import redis
from flask import current_app

from leaderboard.errors import StoreCommandFailed, StoreUnavailable


def create_client(config) -> redis.Redis:
    """Build the shared Redis client for an application.

    The client owns a connection pool and is safe to share between
    concurrent requests.
    """
    timeout = config.get('REDIS_SOCKET_TIMEOUT')
    return redis.Redis.from_url(
        config['REDIS_URL'],
        decode_responses=True,
        socket_timeout=timeout,
        socket_connect_timeout=timeout,
    )


def get_client() -> redis.Redis:
    return current_app.extensions['redis']


def board_keys(name: str):
    """Return the (order, token, scores) keys of a canonical board name."""
    return (
        f"board:{name}:order",
        f"board:{name}:token",
        f"board:{name}:scores",
    )


@contextmanager
def translate_errors(action: str = 'redis command'):
    """Map redis-py exceptions raised inside the block to the error taxonomy.

    WatchError is left alone: callers own its meaning.
    """
    try:
        yield
    except redis.exceptions.WatchError:
        raise
    except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as exc:
        raise StoreUnavailable(detail=f"action={action} error={exc}") from exc
    except redis.exceptions.RedisError as exc:
        raise StoreCommandFailed(detail=f"action={action} error={exc}") from exc


def ping(client: redis.Redis) -> bool:
    with translate_errors('ping'):
        return client.ping() is True
