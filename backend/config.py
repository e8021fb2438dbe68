import os


def _flag(name, default):
    return (os.environ.get(name) or default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    REDIS_URL = os.environ.get('REDIS_URL') or os.environ.get('REDIS_CONN_STRING') or 'redis://localhost:6379/0'
    # Store calls slower than this are reported as 504
    REDIS_SOCKET_TIMEOUT = float(os.environ.get('REDIS_SOCKET_TIMEOUT', '5'))
    # Board creation gate. When enabled, POST /board/ needs "<CREATION_AUTH_SCHEME> <CREATION_TOKEN>"
    REQUIRE_CREATION_TOKEN = _flag('REQUIRE_CREATION_TOKEN', 'true')
    CREATION_TOKEN = os.environ.get('CREATION_TOKEN') or ''
    CREATION_AUTH_SCHEME = os.environ.get('CREATION_AUTH_SCHEME') or 'Master'
    BOARD_AUTH_SCHEME = os.environ.get('BOARD_AUTH_SCHEME') or 'Bearer'
    MAX_PAGE_SIZE = 500
    LISTEN_HOST = os.environ.get('LISTEN_HOST') or '127.0.0.1'
    LISTEN_PORT = int(os.environ.get('LISTEN_PORT', '5000'))
    CORS_ORIGINS = [o.strip() for o in (os.environ.get('CORS_ORIGINS') or '*').split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
