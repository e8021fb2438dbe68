from flask_socketio import join_room, leave_room, emit
from leaderboard import socketio
from leaderboard.services.naming import canonicalize


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def _room_for(data):
    board = (data or {}).get('board')
    if not board or not isinstance(board, str):
        emit('error', {'message': 'board is required'})
        return None
    return f"board:{canonicalize(board)}"


def handle_watch_board(data):
    """Subscribe the socket to score_update events of one board."""
    room = _room_for(data)
    if room is None:
        return
    join_room(room)
    emit('watching', {'room': room})


def handle_unwatch_board(data):
    room = _room_for(data)
    if room is None:
        return
    leave_room(room)
    emit('unwatched', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    handlers = {
        'connect': handle_connect,
        'watch_board': handle_watch_board,
        'unwatch_board': handle_unwatch_board,
        'ping': handle_ping,
    }
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        for event, handler in handlers.items():
            socketio.on_event(event, handler, namespace=namespace)
