"""Board and score domain services.

Board creation, score submission and ranking live here, away from the
Flask routes and Socket.IO handlers that call them. All shared state is in
Redis; nothing in this package keeps mutable module state.
"""
