"""Error taxonomy shared by the services and the HTTP layer.

Every failure a request can end with is one of these exceptions. Each carries
the HTTP status it maps to; the handlers registered by ``create_app`` turn
them into the ``{"success": false, "message": ...}`` envelope.
"""
from flask import jsonify


class LeaderboardError(Exception):
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None, detail=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        # operator-facing context, logged but never sent to the client
        self.detail = detail

    def to_response(self):
        return failure(self.message, self.status_code)


# Store connectivity and behaviour

class StoreUnavailable(LeaderboardError):
    status_code = 504
    message = 'Could not connect to Redis'


class StoreCommandFailed(LeaderboardError):
    status_code = 502
    message = 'Could not execute Redis command'


class UnexpectedStoreState(LeaderboardError):
    status_code = 500
    message = 'Redis gave an unexpected response'


class TokenGenerationFailed(LeaderboardError):
    status_code = 500
    message = 'Could not generate token'


# Resources

class BoardExists(LeaderboardError):
    status_code = 409
    message = 'Board already exists'


class BoardNotFound(LeaderboardError):
    status_code = 404
    message = 'No such board'


class ScoreNotFound(LeaderboardError):
    status_code = 404
    message = 'No such score'


# Credentials

class MissingCredential(LeaderboardError):
    status_code = 401
    message = 'Missing Authorization header'


class MalformedCredential(LeaderboardError):
    status_code = 401
    message = 'Malformed Authorization header'


class InvalidBoardToken(LeaderboardError):
    status_code = 403
    message = 'Invalid board token'


class InvalidCreationToken(LeaderboardError):
    status_code = 403
    message = 'Invalid creation token'


class InvalidRequest(LeaderboardError):
    status_code = 400
    message = 'Invalid request'


def success(data=None, status_code=200):
    return jsonify({'success': True, 'data': data}), status_code


def failure(message, status_code):
    return jsonify({'success': False, 'message': message}), status_code
