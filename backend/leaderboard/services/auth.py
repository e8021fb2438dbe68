import hmac
import re

from flask import current_app

from leaderboard.errors import MalformedCredential, MissingCredential


def get_authorization(headers, scheme: str) -> str:
    """Return the token of an ``Authorization: <scheme> <token>`` header.

    Only extracts. Comparing the token against a board or creation secret,
    and choosing between 403 and 404, is up to the caller.
    """
    value = headers.get('Authorization')
    if value is None:
        current_app.logger.debug(f"[auth] no Authorization header (scheme={scheme})")
        raise MissingCredential()

    match = re.fullmatch(rf"{re.escape(scheme)} (\S+)", value.strip())
    if not match:
        current_app.logger.debug(f"[auth] Authorization header does not match scheme={scheme}")
        raise MalformedCredential()
    return match.group(1)


def credentials_match(supplied: str, expected: str) -> bool:
    if not expected:
        return False
    return hmac.compare_digest(supplied.encode('utf-8'), expected.encode('utf-8'))
