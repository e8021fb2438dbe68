import os
import string
import struct

from leaderboard.errors import TokenGenerationFailed

TOKEN_CHARS = string.digits + string.ascii_uppercase + string.ascii_lowercase
TOKEN_LENGTH = 16


def generate_token(length: int = TOKEN_LENGTH) -> str:
    """Generate a base-62 board token from the OS CSPRNG.

    Each symbol is a random 32-bit word reduced modulo 62. The resulting bias
    (at most one part in ~69 million per symbol) is accepted.
    """
    try:
        raw = os.urandom(4 * length)
    except (OSError, NotImplementedError) as exc:
        raise TokenGenerationFailed(detail=f"os.urandom failed: {exc!r}") from exc
    words = struct.unpack(f"<{length}I", raw)
    return ''.join(TOKEN_CHARS[w % len(TOKEN_CHARS)] for w in words)
