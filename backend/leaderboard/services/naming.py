import re

_INVALID_CHARACTERS = re.compile(r'[^A-Za-z0-9-]')


def kebab_anycase(name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9-]`` with a dash."""
    return _INVALID_CHARACTERS.sub('-', name)


def kebab_uppercase(name: str) -> str:
    return kebab_anycase(name).upper()


def canonicalize(name: str) -> str:
    """Canonical board/player key: lower-case kebab.

    Names differing only by case or punctuation map to the same key, so
    ``"Speed Run!"`` and ``"speed-run-"`` are one board. Lower-casing after
    the substitution keeps the result pure ASCII.
    """
    return kebab_anycase(name).lower()
