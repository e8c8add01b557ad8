"""Service name matching for search/autocomplete."""

from collections.abc import Iterable

WILDCARD = "*"


def match_services(pattern: str, names: Iterable[str]) -> list[str]:
    """Return names starting with ``pattern``, or all names for ``*``.

    Matching is a case-sensitive literal prefix test. Input order is kept.
    """
    if pattern == WILDCARD:
        return list(names)
    return [name for name in names if name.startswith(pattern)]
