"""npm-flavoured semver helpers built on semantic_version.

Versions are strict (``1.2.3``, no leading ``v``); ranges follow npm syntax
through ``semantic_version.NpmSpec``.
"""

import re
from typing import Iterable, List, Optional

import semantic_version

_OPERATOR_GAP = re.compile(r"(<=|>=|<|>|=|~|\^)\s+")


def parse_version(value: str) -> Optional[semantic_version.Version]:
    """Return the strict Version for ``value`` or None when it is not semver."""
    try:
        return semantic_version.Version(value)
    except (TypeError, ValueError):
        return None


def is_valid_version(value: str) -> bool:
    return parse_version(value) is not None


def parse_range(value: str) -> Optional[semantic_version.NpmSpec]:
    """Return the NpmSpec for ``value`` or None when it is not a range.

    A bare version is a range that matches exactly that version. Whitespace
    after an operator (``>= 18``) is accepted like npm does.
    """
    try:
        return semantic_version.NpmSpec(_OPERATOR_GAP.sub(r"\1", value.strip()))
    except (TypeError, ValueError):
        return None


def is_valid_range(value: str) -> bool:
    return parse_range(value) is not None


def strip_v(tag: str) -> str:
    """Drop a single leading ``v`` from a tag name."""
    return tag[1:] if tag.startswith("v") else tag


def satisfies(version: str, version_range: str) -> bool:
    """True when ``version`` is valid semver and matches ``version_range``."""
    parsed = parse_version(version)
    spec = parse_range(version_range)
    if parsed is None or spec is None:
        return False
    return spec.match(parsed)


def sort_descending(versions: Iterable[str]) -> List[str]:
    """Valid versions from ``versions`` sorted by semver precedence, highest first.

    Invalid entries are dropped.
    """
    parsed = [v for v in (parse_version(s) for s in versions) if v is not None]
    parsed.sort(reverse=True)
    return [str(v) for v in parsed]


def highest_satisfying(versions: Iterable[str], version_range: str) -> Optional[str]:
    """First entry of ``versions`` (already descending) that satisfies the range."""
    spec = parse_range(version_range)
    if spec is None:
        return None
    for candidate in versions:
        parsed = parse_version(candidate)
        if parsed is not None and spec.match(parsed):
            return candidate
    return None


def normalize_remote(tags: Iterable[str]) -> List[str]:
    """Strip ``v``, drop prereleases and invalid tags, sort highest first."""
    stable = []
    for tag in tags:
        parsed = parse_version(strip_v(tag))
        if parsed is None or parsed.prerelease:
            continue
        stable.append(str(parsed))
    return sort_descending(dict.fromkeys(stable))
