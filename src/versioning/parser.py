"""Token parsing utilities for ``<runtime>@<spec>`` arguments."""

import re
from typing import List, Tuple

from errors import InvalidRuntimeSpec

_RUNTIME_TOKEN = re.compile(r"^([^@]+)@(.+)$")


def tokenize_runtime_spec(token: str) -> Tuple[str, str]:
    """Return (runtime, spec) split on the first ``@``.

    The spec may be an exact version, a range or an alias name; its meaning is
    decided later by the resolver.
    """
    match = _RUNTIME_TOKEN.match(token.strip())
    if not match:
        raise InvalidRuntimeSpec(token)
    runtime, spec = match.group(1).strip(), match.group(2).strip()
    if not runtime or not spec:
        raise InvalidRuntimeSpec(token)
    return runtime, spec


def parse_runtime_specs(tokens: List[str]) -> List[Tuple[str, str]]:
    """Parse every CLI token, failing on the first malformed one."""
    return [tokenize_runtime_spec(tok) for tok in tokens]
