"""Shell setup script printed by ``jrm env``."""

from __future__ import annotations

from typing import Dict

_CD_HOOK = """if [ -n "$ZSH_VERSION" ]; then
  # zsh environment - use chpwd hook
  chpwd() {
    jrm use
  }
else
  # bash or other shells - use cd alias
  __jrmcd() {
    \\cd "$@" || return $?
    jrm use
  }
  alias cd=__jrmcd
fi"""


def render_env_script(envs: Dict[str, str]) -> str:
    """Build the script: exports, cd hook, initial ``jrm use``, PATH.

    Every exported variable names a directory whose ``bin`` goes on PATH, so
    packages installed globally under the default alias stay reachable after
    switching versions.
    """
    lines = [f'export {key}="{value}"' for key, value in envs.items()]
    lines.append(_CD_HOOK)
    lines.append("jrm use")
    path_entries = ":".join(f"${var}/bin" for var in envs)
    lines.append(f'export PATH="{path_entries}:$PATH"')
    return "\n".join(lines)
