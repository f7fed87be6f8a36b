"""
Installs a facade onto whatever global surface the host process offers.

- INTERACTIVE: an IPython/Jupyter shell, whose user namespace plays the role
  a browser ``window`` does.
- GLOBAL: the ``builtins`` module, visible from every module of the process.
- MODULE: no global side effect; callers import the names explicitly.
"""

import builtins
import sys
from enum import Enum
from typing import Any, Dict, MutableMapping, Optional

from .logging import logger

EXPORT_NAMES = ("log", "logSub", "logUnsub")


class HostEnvironment(Enum):
    INTERACTIVE = "interactive"
    GLOBAL = "global"
    MODULE = "module"


def _interactive_namespace() -> Optional[MutableMapping[str, Any]]:
    # Only look for IPython if the host already imported it.
    ipython_module = sys.modules.get("IPython")
    if ipython_module is None:
        return None
    get_ipython = getattr(ipython_module, "get_ipython", None)
    shell = get_ipython() if get_ipython is not None else None
    if shell is None:
        return None
    return getattr(shell, "user_ns", None)


def detect_host(target: str = "auto") -> HostEnvironment:
    """Map a configured install target to a host environment."""
    if target != "auto":
        return HostEnvironment(target)
    if _interactive_namespace() is not None:
        return HostEnvironment.INTERACTIVE
    return HostEnvironment.MODULE


def _namespace_for(host: HostEnvironment) -> Optional[MutableMapping[str, Any]]:
    if host is HostEnvironment.INTERACTIVE:
        return _interactive_namespace()
    if host is HostEnvironment.GLOBAL:
        return vars(builtins)
    return None


def exports_for(facade) -> Dict[str, Any]:
    return {
        "log": facade.log,
        "logSub": facade.subscribe,
        "logUnsub": facade.unsubscribe,
    }


def install(
    facade,
    host: Optional[HostEnvironment] = None,
    namespace: Optional[MutableMapping[str, Any]] = None
) -> Dict[str, Any]:
    """
    Publish ``log``, ``logSub`` and ``logUnsub`` for ``facade``.

    An explicit ``namespace`` wins over the host's own. Returns the exported
    names so a module can re-export them.
    """
    exports = exports_for(facade)
    host = host or detect_host()
    target = namespace if namespace is not None else _namespace_for(host)

    if target is not None:
        target.update(exports)
        logger.debug(f"Log facade installed into {host.value} namespace")
    return exports


def uninstall(host: HostEnvironment, namespace: Optional[MutableMapping[str, Any]] = None) -> None:
    """Remove names written by ``install`` from the same surface."""
    target = namespace if namespace is not None else _namespace_for(host)
    if target is None:
        return
    for name in EXPORT_NAMES:
        target.pop(name, None)
