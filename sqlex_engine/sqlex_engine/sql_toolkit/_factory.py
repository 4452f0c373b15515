"""Front-end selection for sqlex.

Consumers call :func:`get_sql_toolkit` and never import an implementation
directly.  The backend is built lazily on first use and shared by every
file of a run; tests swap it with :func:`register_implementation` and
restore the default with :func:`reset_toolkit`.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from ._protocols import SqlToolkit

logger = logging.getLogger(__name__)

ToolkitFactory = Callable[[], SqlToolkit]

_lock = threading.Lock()
_active: SqlToolkit | None = None
_custom_factory: ToolkitFactory | None = None


def _build_default() -> SqlToolkit:
    from .impl.sqlglot_impl import SqlGlotToolkit

    return SqlGlotToolkit()


def register_implementation(factory_fn: ToolkitFactory) -> None:
    """Use *factory_fn* to build the front-end from now on.

    The current instance is discarded; the next :func:`get_sql_toolkit`
    call builds a fresh one.
    """
    global _custom_factory, _active
    with _lock:
        _custom_factory = factory_fn
        _active = None


def get_sql_toolkit() -> SqlToolkit:
    """Return the shared :class:`SqlToolkit`, building it on first use.

    Safe to call from several threads; exactly one instance is built.
    """
    global _active
    toolkit = _active
    if toolkit is not None:
        return toolkit

    with _lock:
        if _active is None:
            factory = _custom_factory or _build_default
            _active = factory()
            logger.debug("SQL toolkit initialised: %s", type(_active).__name__)
        return _active


def reset_toolkit() -> None:
    """Forget the active front-end and any registered factory."""
    global _active, _custom_factory
    with _lock:
        _active = None
        _custom_factory = None
