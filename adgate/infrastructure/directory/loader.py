"""
Directory client loader.

Imports the configured DirectoryClient implementation and builds it.
Accepted import paths:
    "package.module:ClassName"  an explicit class
    "package.module"            a module holding exactly one DirectoryClient subclass
"""

import importlib
import inspect
import logging
from typing import Any, Mapping, Optional

from adgate.domain.directory.errors import DirectoryClientLoadError
from adgate.domain.directory.ports import DirectoryClient

logger = logging.getLogger(__name__)


def _find_client_class(module: Any, path: str) -> type:
    candidates = [
        attr
        for _, attr in inspect.getmembers(module, inspect.isclass)
        if issubclass(attr, DirectoryClient)
        and attr is not DirectoryClient
        and not inspect.isabstract(attr)
        and attr.__module__ == module.__name__
    ]
    if not candidates:
        raise DirectoryClientLoadError(path, "no DirectoryClient subclass found")
    if len(candidates) > 1:
        names = ", ".join(sorted(c.__name__ for c in candidates))
        raise DirectoryClientLoadError(path, f"ambiguous, found {names}")
    return candidates[0]


def resolve_client_class(path: str) -> type:
    """Import the DirectoryClient class named by path."""
    module_name, _, class_name = path.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise DirectoryClientLoadError(path, str(exc)) from exc

    if not class_name:
        return _find_client_class(module, path)

    client_class = getattr(module, class_name, None)
    if not (inspect.isclass(client_class) and issubclass(client_class, DirectoryClient)):
        raise DirectoryClientLoadError(path, f"{class_name} is not a DirectoryClient")
    return client_class


def load_directory_client(
    path: Optional[str], options: Optional[Mapping[str, Any]] = None
) -> Optional[DirectoryClient]:
    """Build the configured directory client.

    Args:
        path: Import path from settings, or None when unset.
        options: Keyword arguments for the client constructor.

    Returns:
        The client instance, or None when no path is configured.

    Raises:
        DirectoryClientLoadError: If the class cannot be imported or built.
    """
    if not path:
        logger.warning("No directory client configured; directory routes will answer 503")
        return None

    client_class = resolve_client_class(path)
    try:
        client = client_class(**dict(options or {}))
    except Exception as exc:
        raise DirectoryClientLoadError(path, f"construction failed: {exc}") from exc

    logger.info("Loaded directory client %s", client_class.__qualname__)
    return client
