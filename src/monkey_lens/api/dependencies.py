from __future__ import annotations

from collections.abc import AsyncIterator

from monkey_lens.backends import get_backend as _create_backend
from monkey_lens.core.ports.backend import LanguageBackend

_backend: LanguageBackend | None = None


async def get_backend() -> AsyncIterator[LanguageBackend]:
    """Yield a ``LanguageBackend``, creating it lazily on first call."""
    global _backend  # noqa: PLW0603
    if _backend is None:
        _backend = _create_backend()
    yield _backend


async def shutdown_backend() -> None:
    global _backend  # noqa: PLW0603
    if _backend is not None:
        await _backend.dispose()
        _backend = None
