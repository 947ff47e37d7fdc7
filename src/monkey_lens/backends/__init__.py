import os
import shlex

from monkey_lens.backends.command import CommandLanguageBackend
from monkey_lens.backends.http import DEFAULT_API_URL, HttpLanguageBackend
from monkey_lens.backends.memory import InMemoryLanguageBackend
from monkey_lens.core.ports.backend import LanguageBackend

BACKEND_KINDS = ("api", "command")


def get_backend(kind: str | None = None) -> LanguageBackend:
    """Create the backend named by ``kind`` or ``MONKEY_LENS_BACKEND``."""
    resolved = (kind or os.getenv("MONKEY_LENS_BACKEND", "api")).lower()
    if resolved == "api":
        return HttpLanguageBackend(os.getenv("MONKEY_LENS_API_URL", DEFAULT_API_URL))
    if resolved == "command":
        command = shlex.split(os.getenv("MONKEY_LENS_COMMAND", ""))
        if not command:
            raise ValueError("MONKEY_LENS_COMMAND must name the local toolchain executable")
        return CommandLanguageBackend(command)
    raise ValueError(f"Unknown backend {resolved!r}; expected one of {', '.join(BACKEND_KINDS)}")


__all__ = [
    "BACKEND_KINDS",
    "CommandLanguageBackend",
    "HttpLanguageBackend",
    "InMemoryLanguageBackend",
    "LanguageBackend",
    "get_backend",
]
