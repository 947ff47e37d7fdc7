"""Local Monkey toolchain invoked as a subprocess.

The executable receives the subcommand (``tokenize`` or ``parse``) as its last
argument and the code on stdin, and answers with the same JSON documents the
HTTP service returns.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from monkey_lens.models import ParseResult, TokenizeResult

_log = logging.getLogger(__name__)


class CommandLanguageBackend:
    def __init__(self, command: Sequence[str], timeout: float = 10.0) -> None:
        if not command:
            raise ValueError("command must not be empty")
        self.command = list(command)
        self.timeout = timeout

    async def _run(self, subcommand: str, code: str) -> dict[str, Any]:
        proc = await asyncio.create_subprocess_exec(
            *self.command,
            subcommand,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(code.encode()), timeout=self.timeout)
        except asyncio.TimeoutError:
            proc.kill()
            await proc.wait()
            return {"error": f"{subcommand} timed out after {self.timeout:g}s"}
        if proc.returncode != 0:
            message = stderr.decode(errors="replace").strip()
            return {"error": message or f"{subcommand} exited with status {proc.returncode}"}
        payload = json.loads(stdout)
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected {subcommand} output: {payload!r}")
        return payload

    async def tokenize(self, code: str) -> TokenizeResult:
        try:
            return TokenizeResult.model_validate(await self._run("tokenize", code))
        except (OSError, ValueError, ValidationError):
            _log.warning("Tokenize via %s failed", self.command[0], exc_info=True)
            return TokenizeResult(error="Failed to tokenize code")

    async def parse(self, code: str) -> ParseResult:
        try:
            return ParseResult.model_validate(await self._run("parse", code))
        except (OSError, ValueError, ValidationError):
            _log.warning("Parse via %s failed", self.command[0], exc_info=True)
            return ParseResult(error="Failed to parse code")

    async def dispose(self) -> None:
        return None
