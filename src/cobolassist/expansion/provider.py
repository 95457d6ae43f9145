"""Copy expansion through an external preprocessor process."""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from cobolassist.config.models import ExpansionConfig
from cobolassist.core.logging import get_logger
from cobolassist.expansion.models import Expanded, ExpansionFailed, ExpansionResult
from cobolassist.expansion.naming import build_cache_file_name, source_path_from_uri
from cobolassist.source.buffer import split_lines

log = get_logger("expansion.provider")

SOURCE_PLACEHOLDER = "{source}"
TARGET_PLACEHOLDER = "{target}"


class SubprocessExpansionProvider:
    """Runs the configured preprocessor and reads back the expanded source.

    Failures are returned as ``ExpansionFailed`` rather than raised; the
    coordinator decides what a failure means for the request.
    """

    def __init__(self, config: ExpansionConfig, user: str | None = None) -> None:
        self._config = config
        self._user = user

    def target_path(self, uri: str) -> Path:
        return Path(build_cache_file_name(uri, self._config.cache_dir, self._user))

    def build_command(self, uri: str) -> list[str]:
        source = source_path_from_uri(uri)
        target = str(self.target_path(uri))
        return [
            part.replace(SOURCE_PLACEHOLDER, source).replace(TARGET_PLACEHOLDER, target)
            for part in self._config.command
        ]

    async def __call__(self, uri: str) -> ExpansionResult:
        if not self._config.command:
            return ExpansionFailed(reason="no expansion command configured")

        cmd = self.build_command(uri)
        if not shutil.which(cmd[0]):
            return ExpansionFailed(reason=f"Executable not found: {cmd[0]}")

        writes_target = any(TARGET_PLACEHOLDER in part for part in self._config.command)
        target = self.target_path(uri)
        if writes_target:
            target.parent.mkdir(parents=True, exist_ok=True)
            # Drop stale output from an earlier run
            target.unlink(missing_ok=True)

        log.info("expansion_started", uri=uri, command=cmd[0])
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            return ExpansionFailed(reason=str(e))

        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(
                proc.communicate(), timeout=self._config.timeout_sec
            )
        except TimeoutError:
            proc.kill()
            await proc.wait()
            return ExpansionFailed(
                reason=f"preprocessor did not finish in {self._config.timeout_sec}s",
                timeout_sec=self._config.timeout_sec,
            )

        if proc.returncode != 0:
            stderr = stderr_bytes.decode(errors="replace").strip()
            return ExpansionFailed(reason=f"preprocessor exited with {proc.returncode}: {stderr}")

        if writes_target:
            if not target.exists():
                return ExpansionFailed(reason=f"expanded source not written: {target}")
            text = target.read_text(encoding=self._config.encoding, errors="replace")
        else:
            text = stdout_bytes.decode(self._config.encoding, errors="replace")

        buffer = split_lines(text)
        log.info("expansion_finished", uri=uri, lines=len(buffer))
        return Expanded(buffer=buffer)
