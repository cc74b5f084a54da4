from __future__ import annotations

import logging
import subprocess
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def execute(self, path: str, args: Sequence[str]) -> tuple[bool, str]:
        """Run ``path`` with ``args`` and return ``(succeeded, captured_stderr)``."""
        ...


class SubprocessCommandRunner:
    """Runs a binary to completion, discarding stdout and keeping stderr.

    A binary that cannot be spawned reports failure with an empty message,
    exactly like a process that exited non-zero without writing to stderr.
    """

    def execute(self, path: str, args: Sequence[str]) -> tuple[bool, str]:
        try:
            proc = subprocess.run(
                [path, *args],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                check=False,
            )
        except (OSError, ValueError) as exc:
            logger.warning("cannot spawn %s: %s", path, exc)
            return False, ""

        stderr = proc.stderr.decode("utf-8", errors="replace") if proc.stderr else ""
        if proc.returncode != 0:
            return False, stderr
        return True, ""
