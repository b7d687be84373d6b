"""
Command adapter — run one external executable and capture its output.

Base for the jsii toolchain adapters. Subclasses name the tool and
the environment variable that can override where it lives; the
argv, working directory and timeout come from the execution context.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time
from pathlib import Path

from bindgen.adapters.base import Adapter, ExecutionContext
from bindgen.core.models.action import Receipt

logger = logging.getLogger(__name__)


class CommandAdapter(Adapter):
    """Run ``<executable> <action.args...>`` in the context's working dir.

    Executable lookup order: ``env_var`` (if set in the environment),
    then ``PATH``, then the bare command name.
    """

    command: str = ""
    env_var: str = ""

    def __init__(self, executable: str | None = None):
        self._executable = executable

    @property
    def name(self) -> str:
        return self.command

    def executable(self) -> str:
        if self._executable:
            return self._executable
        if self.env_var and os.environ.get(self.env_var):
            return os.environ[self.env_var]
        return shutil.which(self.command) or self.command

    def is_available(self) -> bool:
        exe = self.executable()
        return Path(exe).is_file() or shutil.which(exe) is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not Path(context.working_dir).is_dir():
            return False, f"Working directory does not exist: {context.working_dir}"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        cmd = [self.executable(), *context.action.args]
        command = " ".join(cmd)
        env = os.environ.copy()
        env.update(context.env)

        logger.debug("Executing: %s (cwd=%s)", command, context.working_dir)
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                cwd=context.working_dir,
                env=env,
                capture_output=True,
                text=True,
                timeout=context.timeout,
            )
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command timed out after {context.timeout}s",
                command=command,
            )
        except FileNotFoundError:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Executable not found: {cmd[0]}",
                command=command,
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command execution error: {e}",
                command=command,
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        stdout = result.stdout.strip()
        stderr = result.stderr.strip()
        if stdout:
            logger.debug("%s stdout:\n%s", self.name, stdout)
        if stderr:
            logger.debug("%s stderr:\n%s", self.name, stderr)

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=context.action.id,
                output=stdout,
                command=command,
                return_code=0,
                duration_ms=elapsed_ms,
                metadata={"stderr": stderr} if stderr else {},
            )
        return Receipt.failure(
            adapter=self.name,
            action_id=context.action.id,
            error=stderr or stdout or f"Command exited with code {result.returncode}",
            command=command,
            return_code=result.returncode,
            duration_ms=elapsed_ms,
            metadata={"stdout": stdout},
        )
