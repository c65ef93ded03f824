from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List
import logging
import os
import subprocess

from gear_assets.config import COMPILE_ENV_VAR
from gear_assets.errors import CommandFailedError, ToolNotFoundError
import gear_assets.messages as messages


@dataclass(frozen=True)
class CommandResult:
    output: str
    status: int
    invocation: str


def run_command(cmd: str, args: List[str], compile_env: str, cwd: Path) -> CommandResult:
    """
    Run an external tool inside the gear directory and echo what it prints.

    stderr is folded into stdout, and the child sees the compile environment
    in ``ANTIKYTHERA_COMPILE_ENV`` on top of the inherited environment.
    """
    invocation = ' '.join([cmd, *args])
    messages.command(invocation)

    env = dict(os.environ)
    env[COMPILE_ENV_VAR] = compile_env

    try:
        result = subprocess.run(
            [cmd, *args],
            cwd=cwd,
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise ToolNotFoundError(cmd)

    output = result.stdout or ''
    messages.output(output)
    logging.debug(f"`{invocation}` exited with {result.returncode}")

    return CommandResult(output, result.returncode, invocation)


def run_command_checked(cmd: str, args: List[str], compile_env: str, cwd: Path) -> str:
    result = run_command(cmd, args, compile_env, cwd)
    if result.status != 0:
        raise CommandFailedError(result.invocation, result.status, result.output)
    return result.output
