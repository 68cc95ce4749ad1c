from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from shipit.core.config import ExecutionContext, ShipitConfig, load_config
from shipit.core.errors import ErrorCode
from shipit.core.result import Err
from shipit.output.console import ConsoleProtocol, RichConsole
from shipit.platform.process import CommandRunner, SubprocessRunner


@dataclass(frozen=True, slots=True)
class CLIContext:
    execution: ExecutionContext
    config: ShipitConfig
    console: ConsoleProtocol
    runner: CommandRunner


def build_context() -> CLIContext:
    execution = ExecutionContext(root=Path.cwd().resolve(), env=dict(os.environ))
    console = RichConsole()

    config_result = load_config(execution.root)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    return CLIContext(
        execution=execution,
        config=config_result.value,
        console=console,
        runner=SubprocessRunner(execution),
    )
