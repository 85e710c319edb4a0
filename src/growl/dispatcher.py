# File: src/growl/dispatcher.py

import os
import re
import logging
from typing import Dict, List, Optional
from .domain import Config, CommandDefinition
from .services.runner import CommandRunner
from .errors import CommandNotFoundError, MissingArgumentError
from .const import LOGGER_NAME
from .utils import print_list

logger = logging.getLogger(LOGGER_NAME)

PLACEHOLDER = re.compile(r"%(\d+)")
UNRESOLVED = re.compile(r"%\d+")


def substitute(template: str, params: List[str]) -> str:
    """Replaces %1, %2, ... with params; out-of-range placeholders are kept."""
    def _replace(match):
        index = int(match.group(1))
        if 1 <= index <= len(params):
            return params[index - 1]
        return match.group(0)

    return PLACEHOLDER.sub(_replace, template)


def find_missing(line: str) -> List[str]:
    return [word for word in line.split() if UNRESOLVED.fullmatch(word)]


class CommandDispatcher:
    def __init__(self, config: Config, runner: CommandRunner, base_env: Optional[Dict[str, str]] = None):
        self.config = config
        self.runner = runner
        self.base_env = base_env

    def lookup(self, name: str) -> CommandDefinition:
        command = self.config.find(name)
        if command is None:
            print_list(self.config.commands)
            raise CommandNotFoundError(f"Command not found: {name}")
        return command

    def build_env(self, command: CommandDefinition) -> Dict[str, str]:
        env = dict(os.environ if self.base_env is None else self.base_env)
        for var in self.config.env:
            env[var.name] = var.value
        # command-scoped entries win over globals
        for var in command.env:
            env[var.name] = var.value
        return env

    def resolve(self, line: str, params: List[str]) -> str:
        resolved = substitute(line, params)
        missing = find_missing(resolved)
        if missing:
            raise MissingArgumentError(missing)
        return resolved

    def dispatch(self, args: List[str]):
        name, params = args[0], args[1:]
        command = self.lookup(name)
        env = self.build_env(command)

        for line in command.lines():
            self.runner.run(self.resolve(line, params), env)
