import logging
import shlex
import subprocess
import sys
from typing import Dict, List, Optional, Protocol
from ..const import LOGGER_NAME
from ..errors import CommandError

logger = logging.getLogger(LOGGER_NAME)

DEFAULT_SHELLS = {
    "windows": "cmd /C",
    "posix": "bash -c",
}


def resolve_shell(configured: Optional[str] = None, platform: str = sys.platform) -> List[str]:
    """Returns the shell prefix a command line is appended to."""
    if configured and configured.strip():
        shell = configured
    elif platform.startswith("win"):
        shell = DEFAULT_SHELLS["windows"]
    else:
        shell = DEFAULT_SHELLS["posix"]
    return shlex.split(shell, posix=not platform.startswith("win"))


def run_process(argv: List[str], env: Optional[Dict[str, str]] = None, label: Optional[str] = None) -> None:
    """Runs argv to completion with inherited stdin/stdout/stderr."""
    label = label or " ".join(argv)
    logger.debug(f"command: {' '.join(argv)}")
    try:
        subprocess.run(argv, env=env, check=True)
    except subprocess.CalledProcessError as e:
        raise CommandError(f"'{label}' failed with exit code {e.returncode}", e.returncode)
    except OSError as e:
        raise CommandError(f"Could not start '{argv[0]}': {e}")


class CommandRunner(Protocol):
    def run(self, command: str, env: Dict[str, str]) -> None: ...


class ShellCommandRunner:
    def __init__(self, shell: Optional[str] = None, platform: str = sys.platform):
        self.shell_args = resolve_shell(shell, platform)
        logger.debug(f"Using shell: {' '.join(self.shell_args)}")

    def run(self, command: str, env: Dict[str, str]) -> None:
        if not command: return
        run_process(self.shell_args + [command], env, label=command)
