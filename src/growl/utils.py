# File: src/growl/utils.py

import logging
import os
from typing import List, Optional
from dotenv import load_dotenv
from .const import LOGGER_NAME
from .domain import CommandDefinition

logger = logging.getLogger(LOGGER_NAME)

GREEN = "\033[92m"
BLUE = "\033[94m"
RED = "\033[91m"
RESET = "\033[0m"


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S"
    )


def is_verbose() -> bool:
    return os.environ.get("GROWL_VERBOSE", "").strip().lower() in ("1", "true", "yes")


def load_environment() -> Optional[str]:
    """
    Loads variables from ./.env into os.environ without overriding
    the ones already set, so commands see them as part of their base env.
    Returns the loaded path, or None when there is no .env.
    """
    env_path = os.path.join(os.getcwd(), ".env")
    if not os.path.exists(env_path):
        return None
    load_dotenv(env_path, override=False)
    return env_path


def green(text: str) -> str:
    return f"{GREEN}{text}{RESET}"


def blue(text: str) -> str:
    return f"{BLUE}{text}{RESET}"


def red(text: str) -> str:
    return f"{RED}{text}{RESET}"


def print_list(commands: List[CommandDefinition]):
    print(green("Commands:"))
    for cmd in commands:
        print(f"{blue('- ' + cmd.name)} {cmd.command}")
        for line in cmd.extra:
            print(f"    {line}")
