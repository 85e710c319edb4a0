# File: src/growl/main.py

import argparse
import os
import sys
import logging
from typing import List, Optional
from .const import COMMAND_USAGE, CONFIG_FILE, CROSS_USAGE, LOGGER_NAME, USAGE
from .domain import Config, CrossOptions
from .dispatcher import CommandDispatcher
from .errors import CommandError, GrowlError
from .services.config_loader import ConfigLoader
from .services.cross import CrossCompiler, host_arch, host_os, print_targets
from .services.runner import ShellCommandRunner, run_process
from .utils import load_environment, print_list, setup_logging, is_verbose, green

logger = logging.getLogger(LOGGER_NAME)

ALIASES = {
    "l": "list",
    "h": "help",
    "c": "cross",
}


def build_cross_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="growl cross",
        description="Build to target OS and arch (build normally if not specified)",
        epilog=CROSS_USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("-os", "--os", default=host_os(), help="Target OS (GOOS)")
    parser.add_argument("-arch", "-a", "--arch", default=host_arch(), help="Target architecture (GOARCH)")
    parser.add_argument("-ldflags", "-ld", "--ldflags", default="", help="Extra linker flags")
    parser.add_argument("-out", "-o", "--out", default="", help="Output path (default bin/$GOOS-$GOARCH)")
    parser.add_argument("-static", "-s", "--static", action="store_true", help="Link statically")
    parser.add_argument("-noconsole", "-nc", "--noconsole", action="store_true", help="Windows GUI mode (-H=windowsgui)")
    parser.add_argument("-light", "-l", "--light", action="store_true", help="Strip symbols (-w -s)")
    parser.add_argument("-cgo", "-c", "--cgo", action="store_true",
                        default=os.environ.get("CGO_ENABLED") == "1", help="Set CGO_ENABLED=1")
    parser.add_argument("build_args", nargs="*", help="Passed to go build (use -- before flags)")
    return parser


VALUE_FLAGS = {
    "-os", "--os",
    "-arch", "-a", "--arch",
    "-ldflags", "-ld", "--ldflags",
    "-out", "-o", "--out",
}


def join_flag_values(args: List[str]) -> List[str]:
    """Rewrites `-ld -w` as `-ld=-w` so values starting with '-' reach the flag."""
    joined = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--":
            joined.extend(args[i:])
            break
        if arg in VALUE_FLAGS and i + 1 < len(args):
            joined.append(f"{arg}={args[i + 1]}")
            i += 2
            continue
        joined.append(arg)
        i += 1
    return joined


def parse_cross_args(args: List[str]) -> CrossOptions:
    ns = build_cross_parser().parse_args(join_flag_values(args))
    return CrossOptions(
        os=ns.os,
        arch=ns.arch,
        ldflags=ns.ldflags,
        out=ns.out,
        static=ns.static,
        light=ns.light,
        noconsole=ns.noconsole,
        cgo=ns.cgo,
        build_args=ns.build_args,
    )


def cmd_list(config: Config, args: List[str]) -> int:
    print_list(config.commands)
    return 0


def cmd_help(config: Config, args: List[str]) -> int:
    if args:
        name = ALIASES.get(args[0], args[0])
        if name in COMMAND_USAGE:
            print(COMMAND_USAGE[name])
            return 0
    print(USAGE)
    return 0


def cmd_cross(config: Config, args: List[str]) -> int:
    if args and args[0] == "list":
        print_targets()
        return 0

    CrossCompiler().build(parse_cross_args(args))
    return 0


def cmd_init() -> int:
    path = ConfigLoader().init(CONFIG_FILE)
    print(green(f"Created {path}"))
    return 0


def cmd_default() -> int:
    run_process(["go", "run", "."])
    return 0


BUILTINS = {
    "list": cmd_list,
    "help": cmd_help,
    "cross": cmd_cross,
}


def run(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    env_path = load_environment()
    setup_logging(is_verbose())
    if env_path:
        logger.debug(f"Loaded .env from: {env_path}")

    try:
        if args and args[0] == "init":
            return cmd_init()

        config = ConfigLoader().load(CONFIG_FILE)

        if not args:
            return cmd_default()

        name = ALIASES.get(args[0], args[0])
        if name in BUILTINS:
            return BUILTINS[name](config, args[1:])

        runner = ShellCommandRunner(config.shell)
        CommandDispatcher(config, runner).dispatch(args)
        return 0

    except CommandError as e:
        logger.error(str(e))
        return e.returncode or 1
    except GrowlError as e:
        logger.error(str(e))
        return 1


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
