# File: src/growl/services/cross.py

import logging
import os
import platform
import sys
from typing import Dict, List, Optional
from ..const import HOST_ARCH_ALIASES, HOST_OS_ALIASES, KNOWN_ARCH, KNOWN_OS, LOGGER_NAME
from ..domain import CrossOptions
from ..utils import blue, green
from .runner import run_process

logger = logging.getLogger(LOGGER_NAME)


def host_os(sys_platform: str = sys.platform) -> str:
    for prefix, goos in HOST_OS_ALIASES.items():
        if sys_platform.startswith(prefix):
            return goos
    # freebsd13 -> freebsd, openbsd7 -> openbsd
    return sys_platform.rstrip("0123456789")


def host_arch(machine: Optional[str] = None) -> str:
    machine = (machine if machine is not None else platform.machine()).lower()
    return HOST_ARCH_ALIASES.get(machine, machine)


def build_ldflags(opts: CrossOptions) -> str:
    ld = opts.ldflags
    if opts.static:
        ld += " -extldflags=-static"
    if opts.light:
        ld += " -w -s"
    if opts.noconsole:
        ld += " -H=windowsgui"
    return ld.strip(" ")


def output_path(opts: CrossOptions) -> str:
    out = opts.out or f"bin/{opts.os}-{opts.arch}"
    if opts.os == "windows" and not out.lower().endswith(".exe"):
        out += ".exe"
    return out


def build_env(opts: CrossOptions, base: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    env = dict(os.environ if base is None else base)
    env["GOOS"] = opts.os
    env["GOARCH"] = opts.arch
    if opts.cgo:
        env["CGO_ENABLED"] = "1"
    return env


def build_command(opts: CrossOptions) -> List[str]:
    return ["go", "build", f"-ldflags={build_ldflags(opts)}", f"-o={output_path(opts)}"] + list(opts.build_args)


class CrossCompiler:
    """Runs `go build` for a target OS/arch."""

    def __init__(self, base_env: Optional[Dict[str, str]] = None):
        self.base_env = base_env

    def print_summary(self, opts: CrossOptions):
        print(green("Flags:"))
        print(f"{blue('- os')} {opts.os}")
        print(f"{blue('- arch')} {opts.arch}")
        print(f"{blue('- ldflags')} {build_ldflags(opts)}")
        print(f"{blue('- cgo')} {str(opts.cgo).lower()}")
        print(f"{blue('- out')} {output_path(opts)}")

    def build(self, opts: CrossOptions) -> str:
        self.print_summary(opts)

        env = build_env(opts, self.base_env)
        argv = build_command(opts)
        logger.debug(f"GOOS={env['GOOS']} GOARCH={env['GOARCH']} CGO_ENABLED={env.get('CGO_ENABLED', '')}")

        print(green("Building..."))
        run_process(argv, env, label="go build")
        return output_path(opts)


def print_targets():
    print(green("Available OS:"))
    for name in KNOWN_OS:
        print(name)
    print(green("Available CPU architectures:"))
    for name in KNOWN_ARCH:
        print(name)
