CONFIG_FILE = "growl.yaml"
LOGGER_NAME = "growl"

DEFAULT_CONFIG_YAML = """# growl.yaml - run commands with: growl <name> [args...]
# shell: "bash -c"

env:
  - name: GREETING
    value: hello

commands:
  - name: run
    command: "go run ."

  - name: build
    command: "go build -o bin/app ."

  - name: greet
    command: "echo $GREETING %1"
    env:
      - name: GREETING
        value: hi

  - name: test
    command: "go vet ./..."
    extra:
      - "go test ./..."
"""

KNOWN_OS = [
    "aix",
    "android",
    "darwin",
    "dragonfly",
    "freebsd",
    "hurd",
    "illumos",
    "ios",
    "js",
    "linux",
    "nacl",
    "netbsd",
    "openbsd",
    "plan9",
    "solaris",
    "wasip1",
    "windows",
    "zos",
]

KNOWN_ARCH = [
    "386",
    "amd64",
    "amd64p32",
    "arm",
    "armbe",
    "arm64",
    "arm64be",
    "loong64",
    "mips",
    "mipsle",
    "mips64",
    "mips64le",
    "mips64p32",
    "mips64p32le",
    "ppc",
    "ppc64",
    "ppc64le",
    "riscv",
    "riscv64",
    "s390",
    "s390x",
    "sparc",
    "sparc64",
    "wasm",
]

# Python platform names -> Go identifiers
HOST_OS_ALIASES = {
    "win32": "windows",
    "cygwin": "windows",
    "darwin": "darwin",
    "linux": "linux",
}

HOST_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "riscv64": "riscv64",
}

USAGE = """growl - simple go cli tools

usage: growl [command] [args...]

commands:
  (none)          go run .
  <name> [args]   Run a command from growl.yaml (%1, %2, ... are replaced by args)
  list, l         List commands from growl.yaml
  help, h         Shows this help (growl help <command> for more info)
  cross, c        Build to target OS and arch (growl help cross for more info)
  init            Create a new growl.yaml

set GROWL_VERBOSE=1 for debug logs
"""

CROSS_USAGE = """growl cross -os [os] -arch [arch] -ldflags "[ldflags]" [-static] [-light] [-cgo] -out [output] -noconsole
growl cross -os [os] -a [arch] -ld "[ldflags]" [-s] [-l] [-c] -o [output] -nc
Default output is bin/$GOOS-$GOARCH
-noconsole (or -nc) disables the console in windows to use only the GUI (adds -H=windowsgui ldflag).
You can use growl cross list to list available OS and CPU architectures"""

COMMAND_USAGE = {
    "list": "growl list\nList commands from growl.yaml",
    "help": "growl help [command]\nShows the help of growl or of a single command",
    "cross": CROSS_USAGE,
    "init": "growl init\nCreates a growl.yaml in the current directory (fails if one exists)",
}
