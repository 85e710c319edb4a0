import pytest
from unittest.mock import patch
from growl.domain import CrossOptions
from growl.services.cross import (
    CrossCompiler,
    build_command,
    build_env,
    build_ldflags,
    host_arch,
    host_os,
    output_path,
    print_targets,
)


def opts(**kwargs):
    kwargs.setdefault("os", "linux")
    kwargs.setdefault("arch", "amd64")
    return CrossOptions(**kwargs)


# ==========================================
# 1. FLAG MAPPING
# ==========================================

def test_ldflags_static_and_light():
    assert build_ldflags(opts(static=True, light=True)) == "-extldflags=-static -w -s"


def test_ldflags_keeps_user_flags_first():
    ld = build_ldflags(opts(ldflags="-X main.version=1.0", noconsole=True))
    assert ld == "-X main.version=1.0 -H=windowsgui"


def test_ldflags_empty_by_default():
    assert build_ldflags(opts()) == ""


def test_output_path_defaults_to_bin_os_arch():
    assert output_path(opts(os="darwin", arch="arm64")) == "bin/darwin-arm64"


def test_output_path_windows_gets_exe():
    assert output_path(opts(os="windows")) == "bin/windows-amd64.exe"
    assert output_path(opts(os="windows", out="dist/app")) == "dist/app.exe"
    assert output_path(opts(os="windows", out="dist/app.exe")) == "dist/app.exe"


def test_output_path_explicit():
    assert output_path(opts(out="dist/app")) == "dist/app"


def test_build_env_sets_target():
    env = build_env(opts(os="windows", arch="386"), base={"HOME": "/root"})

    assert env["GOOS"] == "windows"
    assert env["GOARCH"] == "386"
    assert env["HOME"] == "/root"
    assert "CGO_ENABLED" not in env


def test_build_env_cgo():
    assert build_env(opts(cgo=True), base={})["CGO_ENABLED"] == "1"
    assert build_env(opts(cgo=False), base={"CGO_ENABLED": "0"})["CGO_ENABLED"] == "0"


def test_build_command_appends_passthrough_args():
    argv = build_command(opts(light=True, build_args=["./cmd/app"]))

    assert argv == ["go", "build", "-ldflags=-w -s", "-o=bin/linux-amd64", "./cmd/app"]


# ==========================================
# 2. HOST DETECTION
# ==========================================

@pytest.mark.parametrize("platform_name,expected", [
    ("linux", "linux"),
    ("darwin", "darwin"),
    ("win32", "windows"),
    ("freebsd13", "freebsd"),
])
def test_host_os(platform_name, expected):
    assert host_os(platform_name) == expected


@pytest.mark.parametrize("machine,expected", [
    ("x86_64", "amd64"),
    ("AMD64", "amd64"),
    ("aarch64", "arm64"),
    ("i686", "386"),
    ("mips", "mips"),
])
def test_host_arch(machine, expected):
    assert host_arch(machine) == expected


# ==========================================
# 3. BUILD
# ==========================================

def test_cross_compiler_invokes_go_build(capsys):
    compiler = CrossCompiler(base_env={})

    with patch("growl.services.cross.run_process") as mock_run:
        out = compiler.build(opts(os="windows", static=True))

    assert out == "bin/windows-amd64.exe"
    argv, env = mock_run.call_args.args
    assert argv == ["go", "build", "-ldflags=-extldflags=-static", "-o=bin/windows-amd64.exe"]
    assert env["GOOS"] == "windows"

    printed = capsys.readouterr().out
    assert "Flags:" in printed
    assert "Building..." in printed


def test_print_targets(capsys):
    print_targets()

    printed = capsys.readouterr().out
    assert "Available OS:" in printed
    assert "Available CPU architectures:" in printed
    assert "windows" in printed
    assert "arm64" in printed
