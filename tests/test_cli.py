## optscan — CLI integration tests

import os, sys
import subprocess


def run_cli(*cli_args: str, env: dict | None = None, extra_args: list[str] | None = None) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "optscan", "--plain"]
    if extra_args:
        args.extend(extra_args)
    args.extend(cli_args)
    merged_env = os.environ.copy()
    merged_env.pop("OPTSCAN_DOS", None)
    if env:
        merged_env.update(env)
    return subprocess.run(args, capture_output=True, text=True, env=merged_env)


def _strip_output_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def test_cli_scans_declared_options():
    result = run_cli("--declare=-v --out=FILE", "--", "-v", "--out", "a.txt", "rest")
    assert result.returncode == 0
    assert _strip_output_lines(result.stdout) == ['-v', '--out = "a.txt"', 'remaining: "rest"']


def test_cli_unknown_option_sets_retcode():
    result = run_cli("--", "-x", "tail")
    assert result.returncode != 0
    out = result.stdout
    assert "UNKNOWN" in out
    assert 'Option "-x" is unknown.' in out
    assert 'remaining: "tail"' in out


def test_cli_ignore_keeps_retcode_zero():
    result = run_cli("--", "--nope=1", extra_args=["--ignore"])
    assert result.returncode == 0
    assert 'Option "--nope" is unknown.' in result.stdout


def test_cli_missing_and_extraneous_arguments():
    result = run_cli("--declare=-o= --flag", "--", "--flag=yes", "-o")
    assert result.returncode != 0
    lines = _strip_output_lines(result.stdout)
    assert lines[0].strip() == 'EXTRANEOUS  Extraneous argument "yes" passed to option "--flag".'
    assert lines[1].strip() == 'MISSING  Option "-o" expects an argument.'
    assert lines[2] == 'remaining: ∅'


def test_cli_dos_mode_flag_and_envvar():
    result = run_cli("--declare=--out=", "--dos", "--", "/out:c.txt", "/", "x")
    assert result.returncode == 0
    assert _strip_output_lines(result.stdout) == ['--out = "c.txt"', 'remaining: "/" "x"']

    result = run_cli("--", "/q", env={"OPTSCAN_DOS": "1"})
    assert result.returncode != 0
    assert 'Option "-q" is unknown.' in result.stdout

    result = run_cli("--", "/q")
    assert result.returncode == 0
    assert 'remaining: "/q"' in result.stdout


def test_cli_declaration_syntax_error_shows_context():
    result = run_cli("--declare=-v -ab", "--", "-v")
    assert result.returncode != 0
    out = result.stdout
    assert "SYNTAX ERROR." in out
    assert "Declaring options `-v -ab`" in out
    assert "Declaration, line 1" in out


def test_cli_verbose_traces_tokens():
    result = run_cli("--declare=-v", "-vv", "--", "-v", "plain")
    assert result.returncode == 0
    out = result.stdout
    assert "GNU options: -v" in out
    assert "short" in out and "plain" in out
