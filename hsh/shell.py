#!/usr/bin/env python3

import logging, os, sys

from hsh import builtins, process
from hsh.config import ShellConfig, log_level
from hsh.errors import NOT_FOUND, PERMISSION_DENIED, report
from hsh.outcome import ExecutionError, FailureKind
from hsh.parse import parse_line
from hsh.path import is_executable, resolve

log = logging.getLogger(__name__)


def execute_command(cmd, config, lineno=1, environ=None):
    # builtins first, then PATH lookup, then fork/exec
    outcome = builtins.dispatch(cmd, config)
    if outcome is not None:
        return outcome

    resolved = resolve(cmd.name, environ)
    if resolved is None:
        report(config, cmd.name, NOT_FOUND, lineno)
        return ExecutionError(FailureKind.NOT_FOUND, NOT_FOUND)
    if not is_executable(resolved.path):
        # only a given path can get here without existing
        if not os.path.exists(resolved.path):
            report(config, cmd.name, NOT_FOUND, lineno)
            return ExecutionError(FailureKind.NOT_FOUND, NOT_FOUND)
        report(config, cmd.name, PERMISSION_DENIED, lineno)
        return ExecutionError(FailureKind.PERMISSION, PERMISSION_DENIED)

    return process.run(resolved, cmd, config, lineno)


def handle_command(command_line, config, lineno=1):
    """Parse and run a single line. Returns the outcome, or None for a blank line."""
    cmd = parse_line(command_line, config.max_args)
    if cmd is None:
        return None
    outcome = execute_command(cmd, config, lineno)
    if outcome.status != 0:
        log.debug("line %d: %s exited with status %d", lineno, cmd.name, outcome.status)
    return outcome


def read_input(config):
    # None on end of input; the prompt only shows on a terminal
    prompt = config.prompt if config.interactive else ""
    try:
        return input(prompt)
    except EOFError:
        return None


def shell_loop(config):
    lineno = 0
    while True:
        command_line = read_input(config)
        if command_line is None:
            # leave the terminal on a fresh line after ^D
            if config.interactive:
                sys.stdout.write("\n")
                sys.stdout.flush()
            return 0
        lineno += 1
        handle_command(command_line, config, lineno)


def main(argv=None):
    config = ShellConfig.from_environment(argv)
    logging.basicConfig(
        level=log_level(),
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    log.debug("starting %s (interactive=%s, pid %d)",
              config.program_name, config.interactive, os.getpid())
    return shell_loop(config)


if __name__ == "__main__":
    sys.exit(main())
