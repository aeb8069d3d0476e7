import logging, os, sys
from dataclasses import dataclass

MAX_ARGS = 64
PROMPT = "($) "
DELIMITERS = " \t"
LOG_LEVEL_VAR = "HSH_LOG_LEVEL"


@dataclass(frozen=True)
class ShellConfig:
    """Settings fixed once at startup and handed to every core call."""

    program_name: str
    interactive: bool = False
    max_args: int = MAX_ARGS
    prompt: str = PROMPT

    @classmethod
    def from_environment(cls, argv=None, stdin=None, environ=None):
        argv = sys.argv if argv is None else argv
        stdin = sys.stdin if stdin is None else stdin
        environ = os.environ if environ is None else environ

        # PS1 overrides the default prompt, same as the old lab shell
        prompt = environ.get("PS1")
        if prompt is None:
            prompt = PROMPT
        try:
            interactive = stdin.isatty()
        except ValueError:  # closed stream
            interactive = False
        return cls(
            program_name=argv[0] if argv else "hsh",
            interactive=interactive,
            prompt=prompt,
        )


def log_level(environ=None):
    environ = os.environ if environ is None else environ
    level = logging.getLevelName(environ.get(LOG_LEVEL_VAR, "WARNING").upper())
    # unknown names come back as "Level X" strings
    return level if isinstance(level, int) else logging.WARNING
