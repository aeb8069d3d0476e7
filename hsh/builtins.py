import logging, os, sys

from hsh.outcome import BuiltinHandled

log = logging.getLogger(__name__)


def builtin_exit(cmd, config):
    # arguments are ignored; the interpreter always leaves with 0
    log.debug("exit requested")
    sys.exit(0)


def builtin_env(cmd, config, environ=None, stream=None):
    environ = os.environ if environ is None else environ
    stream = sys.stdout if stream is None else stream
    try:
        for key, value in environ.items():
            stream.write(f"{key}={value}\n")
        stream.flush()
    except OSError as e:
        # reader went away; env still counts as done
        log.debug("env output cut short: %s", e)
    return BuiltinHandled()


BUILTINS = {
    "exit": builtin_exit,
    "env": builtin_env,
}


def dispatch(cmd, config):
    """Run cmd in-process if it names a builtin; None otherwise."""
    handler = BUILTINS.get(cmd.name)
    if handler is None:
        return None
    return handler(cmd, config)
