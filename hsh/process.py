import logging, os, signal, sys

from hsh.errors import report
from hsh.outcome import ExecutionError, ExternalExit, FailureKind

log = logging.getLogger(__name__)

EXEC_FAILED = 127

# python starts with these ignored, and SIG_IGN survives execve
RESTORED_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGPIPE", "SIGXFSZ") if hasattr(signal, name)
)


def decode_status(status):
    if os.WIFEXITED(status):
        return ExternalExit(os.WEXITSTATUS(status))
    if os.WIFSIGNALED(status):
        sig = os.WTERMSIG(status)
        return ExternalExit(128 + sig, signal=sig)
    # stopped/continued children aren't waited for with these flags
    return ExternalExit(os.waitstatus_to_exitcode(status))


def _exec_child(resolved, cmd, config, context):
    # never returns: either the image is replaced or we _exit
    try:
        for sig in RESTORED_SIGNALS:
            signal.signal(sig, signal.SIG_DFL)
        os.execve(resolved.path, list(cmd.args), os.environ)
    except OSError as e:
        report(config, cmd.name, e.strerror or str(e), context)
    except ValueError as e:  # embedded NUL in an argument
        report(config, cmd.name, str(e), context)
    finally:
        os._exit(EXEC_FAILED)


def run(resolved, cmd, config, context=1):
    """Fork, exec resolved.path with cmd.args and wait for that child."""
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        pid = os.fork()
    except OSError as e:
        message = e.strerror or str(e)
        report(config, cmd.name, message, context)
        return ExecutionError(FailureKind.CREATION, message)

    if pid == 0:
        _exec_child(resolved, cmd, config, context)

    log.debug("started %s (%s) as pid %d", resolved.path, resolved.origin.value, pid)
    _, status = os.waitpid(pid, 0)
    outcome = decode_status(status)
    log.debug("pid %d finished: %r", pid, outcome)
    return outcome
