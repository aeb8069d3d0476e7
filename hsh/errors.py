import sys

NOT_FOUND = "not found"
PERMISSION_DENIED = "Permission denied"


def report(config, command_name, message, context=1, stream=None):
    """Write `<program>: <context>: <command>: <message>` to stderr.

    Best effort: a broken error stream is not treated as a failure.
    """
    stream = sys.stderr if stream is None else stream
    try:
        stream.write(f"{config.program_name}: {context}: {command_name}: {message}\n")
        stream.flush()
    except (OSError, ValueError):
        pass
