import enum, logging, os, stat
from typing import NamedTuple

log = logging.getLogger(__name__)


class PathOrigin(enum.Enum):
    GIVEN = "given"        # the command name itself, it already had a '/'
    SEARCHED = "searched"  # built from a PATH entry


class ResolvedPath(NamedTuple):
    path: str
    origin: PathOrigin


def is_executable(path):
    """True if path is a regular file the current user may execute."""
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(st.st_mode) and os.access(path, os.X_OK)


def resolve(name, environ=None):
    """Find the executable for `name`, or None if it isn't on PATH.

    Names containing '/' are returned as given, unchecked; the caller
    still has to test them with is_executable before running them.
    """
    if "/" in name:
        return ResolvedPath(name, PathOrigin.GIVEN)

    environ = os.environ if environ is None else environ
    search = environ.get("PATH")
    if search is None:
        log.debug("PATH unset, can't resolve %r", name)
        return None

    for directory in search.split(":"):
        candidate = directory + "/" + name
        if is_executable(candidate):
            log.debug("resolved %r to %s", name, candidate)
            return ResolvedPath(candidate, PathOrigin.SEARCHED)
        log.debug("skipping %s", candidate)
    return None
