import enum
from dataclasses import dataclass
from typing import Optional


class FailureKind(enum.Enum):
    NOT_FOUND = 127
    PERMISSION = 126
    CREATION = 1


@dataclass(frozen=True)
class BuiltinHandled:
    status = 0


@dataclass(frozen=True)
class ExternalExit:
    """How a child terminated: normal exit code, or the killing signal."""

    code: int
    signal: Optional[int] = None

    @property
    def status(self):
        return self.code

    @property
    def signaled(self):
        return self.signal is not None


@dataclass(frozen=True)
class ExecutionError:
    kind: FailureKind
    message: str

    @property
    def status(self):
        # never zero, so a failed launch can't read as success
        return self.kind.value
