import logging
from dataclasses import dataclass
from itertools import islice
from typing import Tuple

from hsh.config import DELIMITERS, MAX_ARGS

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """One parsed invocation; args[0] is always the command name."""

    name: str
    args: Tuple[str, ...]

    @property
    def arg_count(self):
        return len(self.args)


def _words(text, delims):
    word = []
    for ch in text:
        if ch in delims:
            if word:
                yield "".join(word)
                word = []
        else:
            word.append(ch)
    if word:
        yield "".join(word)


def split_words(text, delims=DELIMITERS, limit=MAX_ARGS):
    """Lazily yield the non-empty words of text, at most `limit` of them."""
    return islice(_words(text, delims), limit)


def parse_line(line, max_args=MAX_ARGS):
    # returns None when there is nothing to run
    line = line.rstrip("\n")
    stripped = line.lstrip(DELIMITERS)
    if not stripped:
        return None

    # one extra word tells us whether anything was cut off
    tokens = tuple(split_words(stripped, DELIMITERS, max_args + 1))
    if len(tokens) > max_args:
        log.debug("dropped words past %d in %r", max_args, line)
        tokens = tokens[:max_args]
    return Command(name=tokens[0], args=tokens)
