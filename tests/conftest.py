import os

import pytest

from hsh.config import ShellConfig


@pytest.fixture
def config():
    return ShellConfig(program_name="./hsh")


@pytest.fixture
def make_program(tmp_path):
    """Write a small sh script into tmp_path/<dirname>/<name>."""

    def _make(name, body="exit 0", dirname="bin", mode=0o755):
        directory = tmp_path / dirname
        directory.mkdir(exist_ok=True)
        path = directory / name
        path.write_text("#!/bin/sh\n" + body + "\n")
        os.chmod(path, mode)
        return path

    return _make
