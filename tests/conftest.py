import io

import pytest
from rich.console import Console


SAMPLE_LINES = [
    "192.168.1.1:01.01.2023",
    "192.168.1.1:02.01.2023",
    "10.0.0.1:01.01.2023",
]


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, force_terminal=False)


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "access.log"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path
