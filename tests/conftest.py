# conftest.py
import sys
from pathlib import Path

import pytest
from click.testing import Result

FIXTURES = Path(__file__).resolve().parent / "fixtures"

LINES = [
    b"Voici la ligne une.\n",
    "Qui è la linea due.\n".encode("utf-8"),
    b"\n",
    b"\n",
    "Aquí está la línea tres.\n".encode("utf-8"),
    b"Hier ist Zeile vier.\n",
    b"\n",
    "Está aqui a linha cinco.\n".encode("utf-8"),
    b"Here is line six.\n",
]

_seen_results = []

def _track_result_init(self, *args, **kwargs):
    _original_result_init(self, *args, **kwargs)
    _seen_results.append(self)

_original_result_init = Result.__init__

def pytest_configure(config):
    Result.__init__ = _track_result_init

def pytest_runtest_makereport(item, call):
    if call.when == "call" and call.excinfo:
        for result in _seen_results:
            if not isinstance(result, Result):
                continue
            if result.output:
                print("\n[CliRunner Output (combined)]", file=sys.stderr)
                print(result.output, file=sys.stderr)
        _seen_results.clear()


@pytest.fixture
def lines_path():
    return FIXTURES / "lines.txt"


@pytest.fixture
def lines_io(lines_path):
    """lines.txt opened for binary reading, positioned at byte 0."""
    fh = open(lines_path, "rb")
    yield fh
    fh.close()


@pytest.fixture
def expected_lines():
    return list(LINES)

