import os
import sys

import pytest

# Ensure tests can import top-level modules when pytest changes CWD.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture
def reference_program() -> str:
    return "variable a = 10; print(a + 5);"
