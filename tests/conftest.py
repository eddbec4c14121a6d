import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Single offscreen QApplication shared by all Qt tests."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app
