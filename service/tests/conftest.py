from pathlib import Path

import pytest

FILES_DIR = Path(__file__).parent / "files"


@pytest.fixture
def files_dir() -> Path:
    return FILES_DIR
