# tests/conftest.py
"""
Shared fixtures: build small MySQL option file trees under `tmp_path`.
"""

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def cnf_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """
    Write `{relative path: content}` under `tmp_path`, return `tmp_path`.

    A path ending with `/` creates an empty directory.
    """

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8", newline="")
        return tmp_path

    return _make
