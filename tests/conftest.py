from __future__ import annotations

from pathlib import Path

import pytest

from metaimport.config import MetaImportConfig
from tests._fixtures.git_runner import FakeGitRunner


@pytest.fixture
def git_runner() -> FakeGitRunner:
    """Provide a fake git runner serving a small Go repository."""
    return FakeGitRunner(
        [
            "README.md",
            "go.mod",
            "main.go",
            "sub/lib.go",
            "sub/lib_test.go",
            "sub/testdata/fixture.go",
            "sub/_hidden.go",
            ".github/tools/gen.go",
        ],
        default_branch="main",
        branches=["dev"],
    )


@pytest.fixture
def config(tmp_path: Path) -> MetaImportConfig:
    """Default configuration rooted at the pytest tmp_path."""
    return MetaImportConfig(root=tmp_path)
