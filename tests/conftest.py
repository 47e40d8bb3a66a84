import pytest
import tempfile
from pathlib import Path
from git import Repo

RESOURCES = Path(__file__).parent / "resources"


@pytest.fixture
def resources_dir():
    return RESOURCES


@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")

        repo.index.add(["test.txt"])
        repo.index.commit("Initial commit")

        yield tmp_dir


@pytest.fixture
def temp_git_repo_with_bad_commit(temp_git_repo):
    """A repository whose HEAD commit has a lowercase title ending with a period."""
    repo = Repo(temp_git_repo)
    test_file = Path(temp_git_repo) / "test.txt"
    test_file.write_text("Changed content")
    repo.index.add(["test.txt"])
    repo.index.commit("change the content.")
    yield temp_git_repo


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove configuration environment variables for testing."""
    for name in (
        "GIT_COMMIT_MSG_TITLE_ALLOWED_CHARACTERS",
        "GIT_COMMIT_MSG_TITLE_MAX_LENGTH",
        "GIT_COMMIT_MSG_BODY_MAX_LINE_LENGTH",
        "GIT_COMMIT_MSG_FORMAT_DOCS_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
