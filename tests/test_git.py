"""Tests for toolbelt.git package."""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from toolbelt.git import (
    GitError,
    _run_git_command,
    commit_with_message,
    get_branch_diff,
    get_branch_log,
    get_commit_diff,
    get_current_branch,
    get_head_commit,
    get_local_diff,
    get_repo_root,
    get_staged_diff,
    list_branches,
    list_commits,
    resolve_commit,
    target_branch_choices,
)
from toolbelt.git.log import BRANCH_LOG_FORMAT, COMMIT_SEPARATOR


def completed(stdout: str = "", returncode: int = 0) -> MagicMock:
    result = MagicMock()
    result.stdout = stdout
    result.returncode = returncode
    return result


class TestRunGitCommand:
    """Tests for _run_git_command function."""

    def test_successful_command(self, mock_git_commands):
        """Test successful git command execution."""
        mock_git_commands.return_value = completed("output\n")

        assert _run_git_command(["status"]) == "output"
        args = mock_git_commands.call_args.args[0]
        assert args == ["git", "--no-pager", "status"]

    def test_keeps_whitespace_when_asked(self, mock_git_commands):
        """Test strip=False."""
        mock_git_commands.return_value = completed(" output\n")

        assert _run_git_command(["status"], strip=False) == " output\n"

    def test_failed_command_raises_error(self, mock_git_commands):
        """Test that failed command raises GitError with stderr."""
        mock_git_commands.side_effect = subprocess.CalledProcessError(
            128, "git", stderr="fatal: bad revision"
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["show", "nope"])

        assert "Git command failed: git show nope" in str(exc_info.value)
        assert "fatal: bad revision" in str(exc_info.value)

    def test_git_not_installed(self, mock_git_commands):
        """Test a missing git binary."""
        mock_git_commands.side_effect = FileNotFoundError()

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["status"])

        assert "not installed" in str(exc_info.value)


class TestGetRepoRoot:
    """Tests for get_repo_root function."""

    def test_returns_path(self, mocker):
        """Test the repository root."""
        mocker.patch("toolbelt.git.runner._run_git_command", return_value="/home/user/repo")
        assert get_repo_root() == Path("/home/user/repo")

    def test_not_a_repo(self, mocker):
        """Test the error outside a repository."""
        mocker.patch("toolbelt.git.runner._run_git_command", side_effect=GitError("fatal"))

        with pytest.raises(GitError) as exc_info:
            get_repo_root()

        assert "Not in a git repository" in str(exc_info.value)


class TestBranches:
    """Tests for branch helpers."""

    def test_get_current_branch(self, mocker):
        """Test get_current_branch command."""
        mock_run = mocker.patch("toolbelt.git.branch._run_git_command", return_value="feature/x")

        assert get_current_branch() == "feature/x"
        mock_run.assert_called_once_with(["rev-parse", "--abbrev-ref", "HEAD"])

    def test_list_branches(self, mocker):
        """Test list_branches parsing."""
        mocker.patch("toolbelt.git.branch._run_git_command", return_value="dev\nfeature/x\nmain\n")
        assert list_branches() == ["dev", "feature/x", "main"]

    def test_target_choices_exclude_current_and_put_main_first(self, mocker):
        """Test target branch ordering."""
        mocker.patch("toolbelt.git.branch._run_git_command", return_value="dev\nfeature/x\nmain")
        assert target_branch_choices("feature/x") == ["main", "dev"]

    def test_target_choices_without_main(self, mocker):
        """Test target branches when there is no main."""
        mocker.patch("toolbelt.git.branch._run_git_command", return_value="dev\nfeature/x")
        assert target_branch_choices("feature/x") == ["dev"]


class TestDiffs:
    """Tests for diff helpers."""

    @pytest.fixture
    def mock_run(self, mocker):
        return mocker.patch("toolbelt.git.diff._run_git_command", return_value="diff")

    def test_staged_diff(self, mock_run):
        """Test staged diff arguments."""
        get_staged_diff()
        mock_run.assert_called_once_with(["diff", "--cached", "--unified=1"])

    def test_local_diff(self, mock_run):
        """Test working tree diff arguments."""
        get_local_diff()
        mock_run.assert_called_once_with(["diff", "--unified=1"])

    def test_branch_diff(self, mock_run):
        """Test branch diff range."""
        get_branch_diff("main", "feature/x")
        mock_run.assert_called_once_with(["diff", "--unified=1", "main..feature/x"])

    def test_commit_diff_without_message(self, mock_run):
        """Test commit diff for reviews."""
        get_commit_diff("abc123")
        mock_run.assert_called_once_with(["show", "--unified=1", "--pretty=", "abc123"])

    def test_commit_diff_with_message(self, mock_run):
        """Test commit diff for rewrites."""
        get_commit_diff("abc123", include_message=True)
        mock_run.assert_called_once_with(["show", "--unified=1", "abc123"])


class TestLog:
    """Tests for log helpers."""

    def test_branch_log(self, mocker):
        """Test branch log arguments."""
        mock_run = mocker.patch("toolbelt.git.log._run_git_command", return_value="log")

        get_branch_log("main", "feature/x")

        mock_run.assert_called_once_with(["log", "--no-patch", BRANCH_LOG_FORMAT, "main..feature/x"])
        assert COMMIT_SEPARATOR in BRANCH_LOG_FORMAT

    def test_list_commits(self, mocker):
        """Test oneline parsing."""
        mocker.patch(
            "toolbelt.git.log._run_git_command",
            return_value="abc123 fix: thing\n\ndef456 feat: other",
        )
        assert list_commits() == ["abc123 fix: thing", "def456 feat: other"]

    def test_head_and_resolve(self, mocker):
        """Test hash resolution arguments."""
        mock_run = mocker.patch("toolbelt.git.log._run_git_command", return_value="f" * 40)

        assert get_head_commit() == "f" * 40
        resolve_commit("abc123")

        mock_run.assert_any_call(["rev-parse", "HEAD"])
        mock_run.assert_any_call(["rev-parse", "--verify", "abc123^{commit}"])


class TestCommitWithMessage:
    """Tests for commit_with_message function."""

    def test_plain_commit(self, mock_git_commands):
        """Test a plain commit."""
        mock_git_commands.return_value = completed()

        assert commit_with_message("fix: x\n\n- y\n") == 0
        mock_git_commands.assert_called_once_with(
            ["git", "commit", "--message", "fix: x\n\n- y\n"], check=False
        )

    def test_edit_and_amend(self, mock_git_commands):
        """Test flags for editing an amended commit."""
        mock_git_commands.return_value = completed()

        commit_with_message("msg", edit=True, amend=True)

        args = mock_git_commands.call_args.args[0]
        assert args == ["git", "commit", "--amend", "--only", "--edit", "--message", "msg"]

    def test_returns_git_status(self, mock_git_commands):
        """Test that a failed commit returns git's status."""
        mock_git_commands.return_value = completed(returncode=1)
        assert commit_with_message("msg") == 1

    def test_git_not_installed(self, mock_git_commands):
        """Test a missing git binary."""
        mock_git_commands.side_effect = FileNotFoundError()

        with pytest.raises(GitError):
            commit_with_message("msg")


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
class TestAmendInRepository:
    """Tests for amending HEAD in a real repository."""

    @pytest.fixture
    def repo(self, temp_dir, monkeypatch):
        """A repository with one commit of a.txt and unrelated.txt staged."""
        empty_config = temp_dir / "gitconfig"
        empty_config.write_text("")
        monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(empty_config))
        monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
        for var in ("GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME"):
            monkeypatch.setenv(var, "Test User")
        for var in ("GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL"):
            monkeypatch.setenv(var, "test@example.com")

        repo_dir = temp_dir / "repo"
        repo_dir.mkdir()
        monkeypatch.chdir(repo_dir)

        def git(*args):
            return subprocess.run(["git", *args], check=True, capture_output=True, text=True).stdout

        git("init", "--quiet")
        (repo_dir / "a.txt").write_text("a\n")
        git("add", "a.txt")
        git("commit", "--quiet", "--message", "first")
        (repo_dir / "unrelated.txt").write_text("staged but not part of HEAD\n")
        git("add", "unrelated.txt")
        return git

    def test_amend_rewrites_message_only(self, repo):
        """Test that amending leaves staged work in the index."""
        assert commit_with_message("fix: reword\n\n- body\n", amend=True) == 0

        assert repo("log", "-1", "--format=%s").strip() == "fix: reword"
        assert repo("show", "--name-only", "--format=", "HEAD").split() == ["a.txt"]
        assert repo("diff", "--cached", "--name-only").split() == ["unrelated.txt"]
