"""Tests for post-bump actions: the after-run hook and git commit/tag."""

from pathlib import Path
from unittest.mock import MagicMock, Mock, call

import pytest
from invoke import Config, Context

from manifest_bump.actions.git import GitExecutor
from manifest_bump.actions.hook import HookExecutor
from manifest_bump.config.loader import Settings
from manifest_bump.core.exceptions import CommandError, GitError
from manifest_bump.core.models import Version


@pytest.fixture
def mock_context():
    """invoke Context whose commands all succeed."""
    ctx = MagicMock()
    ctx.run.return_value = Mock(failed=False, return_code=0, stderr="")
    return ctx


@pytest.fixture
def version():
    return Version.parse("1.2.3")


class TestHookExecutor:
    """Tests for HookExecutor."""

    def test_run_success(self, mock_context):
        HookExecutor(mock_context).run("npm run build")

        mock_context.run.assert_called_once_with("npm run build", warn=True)

    def test_run_in_directory(self, mock_context, tmp_path):
        HookExecutor(mock_context).run("make", cwd=tmp_path)

        mock_context.cd.assert_called_once_with(str(tmp_path))
        mock_context.run.assert_called_once_with("make", warn=True)

    def test_run_failure(self, mock_context):
        mock_context.run.return_value = Mock(failed=True, return_code=2, stderr="boom")

        with pytest.raises(CommandError, match="After-run command failed: make") as exc_info:
            HookExecutor(mock_context).run("make")

        assert exc_info.value.exit_code == 2

    def test_run_spawn_error(self, mock_context):
        mock_context.run.side_effect = OSError("no shell")

        with pytest.raises(CommandError, match="Failed to run after-run command") as exc_info:
            HookExecutor(mock_context).run("make")

        assert isinstance(exc_info.value.cause, OSError)

    @pytest.mark.parametrize("command", ["", "   "])
    def test_run_empty_command(self, mock_context, command):
        with pytest.raises(CommandError, match="After-run command is empty"):
            HookExecutor(mock_context).run(command)

        mock_context.run.assert_not_called()

    def test_real_shell_exit_code(self):
        """Test that a real nonzero exit status is reported."""
        context = Context(Config(overrides={"run": {"in_stream": False}}))

        with pytest.raises(CommandError) as exc_info:
            HookExecutor(context).run("exit 3")

        assert exc_info.value.exit_code == 3


class TestGitExecutor:
    """Tests for GitExecutor.

    The commit is created before the tag, so the tag points at the commit
    that contains the bumped manifest.
    """

    def test_commit_and_tag(self, mock_context, version):
        tag = GitExecutor(Settings(), mock_context).commit_and_tag(version, Path("manifest.json"))

        assert tag == "v1.2.3"
        assert mock_context.run.call_args_list == [
            call("git add manifest.json", hide=True, warn=True),
            call("git commit -m 'bump version v1.2.3'", hide=True, warn=True),
            call("git tag v1.2.3", hide=True, warn=True),
        ]

    def test_custom_message_and_signature(self, mock_context, version):
        GitExecutor(Settings(), mock_context).commit_and_tag(
            version, Path("manifest.json"), message="release it", sign=True
        )

        assert mock_context.run.call_args_list[1] == call("git commit -m 'release it' -S", hide=True, warn=True)

    def test_sign_from_settings(self, mock_context, version):
        GitExecutor(Settings(sign_commits=True), mock_context).commit_and_tag(version, Path("manifest.json"))

        expected = call("git commit -m 'bump version v1.2.3' -S", hide=True, warn=True)
        assert mock_context.run.call_args_list[1] == expected

    def test_custom_prefix_and_executable(self, mock_context, version):
        settings = Settings(tag_prefix="release-", git_executable="/usr/bin/git")

        tag = GitExecutor(settings, mock_context).commit_and_tag(version, Path("app/manifest.json"))

        assert tag == "release-1.2.3"
        assert mock_context.run.call_args_list == [
            call("/usr/bin/git add app/manifest.json", hide=True, warn=True),
            call("/usr/bin/git commit -m 'bump version release-1.2.3'", hide=True, warn=True),
            call("/usr/bin/git tag release-1.2.3", hide=True, warn=True),
        ]

    def test_path_with_spaces_is_quoted(self, mock_context):
        GitExecutor(Settings(), mock_context).stage(Path("my app/manifest.json"))

        mock_context.run.assert_called_once_with("git add 'my app/manifest.json'", hide=True, warn=True)

    def test_failure_stops_sequence(self, mock_context, version):
        """Test that a failing step raises and nothing after it runs."""
        mock_context.run.return_value = Mock(failed=True, return_code=128, stderr="fatal: not a git repository\n")

        with pytest.raises(GitError, match="git add failed: fatal: not a git repository") as exc_info:
            GitExecutor(Settings(), mock_context).commit_and_tag(version, Path("manifest.json"))

        assert exc_info.value.exit_code == 128
        assert mock_context.run.call_count == 1

    def test_spawn_error(self, mock_context):
        mock_context.run.side_effect = OSError("git not found")

        with pytest.raises(GitError, match="Failed to run git"):
            GitExecutor(Settings(), mock_context).tag("v1.0.0")

    def test_git_error_is_command_error(self):
        assert issubclass(GitError, CommandError)
