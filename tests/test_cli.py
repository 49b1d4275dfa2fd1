"""Tests for the checkpwn command line."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner

from checkpwn.cli import main
from checkpwn.config import CheckpwnConfig
from checkpwn.errors import UpstreamRejected
from checkpwn.hibp.client import BreachChecker
from checkpwn.hibp.hashing import SecretBuffer
from checkpwn.hibp.models import (
    AccountCheckResult,
    BreachVerdict,
    PasswordCheckResult,
    RemoteStatus,
)


def account_result(identifier: str, verdict: BreachVerdict) -> AccountCheckResult:
    return AccountCheckResult(
        identifier=identifier,
        verdict=verdict,
        account_status=RemoteStatus.found() if verdict is BreachVerdict.BREACHED else RemoteStatus.not_found(),
        paste_status=RemoteStatus.not_found(),
    )


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def no_session():
    with patch.object(BreachChecker, "_ensure_session", new=AsyncMock(return_value=MagicMock())):
        yield


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("HIBP_API_KEY", "test-api-key")


class TestAcc:

    def test_breached(self, runner, api_key, no_session):
        mock_check = AsyncMock(return_value=account_result("test@example.com", BreachVerdict.BREACHED))
        with patch.object(BreachChecker, "check_account", new=mock_check):
            result = runner.invoke(main, ["acc", "test@example.com"])

        assert result.exit_code == 0
        assert "Breach status for test@example.com: BREACH FOUND" in result.output
        mock_check.assert_awaited_once_with("test@example.com")

    def test_not_breached(self, runner, api_key, no_session):
        mock_check = AsyncMock(return_value=account_result("test@example.com", BreachVerdict.NOT_BREACHED))
        with patch.object(BreachChecker, "check_account", new=mock_check):
            result = runner.invoke(main, ["acc", "test@example.com"])

        assert result.exit_code == 0
        assert "NO BREACH FOUND" in result.output

    def test_missing_api_key(self, runner):
        result = runner.invoke(main, ["acc", "test@example.com"])

        assert result.exit_code == 1
        assert "Error (configuration)" in result.output

    def test_key_from_config_file(self, runner, no_session):
        CheckpwnConfig(api_key="stored-key").save()
        mock_check = AsyncMock(return_value=account_result("someone", BreachVerdict.NOT_BREACHED))
        with patch.object(BreachChecker, "check_account", new=mock_check):
            result = runner.invoke(main, ["acc", "someone"])

        assert result.exit_code == 0

    def test_upstream_rejected(self, runner, api_key, no_session):
        mock_check = AsyncMock(side_effect=UpstreamRejected("@@@"))
        with patch.object(BreachChecker, "check_account", new=mock_check):
            result = runner.invoke(main, ["acc", "@@@"])

        assert result.exit_code == 1
        assert "Error (decision)" in result.output

    def test_list_file_skips_blank_lines(self, runner, api_key, no_session, tmp_path):
        list_file = tmp_path / "accounts.ls"
        list_file.write_text("test@example.com\n\n")
        mock_check = AsyncMock(return_value=account_result("test@example.com", BreachVerdict.BREACHED))

        with patch.object(BreachChecker, "check_account", new=mock_check):
            result = runner.invoke(main, ["acc", str(list_file)])

        assert result.exit_code == 0
        mock_check.assert_awaited_once_with("test@example.com")

    def test_list_file_aborts_by_default(self, runner, api_key, no_session, tmp_path):
        list_file = tmp_path / "accounts.ls"
        list_file.write_text("bad\ngood\n")
        mock_check = AsyncMock(side_effect=[
            UpstreamRejected("bad"),
            account_result("good", BreachVerdict.NOT_BREACHED),
        ])

        with patch.object(BreachChecker, "check_account", new=mock_check):
            result = runner.invoke(main, ["acc", str(list_file)])

        assert result.exit_code == 1
        assert mock_check.await_count == 1

    def test_list_file_keep_going(self, runner, api_key, no_session, tmp_path):
        list_file = tmp_path / "accounts.ls"
        list_file.write_text("bad\ngood\n")
        mock_check = AsyncMock(side_effect=[
            UpstreamRejected("bad"),
            account_result("good", BreachVerdict.NOT_BREACHED),
        ])

        with patch.object(BreachChecker, "check_account", new=mock_check):
            result = runner.invoke(main, ["acc", "--keep-going", str(list_file)])

        assert result.exit_code == 1
        assert mock_check.await_count == 2
        assert "Breach status for good: NO BREACH FOUND" in result.output

    def test_missing_list_file(self, runner, api_key, no_session, tmp_path):
        result = runner.invoke(main, ["acc", str(tmp_path / "missing.ls")])

        assert result.exit_code == 1
        assert "Error (input)" in result.output


class TestPass:

    def test_password_redacted(self, runner, no_session):
        mock_check = AsyncMock(return_value=PasswordCheckResult(
            verdict=BreachVerdict.BREACHED, occurrences=3912, hash_prefix="B1B37",
        ))
        with patch.object(BreachChecker, "check_password", new=mock_check):
            result = runner.invoke(main, ["pass"], input="qwerty\n")

        assert result.exit_code == 0
        assert "Breach status for ********: BREACH FOUND" in result.output
        secret = mock_check.await_args.args[0]
        assert isinstance(secret, SecretBuffer)
        assert not any(secret.data)

    def test_not_pwned(self, runner, no_session):
        mock_check = AsyncMock(return_value=PasswordCheckResult(hash_prefix="ABCDE"))
        with patch.object(BreachChecker, "check_password", new=mock_check):
            result = runner.invoke(main, ["pass"], input="correct horse battery staple\n")

        assert result.exit_code == 0
        assert "NO BREACH FOUND" in result.output


class TestRegister:

    def test_register_saves_key(self, runner, isolated_config):
        result = runner.invoke(main, ["register", "abc123"])

        assert result.exit_code == 0
        assert CheckpwnConfig.load().api_key == "abc123"
        assert (isolated_config / "checkpwn.yml").exists()

    def test_register_requires_argument(self, runner):
        result = runner.invoke(main, ["register"])
        assert result.exit_code != 0


def test_config_command(runner):
    result = runner.invoke(main, ["config"])

    assert result.exit_code == 0
    assert "Not set" in result.output


def test_unknown_command(runner):
    result = runner.invoke(main, ["wrong", "test@example.com"])
    assert result.exit_code != 0
    assert "Usage" in result.output
