"""Tests for the operator CLI."""

from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from budget_splitter.cli.main import app
from budget_splitter.core.config import BotConfig
from budget_splitter.storage.category_store import CategoryStore

runner = CliRunner()


@pytest.fixture
def env_file(monkeypatch, tmp_path):
    """A .env file with both required variables and nothing in os.environ."""
    for name in ("TELEGRAM_BOT_TOKEN", "ADMIN_TELEGRAM_ID", "BUDGET_CACHE_FILE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    path = tmp_path / ".env"
    path.write_text("TELEGRAM_BOT_TOKEN=999:xyz\nADMIN_TELEGRAM_ID=55\n", encoding="utf-8")
    return path


class TestRunCommand:
    """Tests for `budget-splitter run`."""

    def test_run_passes_loaded_config_to_bot(self, env_file, tmp_path):
        """Test that the config built from the env file reaches run_bot."""
        cache = tmp_path / "cache.json"

        with patch("budget_splitter.bot.telegram_bot.run_bot", new_callable=AsyncMock) as run_bot:
            result = runner.invoke(
                app, ["run", "--env-file", str(env_file), "--cache-file", str(cache)]
            )

        assert result.exit_code == 0
        config, store = run_bot.await_args.args
        assert isinstance(config, BotConfig)
        assert config.admin_telegram_id == 55
        assert config.cache_file == cache
        assert isinstance(store, CategoryStore)

    def test_run_without_token_exits(self, env_file):
        """Test that missing configuration is a fatal startup error."""
        env_file.write_text("ADMIN_TELEGRAM_ID=55\n", encoding="utf-8")

        with patch("budget_splitter.bot.telegram_bot.run_bot", new_callable=AsyncMock) as run_bot:
            result = runner.invoke(app, ["run", "--env-file", str(env_file)])

        assert result.exit_code == 1
        run_bot.assert_not_called()
