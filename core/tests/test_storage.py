"""Tests for storage layer -- paths, credential, settings."""
import json
from unittest.mock import MagicMock, patch


# =========================================================================
# atomic_write
# =========================================================================


class TestAtomicWrite:
    def test_atomic_write_text(self, tmp_path):
        from docker_heatmap.storage.paths import atomic_write
        target = tmp_path / "test.txt"
        atomic_write(target, "hello world")
        assert target.read_text() == "hello world"

    def test_atomic_write_bytes_are_decoded(self, tmp_path):
        from docker_heatmap.storage.paths import atomic_write
        target = tmp_path / "decoded.txt"
        atomic_write(target, b"bytes as text")
        assert target.read_text() == "bytes as text"

    def test_atomic_write_overwrite(self, tmp_path):
        from docker_heatmap.storage.paths import atomic_write
        target = tmp_path / "overwrite.txt"
        atomic_write(target, "first")
        atomic_write(target, "second")
        assert target.read_text() == "second"

    def test_atomic_write_creates_parents(self, tmp_path):
        from docker_heatmap.storage.paths import atomic_write
        target = tmp_path / "a" / "b" / "deep.txt"
        atomic_write(target, "deep")
        assert target.read_text() == "deep"

    def test_atomic_write_no_orphaned_tmp(self, tmp_path):
        from docker_heatmap.storage.paths import atomic_write
        target = tmp_path / "clean.txt"
        atomic_write(target, "data")
        assert not target.with_suffix(".txt.tmp").exists()


# =========================================================================
# Credential storage
# =========================================================================


class TestCredentialStorage:
    def test_save_and_load(self, isolated_storage):
        from docker_heatmap.storage import credentials
        credentials.save_credential("abc")
        assert credentials.load_credential() == "abc"

    def test_stored_under_fixed_key(self, isolated_storage):
        from docker_heatmap.storage import credentials
        credentials.save_credential("abc")
        data = json.loads((isolated_storage / "credentials.json").read_text())
        assert data == {"token": "abc"}

    def test_load_missing(self):
        from docker_heatmap.storage import credentials
        assert credentials.load_credential() is None

    def test_load_corrupt_returns_none(self, isolated_storage):
        from docker_heatmap.storage import credentials
        (isolated_storage / "credentials.json").write_text("not json {{", encoding="utf-8")
        assert credentials.load_credential() is None

    def test_load_empty_token_returns_none(self, isolated_storage):
        from docker_heatmap.storage import credentials
        (isolated_storage / "credentials.json").write_text('{"token": ""}', encoding="utf-8")
        assert credentials.load_credential() is None

    def test_delete(self, isolated_storage):
        from docker_heatmap.storage import credentials
        credentials.save_credential("abc")
        credentials.delete_credential()
        assert not (isolated_storage / "credentials.json").exists()
        assert credentials.load_credential() is None

    def test_delete_missing_file(self):
        from docker_heatmap.storage import credentials
        credentials.delete_credential()  # should not raise

    def test_delete_does_not_raise_on_error(self):
        from docker_heatmap.storage import credentials
        mock_path = MagicMock()
        mock_path.exists.return_value = True
        mock_path.unlink.side_effect = OSError("permission denied")

        with patch.object(credentials, "CREDENTIALS_FILE", mock_path):
            credentials.delete_credential()


# =========================================================================
# AppSettings
# =========================================================================


class TestAppSettings:
    def test_defaults(self):
        from docker_heatmap.storage.config import AppSettings, DEFAULT_API_URL
        settings = AppSettings.load()
        assert settings["api_url"] == DEFAULT_API_URL
        assert settings["debug"] is False

    def test_set_and_get(self):
        from docker_heatmap.storage.config import AppSettings
        AppSettings.set("debug", True)
        AppSettings.set("timeout", 5)
        assert AppSettings.get("debug") is True
        assert AppSettings.get("timeout") == 5

    def test_unknown_key_returns_default(self):
        from docker_heatmap.storage.config import AppSettings
        assert AppSettings.get("nonexistent") is None
        assert AppSettings.get("nonexistent", 42) == 42

    def test_corrupt_file_returns_defaults(self, isolated_storage):
        from docker_heatmap.storage.config import AppSettings
        (isolated_storage / "settings.json").write_text("{{invalid json")
        assert AppSettings.load()["debug"] is False

    def test_env_overrides_file(self, monkeypatch):
        from docker_heatmap.storage import config
        config.AppSettings.set("api_url", "https://file.test/api")
        assert config.api_url() == "https://file.test/api"
        monkeypatch.setenv("DOCKER_HEATMAP_API_URL", "https://env.test/api/")
        assert config.api_url() == "https://env.test/api"

    def test_frontend_url(self, monkeypatch):
        from docker_heatmap.storage import config
        assert config.frontend_url() == config.DEFAULT_FRONTEND_URL
        monkeypatch.setenv("DOCKER_HEATMAP_FRONTEND_URL", "https://app.test/")
        assert config.frontend_url() == "https://app.test"
