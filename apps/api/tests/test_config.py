from pathlib import Path

from stackmgr.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("APP_NAME", "DATABASE_URL", "DOCKER_BINARY_PATH"):
            monkeypatch.delenv(key, raising=False)

        settings = Settings(_env_file=None)

        assert settings.app_name == "Stack Manager API"
        assert settings.database_url == "sqlite:///./stackmgr.db"
        assert settings.docker_binary_path == Path("/usr/local/bin")

    def test_docker_binary_path_from_env(self, monkeypatch):
        monkeypatch.setenv("DOCKER_BINARY_PATH", "/srv/assets")

        settings = Settings(_env_file=None)

        assert settings.docker_binary_dir == "/srv/assets"
        assert settings.docker_binary_path == Path("/srv/assets")
