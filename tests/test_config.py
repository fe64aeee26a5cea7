from pathlib import Path

from whatdo.config import Settings, default_list_path


def test_default_path_uses_xdg_config_home(tmp_path: Path) -> None:
    path = default_list_path({"XDG_CONFIG_HOME": str(tmp_path)})
    assert path == tmp_path / "whatdo" / "list.toml"


def test_default_path_falls_back_to_home_config() -> None:
    path = default_list_path({})
    assert path == Path.home() / ".config" / "whatdo" / "list.toml"


def test_settings_from_env_overrides(tmp_path: Path) -> None:
    settings = Settings.from_env({
        "WHATDO_LIST_PATH": str(tmp_path / "mine.toml"),
        "WHATDO_LOG_LEVEL": "debug",
    })
    assert settings.list_path == tmp_path / "mine.toml"
    assert settings.log_level == "DEBUG"


def test_settings_defaults(tmp_path: Path) -> None:
    settings = Settings.from_env({"XDG_CONFIG_HOME": str(tmp_path)})
    assert settings.list_path == tmp_path / "whatdo" / "list.toml"
    assert settings.log_level == "WARNING"
