import os
from pathlib import Path
import pytest
from routeviz import constants
from routeviz.config import RouteConfig, load_config

ENV_VARS = [
    "ROUTEVIZ_ORIGIN_LATITUDE",
    "ROUTEVIZ_ORIGIN_LONGITUDE",
    "ROUTEVIZ_DEFAULT_ZOOM",
    "ROUTEVIZ_DATA_DIR",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "missing.env"


def test_defaults(clean_env):
    config = load_config(clean_env)
    assert config == RouteConfig()
    assert config.origin == (constants.LAT0, constants.LON0)
    assert config.default_zoom == 15


def test_environment_overrides(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("ROUTEVIZ_ORIGIN_LATITUDE", "49.26")
    monkeypatch.setenv("ROUTEVIZ_ORIGIN_LONGITUDE", "-123.25")
    monkeypatch.setenv("ROUTEVIZ_DEFAULT_ZOOM", "12")
    monkeypatch.setenv("ROUTEVIZ_DATA_DIR", str(tmp_path))

    config = load_config(clean_env)

    assert config.origin == (49.26, -123.25)
    assert config.default_zoom == 12
    assert config.data_dir == Path(tmp_path)


def test_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ROUTEVIZ_DEFAULT_ZOOM=10\n", encoding="utf-8")
    try:
        assert load_config(env_file).default_zoom == 10
    finally:
        # load_dotenv writes into os.environ
        os.environ.pop("ROUTEVIZ_DEFAULT_ZOOM", None)


def test_invalid_number(clean_env, monkeypatch):
    monkeypatch.setenv("ROUTEVIZ_DEFAULT_ZOOM", "close")
    with pytest.raises(ValueError, match="ROUTEVIZ_DEFAULT_ZOOM"):
        load_config(clean_env)
