import os

# Must be set before importing kivy
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_WINDOW", "mock")
os.environ.setdefault("KIVY_GL_BACKEND", "mock")
os.environ.setdefault("KIVY_LOG_MODE", "PYTHON")

import pytest  # noqa: E402


@pytest.fixture
def clean_env(monkeypatch):
    """Ensure no env vars interfere with tests."""
    monkeypatch.delenv("CLOSUREPLAY_DEFAULT_STEP", raising=False)
    monkeypatch.delenv("CLOSUREPLAY_BITS", raising=False)
    monkeypatch.delenv("CLOSUREPLAY_OVERFLOW", raising=False)


@pytest.fixture
def mock_cfg(monkeypatch, tmp_path, clean_env):
    from closureplay import config

    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "doesnotexist.ini")
    monkeypatch.setattr(config, "GLOBAL_CONFIG_PATH", tmp_path / "alsodoesnotexist.ini")

    cfg = config.load_config()

    return cfg
