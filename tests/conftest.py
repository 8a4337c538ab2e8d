# third-party
import pytest

# local
from importorder import config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    # ignore user config files and environment of the machine running the tests
    monkeypatch.delenv(config.ENV_ORDER, raising=False)
    monkeypatch.setattr(config, 'user_config_file',
                        lambda: tmp_path / 'user' / config.FILENAME)
