# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

from pathlib import Path
from unittest.mock import mock_open, patch

import pytest

from diffview.context import DiffConfig
from diffview.core.config.config_loader import ConfigLoader
from diffview.core.exceptions import ConfigurationError

# -----------------------------------------------------------------------------
# Sources
# -----------------------------------------------------------------------------


def test_load_toml_exists():
    """Test loading a valid TOML file."""
    toml_content = b'theme = "mono"\nwidth = 100'
    with patch("builtins.open", mock_open(read_data=toml_content)):
        with patch("pathlib.Path.exists", return_value=True):
            data = ConfigLoader.load_toml(Path("config.toml"))
            assert data == {"theme": "mono", "width": 100}


def test_load_toml_not_exists(tmp_path):
    assert ConfigLoader.load_toml(tmp_path / "missing.toml") == {}


def test_load_toml_invalid(tmp_path):
    bad = tmp_path / "bad.toml"
    bad.write_text("this is = = not toml")
    assert ConfigLoader.load_toml(bad) == {}


def test_load_env_lowercases_keys(monkeypatch):
    monkeypatch.setenv("DVTEST_THEME", "ocean")
    monkeypatch.setenv("DVTEST_WIDTH", "100")
    monkeypatch.setenv("OTHER_THEME", "mono")

    assert ConfigLoader.load_env("DVTEST_") == {"theme": "ocean", "width": "100"}


# -----------------------------------------------------------------------------
# Merging
# -----------------------------------------------------------------------------


@pytest.fixture
def config_files(tmp_path):
    local = tmp_path / "local.toml"
    global_ = tmp_path / "global.toml"
    custom = tmp_path / "custom.toml"
    return local, global_, custom


def load(config_files, input_args, custom=False):
    local, global_, custom_path = config_files
    return ConfigLoader.get_full_config(
        DiffConfig,
        input_args,
        custom_config_path=custom_path if custom else None,
        local_config_path=local,
        env_app_prefix="DVTEST_",
        global_config_path=global_,
    )


def test_defaults_when_nothing_is_set(config_files):
    config, sources, used_defaults = load(config_files, {})

    assert config == DiffConfig()
    assert sources == []
    assert used_defaults


def test_priority_order(config_files, monkeypatch):
    local, global_, custom = config_files
    global_.write_text('theme = "ocean"\nwidth = 30\nverbose = true\nsilent = true')
    monkeypatch.setenv("DVTEST_WIDTH", "40")
    local.write_text("width = 50\nsilent = false")
    custom.write_text('theme = "mono"')

    config, sources, used_defaults = load(
        config_files, {"width": 120}, custom=True
    )

    assert config.width == 120
    assert config.theme == "mono"
    assert config.silent is False
    assert config.verbose is True
    assert sources == ["Input Args", "Custom Config", "Local Config", "Global Config"]
    assert not used_defaults


def test_env_values_are_coerced(config_files, monkeypatch):
    monkeypatch.setenv("DVTEST_VERBOSE", "true")
    monkeypatch.setenv("DVTEST_WIDTH", "64")

    config, sources, _ = load(config_files, {})

    assert config.verbose is True
    assert config.width == 64
    assert sources == ["Environment Variables"]


def test_invalid_values_raise_configuration_error(config_files):
    with pytest.raises(ConfigurationError):
        load(config_files, {"theme": "neon"})

    with pytest.raises(ConfigurationError):
        load(config_files, {"width": 5})
