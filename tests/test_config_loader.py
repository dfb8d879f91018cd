# tests/test_config_loader.py
"""Tests for loading host options from TOML configuration files."""
from pathlib import Path

import pytest

from viewkit.config import OptionsHost, apply_config, load_and_merge_configs, select_profile
from viewkit.exceptions import ConfigError


@pytest.fixture
def user_config(tmp_path: Path) -> Path:
    user_file = tmp_path / "user" / "config.toml"
    user_file.parent.mkdir()
    user_file.write_text(
        'layout = "user-layout"\n'
        'cache = false\n'
        '[profiles.shared]\n'
        'layout = "user-shared"\n'
        '[profiles.user_only]\n'
        'cache = true\n'
    )
    return user_file


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    proj = tmp_path / "project"
    proj.mkdir()
    (proj / ".viewkit.toml").write_text(
        'layout = "project-layout"\n'
        '[engine]\n'
        'default = ".hbs"\n'
        '[profiles.shared]\n'
        'layout = "project-shared"\n'
    )
    return proj


class TestLoadAndMergeConfigs:
    def test_project_overrides_user(self, project_dir, user_config):
        merged = load_and_merge_configs(cwd=project_dir, user_config_file=user_config)
        assert merged["layout"] == "project-layout"
        assert merged["cache"] is False
        assert merged["engine"] == {"default": ".hbs"}

    def test_profiles_merge_by_name(self, project_dir, user_config):
        merged = load_and_merge_configs(cwd=project_dir, user_config_file=user_config)
        assert merged["profiles"]["shared"] == {"layout": "project-shared"}
        assert merged["profiles"]["user_only"] == {"cache": True}

    def test_pyproject_tool_table(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.viewkit]\nlayout = "from-pyproject"\n')
        merged = load_and_merge_configs(cwd=tmp_path, user_config_file=tmp_path / "none.toml")
        assert merged == {"layout": "from-pyproject"}

    def test_invalid_toml_is_treated_as_empty(self, tmp_path):
        (tmp_path / "viewkit.toml").write_text("layout = = broken")
        assert load_and_merge_configs(cwd=tmp_path, user_config_file=tmp_path / "none.toml") == {}


class TestSelectProfile:
    def test_profile_overlays_top_level(self):
        data = {"layout": "a", "cache": False, "profiles": {"fast": {"cache": True}}}
        assert select_profile(data, "fast") == {"layout": "a", "cache": True}

    def test_no_profile_drops_profiles_table(self):
        assert select_profile({"layout": "a", "profiles": {}}, None) == {"layout": "a"}

    def test_unknown_profile_raises(self):
        with pytest.raises(ConfigError, match="missing"):
            select_profile({"profiles": {}}, "missing")


def test_apply_config_feeds_host_options():
    host = apply_config(OptionsHost(), {"layout": "blog", "engine": {"default": ".md"}})
    assert host.option("layout") == "blog"
    assert host.option("engine.default") == ".md"


def test_apply_config_requires_option_method():
    with pytest.raises(ConfigError):
        apply_config(object(), {"layout": "blog"})
