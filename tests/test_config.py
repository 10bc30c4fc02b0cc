"""Tests for config file loading."""

import yaml

from dmenu_facade import config


def test_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert config.get_config_dir() == tmp_path / "dmenu-facade"
    assert config.get_config_path() == tmp_path / "dmenu-facade" / "config.yaml"


def test_missing_file_gives_defaults(tmp_path):
    cfg = config.load_config(tmp_path / "nope.yaml")
    assert cfg == config.DEFAULT_CONFIG
    assert cfg is not config.DEFAULT_CONFIG


def test_defaults_are_not_shared(tmp_path):
    cfg = config.load_config(tmp_path / "nope.yaml")
    cfg["menu"]["colors"]["normal_background"] = "#000000"
    assert config.DEFAULT_CONFIG["menu"]["colors"]["normal_background"] is None


def test_deep_merge(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({
        "debug": True,
        "menu": {"prompt": "run:", "colors": {"selected_background": "#ff0000"}},
    }))
    cfg = config.load_config(path)
    assert cfg["debug"] is True
    assert cfg["menu"]["prompt"] == "run:"
    assert cfg["menu"]["program"] == "dmenu"
    assert cfg["menu"]["colors"]["selected_background"] == "#ff0000"
    assert cfg["menu"]["colors"]["normal_background"] is None


def test_malformed_yaml_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("menu: [unclosed\n")
    assert config.load_config(path) == config.DEFAULT_CONFIG


def test_non_mapping_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")
    assert config.load_config(path) == config.DEFAULT_CONFIG


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    cfg = config.load_config(path)
    cfg["menu"]["lines"] = 7
    config.save_config(cfg, path)
    assert config.load_config(path)["menu"]["lines"] == 7


def test_is_debug_enabled():
    assert config.is_debug_enabled({"debug": True}) is True
    assert config.is_debug_enabled({}) is False
