import json

import pytest

from html2react.config import ConfigManager, load_project_settings
from html2react.core.exceptions import ConfigurationError


class TestConfigManager:

    def test_packaged_defaults_loaded(self):
        cfg = ConfigManager()

        props = cfg.get_props_map()
        assert props["class"] == "className"
        assert props["for"] == "htmlFor"
        assert cfg.get_transpiler_config()["entry_component"] == "App"
        assert cfg.get_logging_config()["version"] == 1

    def test_singleton(self):
        assert ConfigManager() is ConfigManager()

    def test_reset_creates_new_instance(self):
        first = ConfigManager()
        ConfigManager.reset()
        assert ConfigManager() is not first

    def test_defaults_copied_to_user_dir(self, isolated_config):
        ConfigManager()
        for filename in ("props_map.yml", "transpiler.yml", "logging.yml"):
            assert (isolated_config / filename).is_file()

    def test_user_overrides_merged(self, isolated_config):
        isolated_config.mkdir(parents=True)
        (isolated_config / "transpiler.yml").write_text(
            "entry_component: Home\nscaffold_enabled: false\n", encoding="utf-8"
        )

        cfg = ConfigManager().get_transpiler_config()

        assert cfg["entry_component"] == "Home"
        assert cfg["scaffold_enabled"] is False
        assert cfg["entry_document"] == "index.html"

    def test_invalid_user_override_ignored(self, isolated_config):
        isolated_config.mkdir(parents=True)
        (isolated_config / "props_map.yml").write_text("class: [unclosed\n", encoding="utf-8")

        assert ConfigManager().get_props_map()["class"] == "className"

    def test_props_map_is_a_copy(self):
        cfg = ConfigManager()
        cfg.get_props_map()["class"] = "nope"
        assert cfg.get_props_map()["class"] == "className"


class TestProjectSettings:

    def test_relative_paths_resolved_against_config_file(self, tmp_path):
        config_path = tmp_path / "proj" / "config.json"
        config_path.parent.mkdir()
        config_path.write_text(json.dumps({"src_dir": "site", "dest_dir": "../out"}), encoding="utf-8")

        settings = load_project_settings(config_path)

        assert settings.src_dir == (tmp_path / "proj" / "site").resolve()
        assert settings.dest_dir == (tmp_path / "out").resolve()

    def test_yaml_project_file(self, tmp_path):
        config_path = tmp_path / "project.yml"
        config_path.write_text("src_dir: site\ndest_dir: app\n", encoding="utf-8")
        assert load_project_settings(config_path).dest_dir == (tmp_path / "app").resolve()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_project_settings(tmp_path / "config.json")

    @pytest.mark.parametrize("content", [
        '{"src_dir": "site"}',
        '{"dest_dir": "app", "src_dir": ""}',
        '["site", "app"]',
    ])
    def test_invalid_content(self, tmp_path, content):
        config_path = tmp_path / "config.json"
        config_path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_project_settings(config_path)
