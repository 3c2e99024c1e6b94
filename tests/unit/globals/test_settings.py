"""Unit tests for settings discovery and loading."""

import io
import logging
from pathlib import Path

from rich.console import Console

from issue_handler.globals.settings import (
    SETTINGS_FILENAME,
    Settings,
    find_settings_file,
    load_settings,
)


class TestFindSettingsFile:
    def test_finds_file_in_start_directory(self, tmp_path):
        settings_file = tmp_path / SETTINGS_FILENAME
        settings_file.write_text("colorize: false\n")

        assert find_settings_file(tmp_path, home=tmp_path / "home") == settings_file.resolve()

    def test_walks_up_to_parents(self, tmp_path):
        settings_file = tmp_path / SETTINGS_FILENAME
        settings_file.write_text("colorize: false\n")
        nested = tmp_path / "src" / "lib"
        nested.mkdir(parents=True)

        assert find_settings_file(nested, home=tmp_path / "home") == settings_file.resolve()

    def test_falls_back_to_home(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        home = tmp_path / "home"
        home.mkdir()
        settings_file = home / SETTINGS_FILENAME
        settings_file.write_text("colorize: true\n")

        assert find_settings_file(project, home=home) == settings_file

    def test_nothing_found(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()

        assert find_settings_file(project, home=tmp_path / "home") is None

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        settings_file = tmp_path / SETTINGS_FILENAME
        settings_file.write_text("{}\n")
        monkeypatch.chdir(tmp_path)

        assert find_settings_file(home=tmp_path / "home") == settings_file.resolve()


class TestLoadSettings:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / SETTINGS_FILENAME
        path.write_text("colorize: false\ncolors:\n  file: bold.blue\n  caret: green\n")

        settings = load_settings(path)

        assert settings.colorize is False
        assert settings.colors == {"file": "bold.blue", "caret": "green"}
        assert settings.path == path

    def test_json_file(self, tmp_path):
        path = tmp_path / SETTINGS_FILENAME
        path.write_text('{"colorize": true, "colors": {"note": null}}')

        settings = load_settings(path)

        assert settings.colorize is True
        assert settings.colors == {"note": None}

    def test_empty_file(self, tmp_path):
        path = tmp_path / SETTINGS_FILENAME
        path.write_text("")

        settings = load_settings(path)

        assert settings.colorize is None
        assert settings.colors == {}

    def test_missing_file(self, tmp_path):
        settings = load_settings(tmp_path / "missing")

        assert settings == Settings()

    def test_malformed_yaml(self, tmp_path, caplog):
        path = tmp_path / SETTINGS_FILENAME
        path.write_text("colors: [unclosed\n")

        with caplog.at_level(logging.WARNING):
            settings = load_settings(path)

        assert settings == Settings()
        assert "Could not parse settings file" in caplog.text

    def test_wrong_types_are_dropped(self, tmp_path):
        path = tmp_path / SETTINGS_FILENAME
        path.write_text("colorize: sometimes\ncolors: [red]\n")

        settings = load_settings(path)

        assert settings.colorize is None
        assert settings.colors == {}

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / SETTINGS_FILENAME
        path.write_text("- colorize\n")

        assert load_settings(path) == Settings()

    def test_discovers_file(self, tmp_path, monkeypatch):
        (tmp_path / SETTINGS_FILENAME).write_text("colorize: false\n")
        monkeypatch.chdir(tmp_path)

        settings = load_settings()

        assert settings.colorize is False
        assert settings.path == Path(tmp_path / SETTINGS_FILENAME).resolve()


class TestResolveColorize:
    def test_explicit_flag_wins(self):
        assert Settings(colorize=False).resolve_colorize(True) is True
        assert Settings(colorize=True).resolve_colorize(False) is False

    def test_settings_before_terminal(self):
        console = Console(file=io.StringIO())

        assert Settings(colorize=True).resolve_colorize(console=console) is True

    def test_non_terminal_is_not_colorized(self):
        console = Console(file=io.StringIO())

        assert Settings().resolve_colorize(console=console) is False

    def test_color_terminal_is_colorized(self):
        console = Console(file=io.StringIO(), force_terminal=True, color_system="standard")

        assert Settings().resolve_colorize(console=console) is True
