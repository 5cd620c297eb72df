"""Tests for the typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from cinegen import __version__
from cinegen.cli import app, build_session, coerce_config_value, run_edit_command

runner = CliRunner()


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestPreview:
    def test_all_artifacts(self):
        result = runner.invoke(app, ["preview"])
        assert result.exit_code == 0
        for path in ("script.json", "src/config.py", "main.py", "src/utils.py"):
            assert f"── {path} ──" in result.output
        assert "TARGET_WIDTH = 7680" in result.output
        assert "Requires 12GB+ VRAM GPU" in result.output

    def test_single_artifact_is_raw(self):
        result = runner.invoke(app, ["preview", "--artifact", "script"])
        assert result.exit_code == 0
        records = json.loads(result.output)
        assert len(records) == 2

    def test_overrides(self):
        result = runner.invoke(app, [
            "preview", "-a", "config",
            "--resolution", "1080p",
            "--voice", "en-US-ChristopherNeural",
            "--bg-volume", "0.5",
            "--ducking", "0.1",
            "--no-upscale",
        ])
        assert result.exit_code == 0
        assert "TARGET_WIDTH = 1920" in result.output
        assert 'VOICE_NAME = "en-US-ChristopherNeural"' in result.output
        assert "BG_MUSIC_VOLUME_NORMAL = 0.5" in result.output
        assert "BG_MUSIC_VOLUME_DUCKING = 0.1" in result.output
        assert "REAL_ESRGAN_BIN = None" in result.output

    def test_script_file(self, scene_script):
        result = runner.invoke(app, ["preview", "-s", str(scene_script), "-a", "script"])
        assert result.exit_code == 0
        records = json.loads(result.output)
        assert [r["video"] for r in records] == ["intro.mp4", "outro.mp4"]

    def test_bad_script_config(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("scenes: []\nconfig:\n  resolution: 720p\n", encoding="utf-8")
        result = runner.invoke(app, ["preview", "-s", str(path)])
        assert result.exit_code == 1
        assert "❌" in result.output


class TestScenes:
    def test_lists_seed_scenes(self):
        result = runner.invoke(app, ["scenes"])
        assert result.exit_code == 0
        assert "2 scene(s)" in result.output
        assert "scene_forest_droneshots.mp4 (fade)" in result.output
        assert "7680x4320" in result.output


class TestBuildSession:
    def test_script_config_then_overrides(self, scene_script):
        session = build_session(scene_script, resolution="1080p", voice_model=None)
        assert session.snapshot.config.resolution == "1080p"
        assert session.snapshot.config.use_realesrgan is False
        assert session.snapshot.config.voice_model == "vi-VN-HoaiMyNeural"

    def test_env_defaults(self, monkeypatch):
        from cinegen import cli

        monkeypatch.setattr(cli.config, "default_resolution", "4K")
        session = build_session()
        assert session.snapshot.config.resolution == "4K"

    def test_invalid_env_resolution(self, monkeypatch):
        from cinegen import cli

        monkeypatch.setattr(cli.config, "default_resolution", "720p")
        with pytest.raises(ValueError, match="CINEGEN_RESOLUTION"):
            build_session()

    def test_script_config_strings_coerced(self, tmp_path):
        path = tmp_path / "quoted.yaml"
        path.write_text("scenes: []\nconfig:\n  use_realesrgan: 'off'\n", encoding="utf-8")
        session = build_session(path)
        assert session.snapshot.config.use_realesrgan is False
        assert "REAL_ESRGAN_BIN = None" in session.artifacts.config

    def test_script_config_wrong_type(self, tmp_path):
        path = tmp_path / "loud.yaml"
        path.write_text("scenes: []\nconfig:\n  bg_music_volume: loud\n", encoding="utf-8")
        with pytest.raises(ValueError):
            build_session(path)
        result = runner.invoke(app, ["preview", "-s", str(path)])
        assert result.exit_code == 1
        assert "❌" in result.output


class TestCoerce:
    @pytest.mark.parametrize("raw, expected", [("on", True), ("False", False), ("1", True)])
    def test_bool(self, raw, expected):
        assert coerce_config_value("use_realesrgan", raw) is expected

    def test_float(self):
        assert coerce_config_value("ducking_level", "0.25") == 0.25

    def test_string(self):
        assert coerce_config_value("voice_model", "en-US-AriaNeural") == "en-US-AriaNeural"

    def test_bad_values(self):
        with pytest.raises(ValueError):
            coerce_config_value("use_realesrgan", "maybe")
        with pytest.raises(ValueError):
            coerce_config_value("ducking_level", "loud")
        with pytest.raises(ValueError):
            coerce_config_value("volume", "1")


class TestEditCommands:
    def test_add_set_rm(self):
        session = build_session()
        assert run_edit_command(session, "add")
        assert run_edit_command(session, 'set 3 voice "A brand new line"')
        assert session.snapshot.scenes[-1].voice == "A brand new line"
        assert run_edit_command(session, "set 3 transition none")
        assert session.snapshot.scenes[-1].transition == "none"
        assert run_edit_command(session, "rm 1")
        assert [s.id for s in session.snapshot.scenes] == ["2", "3"]

    def test_config(self):
        session = build_session()
        run_edit_command(session, "config use_realesrgan off")
        assert "REAL_ESRGAN_BIN = None" in session.artifacts.config

    def test_quit(self):
        assert run_edit_command(build_session(), "quit") is False

    def test_blank_line(self):
        assert run_edit_command(build_session(), "   ") is True

    def test_errors(self):
        session = build_session()
        for line in ("bogus", "rm", "set 1 id 5", "show readme", 'set 1 voice "unterminated'):
            with pytest.raises(ValueError):
                run_edit_command(session, line)

    def test_export_is_placeholder(self):
        session = build_session()
        before = session.artifacts
        run_edit_command(session, "export")
        assert session.artifacts is before


class TestEditLoop:
    def test_interactive_session(self):
        result = runner.invoke(
            app, ["edit"],
            input="add\nset 3 video finale.mp4\nshow script\nnope\nquit\n",
        )
        assert result.exit_code == 0
        assert "Added scene 3: clip_3.mp4" in result.output
        assert '"video": "finale.mp4"' in result.output
        assert "Unknown command 'nope'" in result.output
        assert "Bye" in result.output

    def test_end_of_input_exits(self):
        result = runner.invoke(app, ["edit"], input="list\n")
        assert result.exit_code == 0
        assert "Bye" in result.output
