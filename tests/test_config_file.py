import pytest

from proxylauncher.adapters.config_file import ConfigFileStore, LocalFileChecker
from proxylauncher.adapters.editor import SystemEditorLauncher
from proxylauncher.core.config_parser import parse_config, render_default_config
from proxylauncher.core.errors import SourceUnreadableError
from proxylauncher import platform_utils


def test_file_checker(tmp_path):
    checker = LocalFileChecker()
    path = tmp_path / "test-file.txt"

    assert not checker.is_file(str(path))
    path.write_text("test content", encoding="utf-8")
    assert checker.is_file(str(path))
    assert not checker.is_file(str(tmp_path))


def test_read_lines(tmp_path):
    path = tmp_path / "proxylauncher.cfg"
    path.write_text('target = "app.exe"\nextraArgs = "--verbose"\nextraArgsOrder = "after"\nhideTarget = true\n')

    config = parse_config(ConfigFileStore().read_lines(str(path)))

    assert config.target == "app.exe"
    assert config.extra_args == "--verbose"
    assert config.extra_args_order == "after"
    assert config.hide_target is True


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(SourceUnreadableError, match="error opening config file"):
        ConfigFileStore().read_lines(str(tmp_path / "nonexistent.cfg"))


def test_read_lines_handles_crlf(tmp_path):
    path = tmp_path / "proxylauncher.cfg"
    path.write_bytes(b"target=app.exe\r\nhideTarget=on\r\n")
    assert ConfigFileStore().read_lines(str(path)) == ["target=app.exe", "hideTarget=on"]


def test_read_lines_splits_only_on_newline(tmp_path):
    path = tmp_path / "proxylauncher.cfg"
    path.write_bytes(b"target=app.exe\nextraArgs=--sep=\x0c --y\x0b--z\nextraArgsOrder=after\n")

    lines = ConfigFileStore().read_lines(str(path))

    assert lines == ["target=app.exe", "extraArgs=--sep=\x0c --y\x0b--z", "extraArgsOrder=after"]
    assert parse_config(lines).extra_args == "--sep=\x0c --y\x0b--z"


def test_read_lines_keeps_unicode_line_separators_in_value(tmp_path):
    path = tmp_path / "proxylauncher.cfg"
    path.write_text("target=app.exe\nextraArgs=a b\x85c\nextraArgsOrder=before\n", encoding="utf-8")

    assert ConfigFileStore().read_lines(str(path))[1] == "extraArgs=a b\x85c"


def test_read_lines_without_trailing_newline(tmp_path):
    path = tmp_path / "proxylauncher.cfg"
    path.write_text("target=app.exe\nhideTarget=on", encoding="utf-8")
    assert ConfigFileStore().read_lines(str(path)) == ["target=app.exe", "hideTarget=on"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "proxylauncher.cfg"
    path.write_text("", encoding="utf-8")
    assert ConfigFileStore().read_lines(str(path)) == []


def test_read_lines_strips_utf8_bom(tmp_path):
    path = tmp_path / "proxylauncher.cfg"
    path.write_bytes(b"\xef\xbb\xbftarget=app.exe\r\nhideTarget=yes\r\n")

    config = parse_config(ConfigFileStore().read_lines(str(path)))

    assert config.target == "app.exe"
    assert config.hide_target is True


def test_create_default_writes_no_bom(tmp_path):
    path = tmp_path / "proxylauncher.cfg"
    ConfigFileStore().create_default(str(path))
    assert path.read_bytes().startswith(b"# Path to the target executable")


def test_create_default(tmp_path):
    path = tmp_path / "proxylauncher.cfg"
    ConfigFileStore().create_default(str(path))
    assert path.read_text(encoding="utf-8") == render_default_config()


def test_editor_launcher_uses_platform_command(monkeypatch):
    calls = []
    monkeypatch.setattr(platform_utils, "IS_WINDOWS", False)
    monkeypatch.setattr(platform_utils, "IS_MACOS", False)

    SystemEditorLauncher(popen=calls.append).open("/tmp/proxylauncher.cfg")

    assert calls == [["xdg-open", "/tmp/proxylauncher.cfg"]]


@pytest.mark.parametrize(
    "is_windows, is_macos, expected",
    [
        (True, False, "notepad.exe"),
        (False, True, "open"),
        (False, False, "xdg-open"),
    ],
)
def test_editor_command(monkeypatch, is_windows, is_macos, expected):
    monkeypatch.setattr(platform_utils, "IS_WINDOWS", is_windows)
    monkeypatch.setattr(platform_utils, "IS_MACOS", is_macos)
    assert platform_utils.get_editor_command("x.cfg") == [expected, "x.cfg"]
