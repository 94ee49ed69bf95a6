from PyQt6.QtMultimedia import QAudioDevice

from dragstyle.app import DragStyleApp
from dragstyle.config import Config
from dragstyle.core.tones import ToneBank
from dragstyle.gui import editor_window, tone_player
from dragstyle.gui.editor_window import SAMPLE_HTML, WINDOW_TITLE
from dragstyle.gui.tone_player import QtTonePlayer


def make_app(qtbot, tmp_path, tones):
    app = DragStyleApp(config=Config(app_dir=tmp_path), tone_player=tones)
    qtbot.addWidget(app.window)
    return app


def test_window_title_and_sample_text(qtbot, tmp_path, tones):
    app = make_app(qtbot, tmp_path, tones)
    assert app.window.windowTitle() == WINDOW_TITLE
    assert "Select a few words" in app.window.editor.toPlainText()


def test_initial_html_from_config(qtbot, tmp_path, tones):
    (tmp_path / "config.ini").write_text("[Editor]\ninitial_html = <p>From config</p>\n", encoding="utf-8")
    app = make_app(qtbot, tmp_path, tones)
    assert app.window.editor.toPlainText() == "From config"


def test_sensitivity_from_config(qtbot, tmp_path, tones):
    (tmp_path / "config.ini").write_text("[Gesture]\nweight_sensitivity = 3\n", encoding="utf-8")
    app = make_app(qtbot, tmp_path, tones)
    assert app.controller.controller("weight").axis.sensitivity == 3.0
    assert app.controller.controller("size").axis.sensitivity == 2.0


def test_file_menu_has_copy_action(qtbot, tmp_path, tones):
    app = make_app(qtbot, tmp_path, tones)
    file_menu = app.window.menuBar().actions()[0].menu()
    labels = [action.text() for action in file_menu.actions()]
    assert "Copy Text" in labels
    assert "Quit" in labels


def test_copy_text(qtbot, tmp_path, tones, monkeypatch):
    copied = []
    monkeypatch.setattr(editor_window, "copy_to_clipboard", lambda text: copied.append(text) or True)
    app = make_app(qtbot, tmp_path, tones)
    app.window.set_content("<p>memo</p>")

    assert app.window.copy_text()
    assert copied == ["memo"]
    assert app.window.statusBar().currentMessage() == "Text copied to clipboard."


def test_copy_text_failure_is_reported(qtbot, tmp_path, tones, monkeypatch):
    monkeypatch.setattr(editor_window, "copy_to_clipboard", lambda text: False)
    app = make_app(qtbot, tmp_path, tones)
    assert not app.window.copy_text()
    assert app.window.statusBar().currentMessage() == "Could not copy to clipboard."


def test_empty_content_falls_back_to_sample(qtbot, tmp_path, tones):
    app = make_app(qtbot, tmp_path, tones)
    app.window.set_content("")
    assert app.window.editor.toPlainText().startswith("Select a few words")
    assert SAMPLE_HTML.startswith("<p>")


def test_tone_player_without_device_is_silent(qtbot, monkeypatch):
    class NoDevices:
        @staticmethod
        def defaultAudioOutput():
            return QAudioDevice()

    monkeypatch.setattr(tone_player, "QMediaDevices", NoDevices)
    player = QtTonePlayer(ToneBank())
    assert player.enabled is False
    player.play(500)
    player.stop()


def test_disabled_tone_player_does_not_open_device(monkeypatch):
    class FailingDevices:
        @staticmethod
        def defaultAudioOutput():
            raise AssertionError("device should not be opened")

    monkeypatch.setattr(tone_player, "QMediaDevices", FailingDevices)
    player = QtTonePlayer(ToneBank(), enabled=False)
    player.play(500)
