import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")
QtTest = pytest.importorskip("PySide6.QtTest")

from quickpass.gui import COLOR_MEDIUM, COLOR_STRONG, COLOR_WEAK, QuickPassGUI, strength_color  # noqa: E402


class RecordingStrategy:
    name = "recording"

    def __init__(self, result=True):
        self.result = result
        self.copied = []
        self.cleared = []

    def copy(self, text):
        self.copied.append(text)
        return self.result

    def clear_if_owned(self, text):
        self.cleared.append(text)


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


def make_gui(qapp, strategy=None, **settings):
    base = {"default_length": 12, "copied_flash_ms": 1500, "clipboard_clear_seconds": 0}
    base.update(settings)
    return QuickPassGUI(settings=base, rng=random.Random(42), strategies=[strategy or RecordingStrategy()])


def test_startup_generates_password(qapp):
    gui = make_gui(qapp)
    assert len(gui.state.password) == 12
    assert gui.pw_row["txt_password"].text() == gui.state.password
    assert gui.strength["lbl_strength"].text() == "Strong • 80%"
    assert gui.controls["slider"].value() == 12


def test_default_length_from_settings(qapp):
    gui = make_gui(qapp, default_length=24)
    assert len(gui.state.password) == 24


def test_generate_button(qapp):
    gui = make_gui(qapp)
    before = gui.state.password
    gui.actions["btn_generate"].click()
    assert gui.state.password != before
    assert gui.pw_row["txt_password"].text() == gui.state.password


def test_slider_updates_config_without_regenerating(qapp):
    gui = make_gui(qapp)
    pw = gui.state.password
    gui.controls["slider"].setValue(16)
    assert gui.state.config.length == 16
    assert gui.state.password == pw
    assert gui.controls["lbl_length"].text() == "Length: 16"
    assert gui.strength["bar"].value() == 100


def test_toggles(qapp):
    gui = make_gui(qapp)
    gui.controls["chk_numbers"].click()
    gui.controls["chk_symbols"].click()
    assert not gui.state.config.include_numbers
    assert not gui.state.config.include_symbols
    assert not gui.controls["chk_numbers"].isChecked()
    assert gui.strength["lbl_strength"].text() == "Weak • 40%"
    gui.actions["btn_generate"].click()
    assert gui.state.password.isalpha()


def test_reset(qapp):
    gui = make_gui(qapp)
    gui.controls["slider"].setValue(40)
    gui.controls["chk_symbols"].click()
    gui.actions["btn_reset"].click()
    assert gui.state.config.length == 12
    assert gui.state.config.include_symbols
    assert gui.controls["chk_symbols"].isChecked()
    assert len(gui.state.password) == 12


def test_show_hide(qapp):
    gui = make_gui(qapp)
    txt = gui.pw_row["txt_password"]
    assert txt.echoMode() == QtWidgets.QLineEdit.Password
    gui.pw_row["btn_show"].click()
    assert txt.echoMode() == QtWidgets.QLineEdit.Normal
    assert gui.pw_row["btn_show"].text() == "Hide"


def test_copy_marks_copied(qapp):
    strategy = RecordingStrategy()
    gui = make_gui(qapp, strategy, copied_flash_ms=20)
    gui.pw_row["btn_copy"].click()
    assert strategy.copied == [gui.state.password]
    assert gui.state.copied
    assert gui.pw_row["btn_copy"].text().startswith("Copied")
    assert gui.copied_timer.isActive()
    QtTest.QTest.qWait(200)
    assert not gui.state.copied
    assert gui.pw_row["btn_copy"].text() == "Copy"


def test_copy_failure_shows_nothing(qapp):
    gui = make_gui(qapp, RecordingStrategy(result=False))
    gui.pw_row["btn_copy"].click()
    assert not gui.state.copied
    assert gui.pw_row["btn_copy"].text() == "Copy"


def test_clipboard_auto_clear(qapp):
    strategy = RecordingStrategy()
    gui = make_gui(qapp, strategy, clipboard_clear_seconds=5)
    gui.pw_row["btn_copy"].click()
    assert gui.clip_timer.isActive()
    gui.clear_clipboard()
    assert strategy.cleared == [gui.state.password]


def test_strength_color():
    assert strength_color(100) == COLOR_STRONG
    assert strength_color(80) == COLOR_STRONG
    assert strength_color(60) == COLOR_MEDIUM
    assert strength_color(40) == COLOR_WEAK


def test_malformed_timing_settings_use_defaults(qapp):
    gui = make_gui(qapp, copied_flash_ms="fast", clipboard_clear_seconds="soon")
    assert gui.copied_flash_ms == 1500
    assert gui.clip_clear_seconds == 0
    assert len(gui.state.password) == 12
