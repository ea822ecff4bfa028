# quickpass/gui.py
# QuickPass generator window: length slider, class toggles, strength meter, copy

import sys
import typing
import logging
import random
from functools import partial

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel,
    QLineEdit, QPushButton, QSlider, QCheckBox, QGroupBox, QProgressBar,
)

from quickpass.clipboard import CopyStrategy, clear_text, copy_text, default_strategies
from quickpass.config import (
    MIN_LENGTH, MAX_LENGTH, default_configuration, load_config, log_level, setting_int,
)
from quickpass.state import (
    AppState, ClearCopied, Generate, MarkCopied, Reset, SetLength,
    ToggleNumbers, ToggleSymbols, ToggleVisibility, initial_state, reduce,
)

COLOR_STRONG = "#34d399"
COLOR_MEDIUM = "#facc15"
COLOR_WEAK = "#f87171"

# ---------------- UI building helpers ----------------

def make_password_row():
    box = QWidget()
    layout = QHBoxLayout()
    layout.setContentsMargins(0, 0, 0, 0)
    box.setLayout(layout)

    txt_password = QLineEdit()
    txt_password.setReadOnly(True)
    txt_password.setEchoMode(QLineEdit.Password)
    txt_password.setPlaceholderText("Click Generate to create a password")
    txt_password.setAccessibleName("Generated password")

    btn_show = QPushButton("Show")
    btn_show.setAccessibleName("Show password")
    btn_copy = QPushButton("Copy")
    btn_copy.setAccessibleName("Copy password")

    layout.addWidget(txt_password, 1)
    layout.addWidget(btn_show)
    layout.addWidget(btn_copy)

    return {
        "widget": box,
        "txt_password": txt_password,
        "btn_show": btn_show,
        "btn_copy": btn_copy,
    }


def make_strength_group():
    box = QGroupBox("Strength")
    layout = QVBoxLayout()
    box.setLayout(layout)

    lbl_strength = QLabel("")
    bar = QProgressBar()
    bar.setRange(0, 100)
    bar.setTextVisible(False)
    bar.setMaximumHeight(8)

    layout.addWidget(lbl_strength)
    layout.addWidget(bar)

    return {"widget": box, "lbl_strength": lbl_strength, "bar": bar}


def make_controls_group():
    box = QGroupBox("Options")
    layout = QVBoxLayout()
    box.setLayout(layout)

    row = QHBoxLayout()
    lbl_length = QLabel("")
    slider = QSlider(Qt.Horizontal)
    slider.setRange(MIN_LENGTH, MAX_LENGTH)
    slider.setAccessibleName("Password length")
    row.addWidget(lbl_length)
    row.addWidget(slider, 2)
    layout.addLayout(row)

    toggles = QHBoxLayout()
    chk_numbers = QCheckBox("Include numbers")
    chk_symbols = QCheckBox("Include symbols")
    toggles.addWidget(chk_numbers)
    toggles.addWidget(chk_symbols)
    layout.addLayout(toggles)

    return {
        "widget": box,
        "lbl_length": lbl_length,
        "slider": slider,
        "chk_numbers": chk_numbers,
        "chk_symbols": chk_symbols,
    }


def make_actions_row():
    box = QWidget()
    layout = QHBoxLayout()
    layout.setContentsMargins(0, 0, 0, 0)
    box.setLayout(layout)

    btn_generate = QPushButton("Generate")
    btn_generate.setAccessibleName("Generate password")
    btn_reset = QPushButton("Reset")
    btn_reset.setAccessibleName("Reset options and generate")
    layout.addWidget(btn_generate, 1)
    layout.addWidget(btn_reset)

    return {"widget": box, "btn_generate": btn_generate, "btn_reset": btn_reset}


def strength_color(percent: int) -> str:
    if percent >= 80:
        return COLOR_STRONG
    if percent >= 50:
        return COLOR_MEDIUM
    return COLOR_WEAK


class QuickPassGUI(QWidget):
    def __init__(
        self,
        settings: typing.Optional[dict] = None,
        rng: typing.Optional[random.Random] = None,
        strategies: typing.Optional[typing.List[CopyStrategy]] = None,
    ):
        super().__init__()
        self.setWindowTitle("Password Generator")
        self.setMinimumSize(440, 300)

        self.settings = settings if settings is not None else load_config()
        self.rng = rng
        self.strategies = strategies if strategies is not None else default_strategies()
        self.copied_flash_ms = setting_int(self.settings, "copied_flash_ms")
        self.clip_clear_seconds = setting_int(self.settings, "clipboard_clear_seconds")
        self.last_copied: typing.Optional[str] = None

        self.copied_timer = QTimer(self)
        self.copied_timer.setSingleShot(True)
        self.copied_timer.timeout.connect(partial(self.dispatch, ClearCopied()))
        self.clip_timer = QTimer(self)
        self.clip_timer.setSingleShot(True)
        self.clip_timer.timeout.connect(self.clear_clipboard)

        # build UI
        main = QVBoxLayout()
        self.setLayout(main)

        title = QLabel("Password Generator")
        title.setAlignment(Qt.AlignCenter)
        font = title.font()
        font.setPointSize(font.pointSize() + 6)
        title.setFont(font)

        self.pw_row = make_password_row()
        self.strength = make_strength_group()
        self.controls = make_controls_group()
        self.actions = make_actions_row()
        tip = QLabel("Tip: Use a length of at least <b>12</b> for stronger passwords.")

        main.addWidget(title)
        main.addWidget(self.pw_row["widget"])
        main.addWidget(self.strength["widget"])
        main.addWidget(self.controls["widget"])
        main.addWidget(self.actions["widget"])
        main.addWidget(tip)

        # Wire up controls; every change goes through dispatch
        self.pw_row["btn_show"].clicked.connect(partial(self.dispatch, ToggleVisibility()))
        self.pw_row["btn_copy"].clicked.connect(self.on_copy)
        self.controls["slider"].valueChanged.connect(self.on_length_changed)
        self.controls["chk_numbers"].clicked.connect(partial(self.dispatch, ToggleNumbers()))
        self.controls["chk_symbols"].clicked.connect(partial(self.dispatch, ToggleSymbols()))
        self.actions["btn_generate"].clicked.connect(partial(self.dispatch, Generate()))
        self.actions["btn_reset"].clicked.connect(partial(self.dispatch, Reset()))

        # startup: first password is generated here, not by a show/paint hook
        self.state: AppState = initial_state(default_configuration(self.settings), self.rng)
        self.render()

    def dispatch(self, action, *_signal_args) -> None:
        self.state = reduce(self.state, action, self.rng)
        self.render()

    def on_length_changed(self, value: int) -> None:
        self.dispatch(SetLength(value))

    # ----------------- Clipboard -----------------
    def on_copy(self) -> None:
        pw = self.state.password
        if not pw:
            return
        if not copy_text(pw, self.strategies):
            return
        self.last_copied = pw
        self.dispatch(MarkCopied())
        self.copied_timer.start(self.copied_flash_ms)
        if self.clip_clear_seconds > 0:
            self.clip_timer.start(self.clip_clear_seconds * 1000)

    def clear_clipboard(self) -> None:
        if self.last_copied:
            clear_text(self.last_copied, self.strategies)
            self.last_copied = None

    # ----------------- Rendering -----------------
    def render(self) -> None:
        s = self.state
        c = s.config

        txt = self.pw_row["txt_password"]
        txt.setText(s.password)
        txt.setEchoMode(QLineEdit.Normal if s.show_password else QLineEdit.Password)
        self.pw_row["btn_show"].setText("Hide" if s.show_password else "Show")
        self.pw_row["btn_copy"].setText("Copied ✓" if s.copied else "Copy")

        strength = s.strength
        self.strength["lbl_strength"].setText(f"{strength.label} • {strength.percent}%")
        bar = self.strength["bar"]
        bar.setValue(strength.percent)
        bar.setStyleSheet(f"QProgressBar::chunk {{ background-color: {strength_color(strength.percent)}; }}")

        slider = self.controls["slider"]
        slider.blockSignals(True)
        slider.setValue(c.length)
        slider.blockSignals(False)
        self.controls["lbl_length"].setText(f"Length: {c.length}")
        self.controls["chk_numbers"].setChecked(c.include_numbers)
        self.controls["chk_symbols"].setChecked(c.include_symbols)


def main() -> int:
    settings = load_config()
    logging.basicConfig(level=log_level(settings), format="%(levelname)s: %(message)s")
    app = QApplication.instance() or QApplication(sys.argv)
    gui = QuickPassGUI(settings=settings)
    gui.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
