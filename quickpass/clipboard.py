"""
quickpass.clipboard

Copy-to-clipboard as a ranked list of strategies. Each strategy reports
success or failure; ``copy_text`` stops at the first success and swallows
failures, so callers only learn whether the text landed somewhere.
"""

import logging
from typing import Iterable, List, Protocol

import pyperclip

logger = logging.getLogger(__name__)


class CopyStrategy(Protocol):
    name: str

    def copy(self, text: str) -> bool:
        ...

    def clear_if_owned(self, text: str) -> None:
        """Clear the clipboard only if it still holds ``text``."""
        ...


def _qt_clipboard():
    """The running Qt application's clipboard, or None outside a Qt app."""
    # PySide6 is loaded on first use so terminal-only callers never import it
    from PySide6.QtGui import QGuiApplication

    if QGuiApplication.instance() is None:
        return None
    return QGuiApplication.clipboard()


class QtClipboardStrategy:
    """Qt application clipboard (plus the X11 selection buffer where there is one)."""

    name = "qt"

    def copy(self, text: str) -> bool:
        from PySide6.QtGui import QClipboard

        clipboard = _qt_clipboard()
        if clipboard is None:
            return False
        clipboard.setText(text, mode=QClipboard.Clipboard)
        if clipboard.supportsSelection():
            clipboard.setText(text, mode=QClipboard.Selection)
        # setText has no return value; read back to confirm
        return clipboard.text(QClipboard.Clipboard) == text

    def clear_if_owned(self, text: str) -> None:
        from PySide6.QtGui import QClipboard

        clipboard = _qt_clipboard()
        if clipboard is None:
            return
        if clipboard.text(QClipboard.Clipboard) == text:
            clipboard.clear(QClipboard.Clipboard)
            if clipboard.supportsSelection():
                clipboard.clear(QClipboard.Selection)


class PyperclipStrategy:
    """OS clipboard via pyperclip (xclip/xsel, pbcopy, or the Win32 API)."""

    name = "pyperclip"

    def copy(self, text: str) -> bool:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.debug("pyperclip unavailable: %s", e)
            return False
        return True

    def clear_if_owned(self, text: str) -> None:
        try:
            if pyperclip.paste() == text:
                pyperclip.copy("")
        except pyperclip.PyperclipException as e:
            logger.debug("pyperclip unavailable: %s", e)


def default_strategies() -> List[CopyStrategy]:
    return [QtClipboardStrategy(), PyperclipStrategy()]


def copy_text(text: str, strategies: Iterable[CopyStrategy]) -> bool:
    """
    Try each strategy in order. Returns True once one succeeds, False if
    the text is empty or every strategy failed.
    """
    if not text:
        return False
    for strategy in strategies:
        try:
            if strategy.copy(text):
                logger.debug("Copied via %s", strategy.name)
                return True
        except Exception:
            logger.debug("Clipboard strategy %s failed", strategy.name, exc_info=True)
            continue
        logger.debug("Clipboard strategy %s reported failure", strategy.name)
    return False


def clear_text(text: str, strategies: Iterable[CopyStrategy]) -> None:
    """Clear the clipboard wherever it still holds ``text``; anything newer is left alone."""
    if not text:
        return
    for strategy in strategies:
        try:
            strategy.clear_if_owned(text)
        except Exception:
            logger.debug("Clipboard strategy %s could not clear", strategy.name, exc_info=True)
