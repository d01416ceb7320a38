import threading

import pyperclip

from .errors import IoError


class Clipboard:
    """System clipboard text, with get/set calls serialized by a lock."""

    def __init__(self):
        self.lock = threading.Lock()

    def get_text(self) -> str:
        with self.lock:
            try:
                return pyperclip.paste()
            except pyperclip.PyperclipException as e:
                raise IoError(f'Clipboard unavailable: {e}') from e

    def set_text(self, text: str):
        with self.lock:
            try:
                pyperclip.copy(text)
            except pyperclip.PyperclipException as e:
                raise IoError(f'Clipboard unavailable: {e}') from e


clipboard = Clipboard()


def get_clipboard_content() -> str:
    return clipboard.get_text()


def set_clipboard_content(content: str):
    clipboard.set_text(content)
