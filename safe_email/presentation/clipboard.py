"""
Copy-to-clipboard side effect.

The UI supplies the actual clipboard and toast implementations; this module
only defines their shape, sensible in-process defaults, and the copy action
itself. A failed copy is never an error for the view: it is logged and
reported through the notifier.
"""
import logging
from typing import List, Optional, Protocol, Tuple

from safe_email.logging_utils import mask_sensitive
from safe_email.metrics import record_copy

logger = logging.getLogger(__name__)


class Clipboard(Protocol):
    def write_text(self, text: str) -> None:
        ...


class Notifier(Protocol):
    def success(self, title: str, description: str) -> None:
        ...

    def error(self, title: str, description: str) -> None:
        ...


class MemoryClipboard:
    """Clipboard that keeps the copied values in memory."""

    def __init__(self) -> None:
        self.history: List[str] = []

    def write_text(self, text: str) -> None:
        self.history.append(text)

    @property
    def current(self) -> Optional[str]:
        return self.history[-1] if self.history else None


class LoggingNotifier:
    """Notifier that records messages and writes them to the log."""

    def __init__(self) -> None:
        self.messages: List[Tuple[str, str, str]] = []

    def success(self, title: str, description: str) -> None:
        self.messages.append(("success", title, description))
        logger.info("%s: %s", title, description)

    def error(self, title: str, description: str) -> None:
        self.messages.append(("error", title, description))
        logger.warning("%s: %s", title, description)


def _notify(notifier, level: str, title: str, description: str) -> None:
    try:
        getattr(notifier, level)(title, description)
    except Exception as e:
        logger.warning("Notifier failed to show '%s': %s", title, e)


def copy_to_clipboard(
    value: str,
    label: str,
    clipboard: Clipboard,
    notifier: Notifier,
) -> bool:
    """
    Copy *value* and notify the user.

    Args:
        value: Extracted scalar (amount, reference, phone, email, image URL).
        label: Human label used in the notification, e.g. "Booking reference".
        clipboard: Target clipboard.
        notifier: Toast/notification sink.

    Returns:
        True on success, False when the clipboard write failed.
        Never raises, a failing notifier is only logged.
    """
    label = label if isinstance(label, str) else str(label)
    try:
        clipboard.write_text(value)
    except Exception as e:
        logger.warning(
            "Clipboard write failed for %s (%s): %s", label, mask_sensitive(str(value)), e
        )
        record_copy("failure")
        _notify(notifier, "error", "Copy failed", f"Could not copy {label.lower()} to clipboard")
        return False

    record_copy("success")
    _notify(notifier, "success", "Copied", f"{label} copied to clipboard")
    return True
