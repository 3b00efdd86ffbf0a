"""User-facing notices raised by client controllers."""

import enum
from dataclasses import dataclass
from typing import Callable, Optional


class NoticeKind(str, enum.Enum):
    """What a notice asks the screen to show."""
    LOGIN_REQUIRED = "login_required"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """A transient message for the user."""
    kind: NoticeKind
    title: str
    message: str


Notifier = Callable[[Notice], None]

LOGIN_REQUIRED = Notice(NoticeKind.LOGIN_REQUIRED, "Login Required", "Please login to add favorites")
FAVORITE_FAILED = Notice(NoticeKind.ERROR, "Error", "Failed to update favorite")
MODEL_LOAD_FAILED = Notice(NoticeKind.ERROR, "Error", "Failed to load 3D model. Please check the model URL.")


def emit(notify: Optional[Notifier], notice: Notice) -> None:
    """Deliver a notice if anyone is listening."""
    if notify is not None:
        notify(notice)
