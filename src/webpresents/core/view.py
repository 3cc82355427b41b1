"""Views: the visible half of a slide."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class SlideView(Protocol):
    """Anything a deck can show and hide. QWidget satisfies this as-is."""

    def show(self) -> None: ...

    def hide(self) -> None: ...


@dataclass
class HeadlessView:
    """In-memory view used for rehearsals and tests."""

    label: str = ""
    visible: bool = False

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False
