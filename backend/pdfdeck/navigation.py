from typing import Optional


class NavigationController:
    """
    Cursor over the slides of the deck currently on screen.

    Every move is clamped into ``[0, slide_count - 1]``. Without slides the
    cursor is ``None`` and all moves are ignored, so callers never need to
    check bounds before calling.
    """

    def __init__(self):
        self._slide_count = 0
        self._cursor: Optional[int] = None

    @property
    def slide_count(self) -> int:
        return self._slide_count

    def reset(self, slide_count: int):
        self._slide_count = max(0, slide_count)
        self._cursor = 0 if self._slide_count else None

    def detach(self):
        self._slide_count = 0
        self._cursor = None

    def current(self) -> Optional[int]:
        return self._cursor

    def go_to(self, index: int) -> Optional[int]:
        if self._cursor is None:
            return None
        self._cursor = min(max(index, 0), self._slide_count - 1)
        return self._cursor

    def next(self) -> Optional[int]:
        if self._cursor is None:
            return None
        return self.go_to(self._cursor + 1)

    def previous(self) -> Optional[int]:
        if self._cursor is None:
            return None
        return self.go_to(self._cursor - 1)

    @property
    def can_go_previous(self) -> bool:
        return self._cursor is not None and self._cursor > 0

    @property
    def can_go_next(self) -> bool:
        return self._cursor is not None and self._cursor < self._slide_count - 1

    def position_label(self) -> Optional[str]:
        if self._cursor is None:
            return None
        return f"{self._cursor + 1} / {self._slide_count}"
