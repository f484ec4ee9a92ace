"""Enter/exit state machine for widgets with opening and closing animations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["BistableTransitionState", "BistableTransition"]


class BistableTransitionState(Enum):
    """Phase of an enter/exit transition; ``EXITED`` is the default."""

    ENTER_START = "enter-start"
    ENTERING = "entering"
    ENTERED = "entered"
    EXIT_START = "exit-start"
    EXITING = "exiting"
    EXITED = "exited"

    def as_name(self) -> str:
        """Readable name of the state."""
        return self.value


@dataclass
class BistableTransition:
    """Toggles between open and closed, pausing ``delay`` seconds in between.

    While ``open`` is true the machine passes through ENTER_START, ENTERING
    and ENTERED; while false through EXIT_START, EXITING and EXITED. Each
    call to :meth:`step` advances it by one frame.
    """

    open: bool = False
    delay: float = 0.0
    state: BistableTransitionState = BistableTransitionState.EXITED
    timer: float = 0.0

    def set_open(self, open: bool) -> None:
        self.open = open

    def step(self, delta: float) -> BistableTransitionState:
        """Advance one frame of ``delta`` seconds and return the new state."""
        S = BistableTransitionState
        state = self.state
        if state is S.ENTER_START:
            if self.open:
                self.state = S.ENTERING
                self.timer = 0.0
            else:
                self.state = S.EXIT_START
        elif state is S.ENTERING:
            if self.open:
                self.timer += delta
                if self.timer > self.delay:
                    self.state = S.ENTERED
            else:
                self.state = S.EXIT_START
        elif state is S.ENTERED:
            if not self.open:
                self.state = S.EXIT_START
        elif state is S.EXIT_START:
            if not self.open:
                self.state = S.EXITING
                self.timer = 0.0
            else:
                self.state = S.ENTER_START
        elif state is S.EXITING:
            if self.open:
                self.state = S.ENTER_START
            else:
                self.timer += delta
                if self.timer > self.delay:
                    self.state = S.EXITED
        elif self.open:
            self.state = S.ENTER_START
        return self.state