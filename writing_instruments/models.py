from __future__ import annotations

import enum
import logging
from typing import Iterable, Iterator, List

logger = logging.getLogger(__name__)


class TextBuffer:
    """Shared, growing character sequence that instruments write into."""

    def __init__(self, text: str = "") -> None:
        self._chars: List[str] = list(text)

    def append(self, char: str) -> None:
        self._chars.append(char)

    def remove_last(self) -> bool:
        if not self._chars:
            return False
        self._chars.pop()
        return True

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"TextBuffer({self.text!r})"


class WritingInstrument:
    """Base contract shared by every instrument.

    Subclasses provide ``next_cost`` and may hook into ``_after_symbol``
    to update their usage state once a character has been appended.
    """

    display_name: str = "WritingInstrument"

    def __init__(self, initial_remainder: float) -> None:
        self._remainder = initial_remainder

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if "display_name" not in cls.__dict__:
            cls.display_name = cls.__name__

    @property
    def remainder(self) -> float:
        return self._remainder

    def next_cost(self) -> float:  # pragma: no cover - interface contract
        raise NotImplementedError

    def write(self, buffer: TextBuffer, text: str) -> int:
        """Append as much of ``text`` as the reserve allows.

        Returns the number of characters appended. Writing stops at the
        first character whose cost exceeds the current reserve.
        """
        written = 0
        for char in text:
            cost = self.next_cost()
            if self._remainder < cost:
                break
            buffer.append(char)
            self._remainder -= cost
            written += 1
            self._after_symbol()
        if written < len(text):
            logger.debug(
                "%s ran dry after %d of %d characters (%s left)",
                self.display_name,
                written,
                len(text),
                self._remainder,
            )
        return written

    def erase(self, buffer: TextBuffer) -> None:
        return None

    def can_erase(self) -> bool:
        return False

    def describe(self) -> str:
        return f"{self.display_name}: {self._remainder}% remaining"

    def _after_symbol(self) -> None:
        return None

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(remainder={self._remainder!r})"


class Pen(WritingInstrument):
    """Ink depletes at a flat rate per character."""

    COST = 1.15

    def next_cost(self) -> float:
        return self.COST


class Pencil(WritingInstrument):
    """Cheap lead that sharpens itself every ``SHARPEN_PERIOD`` characters."""

    COST = 0.95
    SHARPEN_PERIOD = 20
    SHARPEN_GAIN = 3.0

    def __init__(self, initial_remainder: float) -> None:
        super().__init__(initial_remainder)
        self._since_sharpen = 0

    @property
    def since_sharpen(self) -> int:
        return self._since_sharpen

    def next_cost(self) -> float:
        return self.COST

    def _after_symbol(self) -> None:
        # Sharpening happens after the debit, so it never rescues the
        # character that triggered it.
        self._since_sharpen += 1
        if self._since_sharpen == self.SHARPEN_PERIOD:
            self._remainder += self.SHARPEN_GAIN
            self._since_sharpen = 0
            logger.debug("Pencil sharpened, %s remaining", self._remainder)

    def erase(self, buffer: TextBuffer) -> None:
        buffer.remove_last()

    def can_erase(self) -> bool:
        return True


class MarkerStage(enum.Enum):
    FRESH = 1.00
    MID = 1.09
    WORN = 1.21

    @property
    def cost(self) -> float:
        return self.value


class Marker(WritingInstrument):
    """Marker whose cost per character rises in two steps as it wears."""

    MID_THRESHOLD = 20
    WORN_THRESHOLD = 40

    def __init__(self, initial_remainder: float) -> None:
        super().__init__(initial_remainder)
        self._symbols_written = 0

    @property
    def symbols_written(self) -> int:
        return self._symbols_written

    @property
    def stage(self) -> MarkerStage:
        if self._symbols_written < self.MID_THRESHOLD:
            return MarkerStage.FRESH
        if self._symbols_written < self.WORN_THRESHOLD:
            return MarkerStage.MID
        return MarkerStage.WORN

    def next_cost(self) -> float:
        return self.stage.cost

    def _after_symbol(self) -> None:
        self._symbols_written += 1


def by_remainder(instrument: WritingInstrument) -> float:
    return instrument.remainder


def sort_by_remainder(instruments: Iterable[WritingInstrument]) -> List[WritingInstrument]:
    """Return instruments in ascending order of remainder; ties keep input order."""
    return sorted(instruments, key=by_remainder)
