from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Type

from .config import DemoConfig
from .io import IOInterface
from .models import Marker, Pen, Pencil, TextBuffer, WritingInstrument, sort_by_remainder

logger = logging.getLogger(__name__)

INSTRUMENT_TYPES: Sequence[Type[WritingInstrument]] = (Pen, Pencil, Marker)


@dataclass(slots=True)
class DemoResult:
    """Outcome of a demo run: instruments in report order plus the shared text."""

    instruments: List[WritingInstrument]
    buffer: TextBuffer


class DemoDriver:
    """Runs rounds of random writing across a set of instruments."""

    def __init__(
        self,
        config: DemoConfig,
        io: IOInterface,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._config = config
        self._io = io
        self._rng = rng if rng is not None else random.Random(config.seed)

    def build_instruments(self) -> List[WritingInstrument]:
        return [
            self._rng.choice(INSTRUMENT_TYPES)(self._config.initial_remainder)
            for _ in range(self._config.instrument_count)
        ]

    def random_text(self) -> str:
        length = self._rng.randint(self._config.min_text_length, self._config.max_text_length)
        return "".join(self._rng.choice(self._config.alphabet) for _ in range(length))

    def play_round(self, instruments: Sequence[WritingInstrument], buffer: TextBuffer) -> None:
        for instrument in instruments:
            text = self.random_text()
            written = instrument.write(buffer, text)
            logger.debug("%s wrote %d/%d characters", instrument.display_name, written, len(text))
            if instrument.can_erase():
                instrument.erase(buffer)

    def run(self) -> DemoResult:
        instruments = self.build_instruments()
        buffer = TextBuffer()
        logger.info(
            "Starting demo with %d instruments over %d rounds",
            len(instruments),
            self._config.rounds,
        )
        for round_number in range(self._config.rounds):
            self.play_round(instruments, buffer)
            logger.debug("Round %d done, buffer holds %d characters", round_number + 1, len(buffer))

        ranked = sort_by_remainder(instruments)
        self._report(ranked)
        logger.info("Demo finished, buffer holds %d characters", len(buffer))
        return DemoResult(instruments=ranked, buffer=buffer)

    def _report(self, instruments: List[WritingInstrument]) -> None:
        write_report = getattr(self._io, "write_report", None)
        if write_report is not None:
            write_report(instruments)
            return
        for instrument in instruments:
            self._io.write(instrument.describe())
