from __future__ import annotations

import random

import pytest

from writing_instruments.config import DemoConfig
from writing_instruments.driver import DemoDriver
from writing_instruments.io import BufferedIO
from writing_instruments.models import Marker, Pen, Pencil, TextBuffer


class RecordingReportIO(BufferedIO):
    def __init__(self) -> None:
        super().__init__()
        self.reports: list[list[str]] = []

    def write_report(self, instruments) -> None:
        self.reports.append([instrument.describe() for instrument in instruments])


def build_driver(io: BufferedIO | None = None, seed: int = 7, **overrides) -> DemoDriver:
    config = DemoConfig(seed=seed, **overrides)
    return DemoDriver(config, io or BufferedIO())


def test_random_text_respects_length_and_alphabet():
    driver = build_driver(min_text_length=3, max_text_length=5, alphabet="ab")

    samples = [driver.random_text() for _ in range(50)]

    assert all(3 <= len(sample) <= 5 for sample in samples)
    assert set("".join(samples)) <= {"a", "b"}


def test_build_instruments_uses_count_and_initial_remainder():
    driver = build_driver(instrument_count=30, initial_remainder=55.5)

    instruments = driver.build_instruments()

    assert len(instruments) == 30
    assert all(instrument.remainder == 55.5 for instrument in instruments)
    assert {type(instrument) for instrument in instruments} <= {Pen, Pencil, Marker}


def test_only_pencils_erase_after_writing():
    buffer = TextBuffer()
    driver = build_driver(min_text_length=4, max_text_length=4)

    driver.play_round([Pen(100.0)], buffer)
    assert len(buffer) == 4
    driver.play_round([Marker(100.0)], buffer)
    assert len(buffer) == 8
    driver.play_round([Pencil(100.0)], buffer)
    assert len(buffer) == 11


def test_dry_pencil_still_erases_previous_text():
    buffer = TextBuffer("abc")
    driver = build_driver(min_text_length=4, max_text_length=4)

    driver.play_round([Pencil(0.0)], buffer)

    assert buffer.text == "ab"


def test_run_reports_instruments_in_ascending_order():
    io = BufferedIO()
    driver = build_driver(io, instrument_count=6, rounds=8)

    result = driver.run()

    remainders = [instrument.remainder for instrument in result.instruments]
    assert remainders == sorted(remainders)
    assert io.outputs == [instrument.describe() for instrument in result.instruments]
    assert all(line.endswith("% remaining") for line in io.outputs)


def test_run_is_reproducible_with_seed():
    first, second = BufferedIO(), BufferedIO()

    first_result = build_driver(first, seed=123).run()
    second_result = build_driver(second, seed=123).run()

    assert first.outputs == second.outputs
    assert first_result.buffer.text == second_result.buffer.text


def test_run_accepts_explicit_rng():
    io = BufferedIO()
    driver = DemoDriver(DemoConfig(instrument_count=3, rounds=2), io, rng=random.Random(5))

    result = driver.run()

    assert len(result.instruments) == 3
    assert len(io.outputs) == 3


def test_run_uses_write_report_when_available():
    io = RecordingReportIO()

    result = build_driver(io, instrument_count=4, rounds=3).run()

    assert io.outputs == []
    assert io.reports == [[instrument.describe() for instrument in result.instruments]]


def test_run_without_instruments_reports_nothing():
    io = BufferedIO()

    result = build_driver(io, instrument_count=0).run()

    assert result.instruments == []
    assert len(result.buffer) == 0
    assert io.outputs == []


def test_run_logs_start_and_finish(caplog: pytest.LogCaptureFixture):
    with caplog.at_level("INFO", logger="writing_instruments.driver"):
        build_driver(instrument_count=2, rounds=1).run()

    assert "Starting demo with 2 instruments over 1 rounds" in caplog.text
    assert "Demo finished" in caplog.text
