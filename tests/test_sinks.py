"""Tests for sinks."""

import io
import logging

import pytest

from bank_sim.sinks import ConsoleSink


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        sink = ConsoleSink()

        assert sink.stream is None
        assert sink.counts == {}

    def test_write_to_stdout(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink()

        sink.write("View", "Alice's Account: ...")
        captured = capsys.readouterr()

        assert captured.out == "Alice's Account: ...\n"

    def test_write_to_stream(self) -> None:
        stream = io.StringIO()
        sink = ConsoleSink(stream=stream)

        sink.write("Deposit", "first")
        sink.write("Deposit", "second")

        assert stream.getvalue() == "first\nsecond\n"

    def test_counts_by_category(self) -> None:
        sink = ConsoleSink(stream=io.StringIO())

        sink.write("Deposit", "a")
        sink.write("View", "b")
        sink.write("Deposit", "c")

        assert sink.counts == {"Deposit": 2, "View": 1}

    def test_counts_is_a_copy(self) -> None:
        sink = ConsoleSink(stream=io.StringIO())
        sink.write("View", "a")

        sink.counts["View"] = 99

        assert sink.counts == {"View": 1}

    def test_close_returns_counts_and_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        sink = ConsoleSink(stream=io.StringIO())
        sink.write("invalid", "Error: Empty command")

        with caplog.at_level(logging.INFO, logger="bank_sim.sinks.console"):
            counts = sink.close()

        assert counts == {"invalid": 1}
        assert "Console sink wrote 1 lines" in caplog.text
