"""Tests for CSV output and the comparative (transposed) table."""

import io

from pewbench.reporting import HEADER_LATCH, ComparativeReporter, CsvReporter, HeaderLatch
from pewbench.stats import Measurement, StabilityThreshold


class TestHeaderLatch:
    def test_claim_once(self):
        latch = HeaderLatch()
        assert latch.claim() is True
        assert latch.claim() is False
        assert latch.claimed

    def test_reset(self):
        latch = HeaderLatch()
        latch.claim()
        latch.reset()
        assert latch.claim() is True


class TestCsvReporter:
    def test_header_written_lazily(self):
        stream = io.StringIO()
        reporter = CsvReporter(stream=stream)
        assert stream.getvalue() == ""
        assert not HEADER_LATCH.claimed

        reporter.write_row("set/bm/16", 42)
        assert stream.getvalue() == "Name,Time (ns)\nset/bm/16,42\n"

    def test_header_shared_between_reporters(self):
        first, second = io.StringIO(), io.StringIO()
        CsvReporter(stream=first).write_row("a/b/1", 1)
        CsvReporter(stream=second).write_row("a/b/2", 2)
        assert first.getvalue() == "Name,Time (ns)\na/b/1,1\n"
        assert second.getvalue() == "a/b/2,2\n"

    def test_private_latch(self):
        stream = io.StringIO()
        CsvReporter(stream=io.StringIO()).write_row("a/b/1", 1)
        CsvReporter(stream=stream, latch=HeaderLatch()).write_row("a/b/1", 1)
        assert stream.getvalue().startswith("Name,Time (ns)\n")

    def test_report_measurement(self):
        stream = io.StringIO()
        CsvReporter(stream=stream).report(Measurement("set/bm/8", total_ns=100, runs=8))
        assert stream.getvalue().splitlines()[-1] == "set/bm/8,12"

    def test_writes_to_file(self, tmp_path):
        path = tmp_path / "results.csv"
        with CsvReporter(str(path)) as reporter:
            reporter.write_row("set/bm/1", 5)
            reporter.write_row("set/bm/2", 9)
        assert path.read_text() == "Name,Time (ns)\nset/bm/1,5\nset/bm/2,9\n"

    def test_no_file_created_without_rows(self, tmp_path):
        path = tmp_path / "results.csv"
        CsvReporter(str(path)).close()
        assert not path.exists()

    def test_unwritable_file_falls_back_to_stdout(self, tmp_path, capsys, log_handler):
        path = tmp_path / "missing" / "results.csv"
        reporter = CsvReporter(str(path))
        reporter.write_row("set/bm/1", 5)
        reporter.close()

        assert capsys.readouterr().out == "Name,Time (ns)\nset/bm/1,5\n"
        assert reporter.output is None
        assert log_handler.contains("writing results to stdout")


class TestMeasurement:
    def test_mean_truncates(self):
        assert Measurement("x", total_ns=17, runs=4).mean_ns == 4

    def test_zero_runs(self):
        assert Measurement("x", total_ns=0, runs=0).mean_ns == 0

    def test_to_row(self):
        assert Measurement("x/y/1", total_ns=30, runs=3).to_row() == ("x/y/1", 10)


class TestStabilityThreshold:
    def test_both_bounds_required(self):
        threshold = StabilityThreshold(min_runs=8, min_duration_ns=1_000)
        assert not threshold.is_satisfied(7, 5_000)
        assert not threshold.is_satisfied(100, 999)
        assert threshold.is_satisfied(8, 1_000)


class TestComparativeReporter:
    LINES = [
        "Name,Time (ns)",
        "range_bench/bm_vector_range/4096,423289",
        "range_bench/bm_vector_range/1024,102541",
        "gen_bench/bm_vector_gen/1024,102316",
        "gen_bench/bm_vector_gen/4096,416523",
    ]

    def test_parse_line(self):
        assert ComparativeReporter.parse_line("a/b/16,99\n") == ("a/b", 16, "99")

    def test_parse_rejects_non_rows(self):
        for line in ["Name,Time (ns)", "a/b,1", "a/b/c/d,1", "a/b/x,1", "a/b/1,2,3", ""]:
            assert ComparativeReporter.parse_line(line) is None

    def test_transposed_rows(self):
        reporter = ComparativeReporter()
        for line in self.LINES:
            reporter.add_line(line)

        assert reporter.rows() == [
            ["Size", "range_bench/bm_vector_range", "gen_bench/bm_vector_gen"],
            ["1024", "102541", "102316"],
            ["4096", "423289", "416523"],
        ]

    def test_write(self):
        reporter = ComparativeReporter()
        reporter.add_line("a/b/2,20")
        reporter.add_line("a/b/1,10")
        stream = io.StringIO()
        reporter.write(stream)
        assert stream.getvalue() == "Size,a/b\n1,10\n2,20\n"
