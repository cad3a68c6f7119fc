"""Integration tests for the command-line interface."""

import json
import logging

import pytest
from typer.testing import CliRunner

from strokeline import __version__
from strokeline.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Remove handlers that configure_logging attaches to the root logger."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def trace_file(tmp_path, corner_stroke):
    path = tmp_path / "corner.json"
    path.write_text(json.dumps({"samples": [s.to_dict() for s in corner_stroke]}))
    return path


class TestSimplifyCommand:
    """Tests for a successful run."""

    def test_writes_default_output(self, trace_file):
        """The result lands next to the input with the simplified suffix."""
        result = runner.invoke(app, [str(trace_file)])
        assert result.exit_code == 0, result.output

        output = trace_file.parent / "corner-simplified.json"
        data = json.loads(output.read_text())
        assert data["point_count"] == 8
        assert [b["index"] for b in data["breakpoints"]] == [0, 3, 4, 5, 7]

    def test_custom_output_and_options(self, trace_file, tmp_path):
        """Test explicit output path, tolerance and chunk size."""
        output = tmp_path / "out.json"
        result = runner.invoke(
            app, [str(trace_file), "-o", str(output), "-t", "1.5", "-c", "3", "-q"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text())["tolerance"] == 1.5

    def test_csv_input(self, tmp_path):
        """Test simplifying a CSV trace."""
        path = tmp_path / "line.csv"
        path.write_text("x,y\n" + "".join(f"{i},{2 * i}\n" for i in range(10)))
        result = runner.invoke(app, [str(path), "-q"])
        assert result.exit_code == 0, result.output

        data = json.loads((tmp_path / "line-simplified.json").read_text())
        assert data["breakpoint_count"] == 2

    def test_show_points(self, trace_file):
        """Test printing the per-point table."""
        result = runner.invoke(app, [str(trace_file), "--show-points"])
        assert result.exit_code == 0, result.output
        assert "inflection" in result.output

    def test_verbose_lists_critical_points(self, trace_file):
        """Test printing critical points with their curvature windows."""
        result = runner.invoke(app, [str(trace_file), "-v"])
        assert result.exit_code == 0, result.output
        assert "Curv(3..5)" in result.output

    def test_log_file(self, trace_file, tmp_path):
        """Test that detailed logs go to the requested file."""
        log_path = tmp_path / "run.log"
        result = runner.invoke(app, [str(trace_file), "-q", "--log-file", str(log_path)])
        assert result.exit_code == 0, result.output
        assert "Stroke simplified" in log_path.read_text()

    def test_empty_trace(self, tmp_path):
        """An empty trace exits cleanly without writing a result."""
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"samples": []}))
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 0
        assert not (tmp_path / "empty-simplified.json").exists()

    def test_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestCommandErrors:
    """Tests for failing runs."""

    def test_missing_input(self, tmp_path):
        """Test that a missing input file fails."""
        result = runner.invoke(app, [str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_directory_input(self, tmp_path):
        """Test that a directory is not accepted as input."""
        result = runner.invoke(app, [str(tmp_path)])
        assert result.exit_code == 1

    def test_verbose_and_quiet(self, trace_file):
        """Test that verbose and quiet are mutually exclusive."""
        result = runner.invoke(app, [str(trace_file), "-v", "-q"])
        assert result.exit_code == 1

    def test_unsupported_format(self, tmp_path):
        """Test that unknown trace formats fail."""
        path = tmp_path / "stroke.txt"
        path.write_text("0 0\n")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 1

    def test_malformed_trace(self, tmp_path):
        """Test that malformed records fail."""
        path = tmp_path / "stroke.json"
        path.write_text(json.dumps([{"x": 0}]))
        result = runner.invoke(app, [str(path), "-q"])
        assert result.exit_code == 1

    def test_negative_tolerance(self, trace_file):
        """Test that the tolerance option is range checked."""
        result = runner.invoke(app, [str(trace_file), "--tolerance=-1"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("tolerance", ["nan", "inf"])
    def test_non_finite_tolerance(self, trace_file, tolerance):
        """Test that a non-finite tolerance is reported as a user error."""
        result = runner.invoke(app, [str(trace_file), "-q", "-t", tolerance])
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "Invalid tolerance" in result.output
        assert not (trace_file.parent / "corner-simplified.json").exists()

    def test_nan_sample_is_written(self, tmp_path):
        """A trace holding a NaN sample still produces a result file."""
        path = tmp_path / "gap.csv"
        rows = [f"{i},{2 * i}\n" for i in range(10)]
        rows[5] = "nan,nan\n"
        path.write_text("x,y\n" + "".join(rows))
        result = runner.invoke(app, [str(path), "-q"])
        assert result.exit_code == 0, result.output

        data = json.loads((tmp_path / "gap-simplified.json").read_text())
        assert data["original_trace"][5] == {"x": None, "y": None, "timestamp": 5}
