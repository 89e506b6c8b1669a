"""Tests for the sunburst CLI."""

import io
import json
import logging

import pytest

from sunburst_chart.cli import load_config, main, parse_point
from sunburst_chart.logger import configure_logging


@pytest.fixture
def tree_file(tmp_path, nested_tree):
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(nested_tree))
    return path


class TestParsePoint:
    """Tests for parse_point function."""

    def test_valid(self):
        assert parse_point("1.5,2") == (1.5, 2.0)

    @pytest.mark.parametrize("text", ["1", "a,b", "1,2,3"])
    def test_invalid(self, text):
        import argparse

        with pytest.raises(argparse.ArgumentTypeError):
            parse_point(text)


class TestRenderCommand:
    """Tests for the render subcommand."""

    def test_render_svg(self, tree_file, tmp_path, capsys):
        """The chart is written as SVG with one path per node."""
        output = tmp_path / "chart.svg"
        main(["render", str(tree_file), "-o", str(output), "--width", "300", "--height", "300"])

        svg = output.read_text()
        assert svg.count("<path") == 6
        assert "Rendered 6 sectors (top-level)" in capsys.readouterr().out

    def test_render_html_after_click(self, tree_file, tmp_path, capsys):
        """Clicks are applied before writing; HTML is chosen by suffix."""
        output = tmp_path / "chart.html"
        # (300, 200) is on A's ring of a 400x400 chart
        main(["render", str(tree_file), "-o", str(output), "--width", "400", "--height", "400", "--click", "300,200"])

        html = output.read_text()
        assert html.startswith("<!DOCTYPE html>")
        assert html.count("<path") == 3
        assert "(zoomed)" in capsys.readouterr().out

    def test_config_file(self, tree_file, tmp_path):
        """Width, scale and output can come from a YAML config."""
        output = tmp_path / "from-config.svg"
        config = tmp_path / "chart.yaml"
        config.write_text(f"width: 200\nheight: 100\nscale: 2\noutput: {output}\n")

        main(["render", str(tree_file), "--config", str(config)])
        assert 'width="200.0" height="100.0"' in output.read_text()

    def test_config_not_a_mapping(self, tree_file, tmp_path, capsys):
        """A config file holding a list is a usage error."""
        config = tmp_path / "chart.yaml"
        config.write_text("- width\n- 200\n")

        with pytest.raises(ValueError, match="mapping"):
            load_config(config)
        with pytest.raises(SystemExit):
            main(["render", str(tree_file), "-o", str(tmp_path / "x.svg"), "--config", str(config)])
        assert "expected a mapping" in capsys.readouterr().err

    def test_skipped_child_logged(self, tmp_path, invalid_child_tree, capsys):
        """Data-integrity warnings reach stderr."""
        data = tmp_path / "invalid.json"
        data.write_text(json.dumps(invalid_child_tree))
        main(["render", str(data), "-o", str(tmp_path / "x.svg")])

        err = capsys.readouterr().err
        assert "WARNING sunburst_chart.layout.tree" in err
        assert "too-big" in err

    def test_missing_output(self, tree_file):
        """--output is required when the config does not provide one."""
        with pytest.raises(SystemExit):
            main(["render", str(tree_file)])

    def test_missing_input(self, tmp_path):
        """A missing input file is a usage error."""
        with pytest.raises(SystemExit):
            main(["render", str(tmp_path / "nope.json"), "-o", str(tmp_path / "x.svg")])

    def test_invalid_scale(self, tree_file, tmp_path):
        """Non-positive scales are rejected."""
        with pytest.raises(SystemExit):
            main(["render", str(tree_file), "-o", str(tmp_path / "x.svg"), "--scale", "0"])


class TestLayoutCommand:
    """Tests for the layout subcommand."""

    def test_layout_lines(self, tree_file, capsys):
        """One JSON record per node, in pre-order."""
        main(["layout", str(tree_file), "--width", "600", "--height", "600"])

        records = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert [r["name"] for r in records] == ["root", "A", "A1", "A2", "B", "B1"]
        assert records[0]["start"] == 0
        assert records[0]["end"] == 360
        assert records[1]["end"] == 216
        assert {r["width"] for r in records} == {100}

    def test_no_command(self, capsys):
        """Without a subcommand the help is shown."""
        main([])
        assert "usage" in capsys.readouterr().out


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_routes_package_records(self):
        """Package records are written plainly to a non-terminal stream."""
        stream = io.StringIO()
        configure_logging(False, stream=stream)
        logging.getLogger("sunburst_chart.layout.tree").warning("skipping %s", "x")
        logging.getLogger("sunburst_chart.chart").debug("hidden")

        assert stream.getvalue() == "WARNING sunburst_chart.layout.tree: skipping x\n"

    def test_verbose(self):
        """Verbose mode lets debug records through."""
        stream = io.StringIO()
        configure_logging(True, stream=stream)
        logging.getLogger("sunburst_chart.chart").debug("rendered")
        assert "DEBUG sunburst_chart.chart: rendered" in stream.getvalue()

    def test_reconfigure_replaces_handler(self):
        """Configuring twice does not duplicate output."""
        first, second = io.StringIO(), io.StringIO()
        configure_logging(False, stream=first)
        configure_logging(False, stream=second)
        logging.getLogger("sunburst_chart").warning("once")

        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1
