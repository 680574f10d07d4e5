"""Tests for reading graph descriptions."""
import logging

import pytest


class TestParseEdge:
    """Tests for tokenizing a single edge line."""

    def test_with_weight(self, lib):
        assert lib.parse_edge("X -- Y 12") == ("X", "Y", 12)

    def test_default_weight(self, lib):
        assert lib.parse_edge("  X -- Y") == ("X", "Y", 1)

    def test_no_space_after_marker(self, lib):
        """Whitespace after the marker is optional."""
        assert lib.parse_edge("X --Y") == ("X", "Y", 1)

    def test_non_numeric_weight_defaults(self, lib):
        """A weight token that is not an integer leaves weight 1."""
        assert lib.parse_edge("X -- Y heavy") == ("X", "Y", 1)

    def test_trailing_text_ignored(self, lib):
        assert lib.parse_edge("X -- Y 7 extra") == ("X", "Y", 7)

    def test_missing_second_name(self, lib):
        assert lib.parse_edge("X --") is None

    def test_marker_glued_to_names(self, lib):
        """Names must be separated from the marker by whitespace."""
        assert lib.parse_edge("X--Y") is None

    def test_non_positive_weight(self, lib):
        """Weights below 1 are read as unit weights."""
        assert lib.parse_edge("X -- Y 0") == ("X", "Y", 1)
        assert lib.parse_edge("X -- Y -3") == ("X", "Y", 1)


class TestReadGraph:
    """Tests for read_graph."""

    def test_name_is_first_relevant_line(self, lib):
        """Comments and blank lines before the name are skipped."""
        g = lib.read_graph("\n  // header comment\n\n  My Graph  \nA\n")
        assert lib.graph_name(g) == "My Graph"
        assert lib.n_vertices(g) == 1
        assert g.stats.comment_lines == 1

    def test_empty_source(self, lib):
        """No lines gives an unnamed, empty graph."""
        g = lib.read_graph("")
        assert lib.graph_name(g) is None
        assert lib.n_vertices(g) == 0

    def test_name_only(self, lib):
        g = lib.read_graph("G\n")
        assert lib.graph_name(g) == "G"
        assert lib.n_vertices(g) == 0
        assert lib.n_edges(g) == 0

    def test_isolated_vertex_keeps_inner_spaces(self, lib):
        """A vertex line names a vertex with the whole stripped line."""
        g = lib.read_graph("G\n  New York \n")
        assert lib.find_vertex(g, "New York") == 0

    def test_edges_create_vertices(self, lib):
        g = lib.read_graph("G\nA -- B 3\nB -- C\n")
        assert [v.name for v in g.vertices] == ["A", "B", "C"]
        assert lib.n_edges(g) == 2
        assert lib.neighbors(g, 0) == [(1, 3)]

    def test_comment_between_edges(self, lib):
        g = lib.read_graph("G\nA -- B\n// C -- D\nB -- C\n")
        assert lib.n_vertices(g) == 3
        assert g.stats.comment_lines == 1

    def test_malformed_lines_skipped(self, lib):
        """Malformed edge lines are counted and skipped."""
        g = lib.read_graph("G\nA--B\nA -- \nC -- D\n")
        assert [v.name for v in g.vertices] == ["C", "D"]
        assert g.stats.skipped_lines == 2

    def test_non_positive_weight_keeps_edge(self, lib):
        """An edge with weight 0 still creates its vertices and edge."""
        g = lib.read_graph("G\nA -- B 0\nB -- C\n")
        assert lib.n_vertices(g) == 3
        assert lib.n_edges(g) == 2
        assert lib.neighbors(g, 0) == [(1, 1)]
        assert g.stats.skipped_lines == 0

    def test_rejected_edges_counted(self, lib):
        """Self-loops and duplicates still register their vertices."""
        g = lib.read_graph("G\nA -- A\nA -- B\nB -- A 9\n")
        assert lib.n_vertices(g) == 2
        assert lib.n_edges(g) == 1
        assert g.stats.rejected_edges == 2

    def test_accepts_iterable_of_lines(self, lib):
        g = lib.read_graph(["G\n", "A -- B\n", "C\n"])
        assert lib.n_vertices(g) == 3

    def test_malformed_line_logged(self, lib, caplog):
        caplog.set_level(logging.DEBUG, logger="cutgraph")
        lib.read_graph("G\nA--B\n")
        assert "Skipping malformed edge on line 2" in caplog.text


class TestReadGraphFile:
    """Tests for reading from disk."""

    def test_reads_file(self, lib, tmp_path):
        path = tmp_path / "g.txt"
        path.write_text("G\nA -- B\nB -- C\n", encoding="utf-8")
        g = lib.read_graph_file(str(path))
        assert lib.graph_name(g) == "G"
        assert lib.n_edges(g) == 2

    def test_missing_file(self, lib, tmp_path):
        with pytest.raises(lib.ParseError):
            lib.read_graph_file(str(tmp_path / "missing.txt"))

    def test_bad_encoding(self, lib, tmp_path):
        path = tmp_path / "g.txt"
        path.write_bytes(b"G\n\xff\xfe -- A\n")
        with pytest.raises(lib.ParseError):
            lib.read_graph_file(str(path), encoding="utf-8")
