import io

from dijkstrax import UNREACHABLE, find_shortest_paths, print_improvement, print_paths
from dijkstrax.reporter import format_path


def test_print_paths_demo(demo_graph, capsys):
    print_paths(1, find_shortest_paths(demo_graph, 1))
    assert capsys.readouterr().out == (
        "Shortest paths:\n"
        "1->1 = 0\n"
        "1->2 = 7\n"
        "1->3 = 9\n"
        "1->4 = 20\n"
        "1->5 = 20\n"
        "1->6 = 11\n"
    )


def test_unreachable_vertices_are_omitted():
    buf = io.StringIO()
    print_paths(2, [UNREACHABLE, 0, 4, UNREACHABLE], stream=buf)
    assert buf.getvalue() == "Shortest paths:\n2->2 = 0\n2->3 = 4\n"


def test_empty_table_prints_header_only(capsys):
    print_paths(1, [])
    assert capsys.readouterr().out == "Shortest paths:\n"


def test_improvement_line(capsys):
    print_improvement(1, 6, 11)
    assert capsys.readouterr().out == "Found shortest path from 1 to 6 with weight = 11\n"


def test_improvements_precede_table(demo_graph, capsys):
    print_paths(1, find_shortest_paths(demo_graph, 1, on_improve=print_improvement))
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == [
        "Found shortest path from 1 to 2 with weight = 7",
        "Found shortest path from 1 to 6 with weight = 14",
        "Found shortest path from 1 to 3 with weight = 9",
    ]
    assert lines[7] == "Shortest paths:"
    assert len(lines) == 14


def test_format_path():
    assert format_path([1, 3, 6]) == "Path: 1 -> 3 -> 6"
    assert format_path([]) == "Path: unreachable"
