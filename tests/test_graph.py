import pytest

from labkit.cost import cost_inf, cost_is_inf
from labkit.graph import Graph, graph_from_file, main, parse_graph


def test_new_graph_has_only_infinite_edges():
    g = Graph(3)
    assert g.max_vertexs == 3
    assert all(cost_is_inf(g.get_cost(i, j)) for i in range(3) for j in range(3))


def test_add_edge_is_directed():
    g = Graph(3)
    g.add_edge(0, 2, 7)
    assert g.get_cost(0, 2) == 7
    assert cost_is_inf(g.get_cost(2, 0))


def test_add_edge_overwrites():
    g = Graph(2)
    g.add_edge(1, 0, 4)
    g.add_edge(1, 0, 9)
    assert g.get_cost(1, 0) == 9


@pytest.mark.parametrize("source,target", [(2, 0), (0, 2), (-1, 0)])
def test_out_of_range_vertex(source, target):
    g = Graph(2)
    with pytest.raises(IndexError):
        g.get_cost(source, target)
    with pytest.raises(IndexError):
        g.add_edge(source, target, 1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_dump_format():
    g = Graph(2)
    g.add_edge(0, 0, 0)
    g.add_edge(1, 1, 0)
    assert g.dump() == "2\n0 # \n# 0 \n"


def test_parse_reads_rows_as_sources():
    g = parse_graph("2\n0 5\n# 0\n")
    assert g.get_cost(0, 1) == 5
    assert cost_is_inf(g.get_cost(1, 0))
    assert g.get_cost(1, 1) == 0


def test_dump_parse_round_trip():
    g = Graph(3)
    g.add_edge(0, 1, 4)
    g.add_edge(1, 2, -2)
    g.add_edge(2, 0, 11)
    again = parse_graph(g.dump())
    assert again.dump() == g.dump()


def test_parse_hash_prefixed_and_leading_integer_words():
    g = parse_graph("2 #x 12abc zz -3")
    assert g.get_cost(0, 0) == cost_inf()
    assert g.get_cost(0, 1) == 12
    assert g.get_cost(1, 0) == 0
    assert g.get_cost(1, 1) == -3


@pytest.mark.parametrize("text", ["", "abc", "2 1 2 3"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_graph(text)


def test_graph_from_file(tmp_path):
    path = tmp_path / "g.in"
    path.write_text("3\n0 1 #\n# 0 2\n3 # 0\n")
    g = graph_from_file(path)
    assert g.max_vertexs == 3
    assert g.get_cost(1, 2) == 2
    assert g.get_cost(2, 0) == 3


def test_graph_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        graph_from_file(tmp_path / "missing.in")


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.in")]) == 1
    assert "File does not exist." in capsys.readouterr().err


def test_main_prints_graph(tmp_path, capsys):
    path = tmp_path / "g.in"
    path.write_text("2\n0 5\n# 0\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == parse_graph(path.read_text()).dump()
    assert out.startswith("2\n")