import io

import pytest

from labkit.intqueue import IntQueue, main, parse_queue, queue_from_file, user_discard


def make(values):
    q = IntQueue()
    for v in values:
        q.enqueue(v)
    return q


def test_fifo_order():
    q = make([4, 5, 6])
    assert q.first() == 4
    assert q.dequeue() == 4
    assert q.dequeue() == 5
    assert list(q) == [6]
    assert len(q) == 1


def test_empty_queue():
    q = IntQueue()
    assert q.is_empty()
    assert len(q) == 0
    with pytest.raises(IndexError):
        q.first()
    with pytest.raises(IndexError):
        q.dequeue()


def test_discard_positions():
    q = make([1, 2, 3, 4])
    q.discard(0)
    assert list(q) == [2, 3, 4]
    q.discard(2)
    assert list(q) == [2, 3]
    assert len(q) == 2


def test_discard_out_of_range():
    q = make([1, 2])
    with pytest.raises(IndexError):
        q.discard(2)


def test_dump_format():
    buf = io.StringIO()
    make([1, 2, 3]).dump(buf)
    assert buf.getvalue() == "[ 1, 2, 3]\n"


def test_dump_empty():
    buf = io.StringIO()
    IntQueue().dump(buf)
    assert buf.getvalue() == "[ ]\n"


def test_parse_nonempty():
    q = parse_queue("empty: 0\n7 -3 9\n")
    assert list(q) == [7, -3, 9]


def test_parse_empty_flag():
    q = parse_queue("empty: 1\n")
    assert q.is_empty()


@pytest.mark.parametrize("text", ["full: 0\n1\n", "empty: 0\n1 x 2\n", "empty: 0\n"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_queue(text)


def test_queue_from_file(tmp_path):
    path = tmp_path / "q.in"
    path.write_text("empty: 0\n10 20 30\n")
    assert list(queue_from_file(path)) == [10, 20, 30]


def test_user_discard_retries_out_of_range():
    q = make([10, 20, 30])
    out = io.StringIO()
    result = user_discard(q, io.StringIO("5\n1\n"), out)
    assert list(result) == [10, 30]
    assert out.getvalue().count("Elemento inválido!") == 1


def test_user_discard_non_number():
    q = make([10, 20])
    with pytest.raises(ValueError):
        user_discard(q, io.StringIO("abc\n"), io.StringIO())
    assert list(q) == [10, 20]


def test_user_discard_empty_queue():
    with pytest.raises(ValueError):
        user_discard(IntQueue(), io.StringIO("0\n"), io.StringIO())


def test_main_runs(tmp_path, monkeypatch, capsys):
    path = tmp_path / "q.in"
    path.write_text("empty: 0\n1 2 3\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("length: 3\n[ 1, 2, 3]\n")
    assert out.endswith("[ 2, 3]\n")


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "File does not exist." in capsys.readouterr().err


def test_main_wrong_arguments(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out