import io

from xvtools.textutils import (
    Counts,
    cat,
    cat_main,
    count,
    echo,
    echo_main,
    wc,
    wc_main,
)


def test_count_empty():
    assert count(b"") == Counts(0, 0, 0)


def test_count_invariants():
    data = b"  the quick\tbrown\n\nfox\r\v jumps \n"
    counts = count(data)
    assert counts.chars == len(data)
    assert counts.lines == data.count(b"\n")
    assert counts.words == len(data.split())


def test_nul_is_not_whitespace():
    assert count(b"a\0b").words == 1


def test_wc_output_format():
    out = io.StringIO()
    counts = wc(io.BytesIO(b"one two\nthree\n"), "f", out)
    assert out.getvalue() == "2 3 14 f\n"
    assert counts == Counts(2, 3, 14)


def test_wc_word_spans_chunks():
    data = b"x" * 600 + b" y"
    out = io.StringIO()
    counts = wc(io.BytesIO(data), "", out)
    assert counts.words == 2
    assert counts.chars == len(data)


def test_wc_main_files(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"a b\n")
    out = io.StringIO()
    assert wc_main([str(path)], io.BytesIO(), out) == 0
    assert out.getvalue().endswith(f" {path}\n")
    assert out.getvalue().split()[:3] == ["1", "2", "4"]


def test_wc_main_cannot_open(tmp_path):
    missing = tmp_path / "nope"
    out = io.StringIO()
    assert wc_main([str(missing)], io.BytesIO(), out) == 1
    assert out.getvalue() == f"wc: cannot open {missing}\n"


def test_cat_copies_bytes():
    data = bytes(range(256)) * 5
    out = io.BytesIO()
    cat(io.BytesIO(data), out)
    assert out.getvalue() == data


def test_cat_main_concatenates(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_bytes(b"first\n")
    b.write_bytes(b"second\n")
    out = io.BytesIO()
    assert cat_main([str(a), str(b)], io.BytesIO(), out) == 0
    assert out.getvalue() == b"first\nsecond\n"


def test_cat_main_stdin():
    out = io.BytesIO()
    assert cat_main([], io.BytesIO(b"piped"), out) == 0
    assert out.getvalue() == b"piped"


def test_cat_main_cannot_open(tmp_path, capsys):
    missing = tmp_path / "x"
    assert cat_main([str(missing)], io.BytesIO(), io.BytesIO()) == 1
    assert capsys.readouterr().err == f"cat: cannot open {missing}\n"


def test_echo_joins_with_blanks():
    out = io.StringIO()
    echo(["a", "b"], out)
    assert out.getvalue() == "a b\n"


def test_echo_without_arguments_prints_nothing():
    out = io.StringIO()
    assert echo_main([], io.StringIO(), out) == 0
    assert out.getvalue() == ""