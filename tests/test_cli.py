import os

import pytest

from pipechain.cli import is_here_doc, main


@pytest.fixture
def stdin_from(tmp_path):
    """Point file descriptor 0 at a file holding the given bytes."""
    saved = os.dup(0)
    opened = []

    def _redirect(data: bytes):
        source = tmp_path / "stdin.txt"
        source.write_bytes(data)
        fd = os.open(source, os.O_RDONLY)
        opened.append(fd)
        os.dup2(fd, 0)

    yield _redirect
    os.dup2(saved, 0)
    os.close(saved)
    for fd in opened:
        os.close(fd)


@pytest.mark.parametrize(
    "arg, expected",
    [("here_doc", True), ("here_docs", False), ("", False), ("infile.txt", False)],
)
def test_is_here_doc(arg, expected):
    assert is_here_doc(arg) is expected


def test_not_enough_arguments(tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert main(["infile.txt", "cat", str(out)]) == 0
    assert capsys.readouterr().out == "Not enough arguments!\n"
    assert not out.exists()


def test_two_commands_pass_data_through(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    data = b"Hello world\nbye\nHello again\n"
    infile.write_bytes(data)
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_bytes() == data


def test_grep_then_count(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("Hello world\nbye\nHello again\n")
    assert main([str(infile), "grep Hello", "wc -l", str(outfile)]) == 0
    assert outfile.read_text().strip() == "2"


def test_middle_commands_are_run(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("b\na\nc\n")
    assert main([str(infile), "cat", "sort", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "a\nb\nc\n"


def test_outfile_is_truncated(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("short\n")
    outfile.write_text("a much longer previous content\n")
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "short\n"


def test_missing_infile(tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    status = main([str(tmp_path / "missing.txt"), "cat", "cat", str(outfile)])
    assert status == 1
    assert "Could not read infile!" in capsys.readouterr().err
    assert not outfile.exists()


def test_unopenable_outfile(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("x\n")
    outfile = tmp_path / "no_such_dir" / "out.txt"
    status = main([str(infile), "cat", "cat", str(outfile)])
    assert status == 1
    assert "Could not open outfile!" in capsys.readouterr().err


def test_here_doc_reads_stdin_and_appends(tmp_path, stdin_from):
    outfile = tmp_path / "out.txt"
    outfile.write_text("old\n")
    stdin_from(b"new\n")
    assert main(["here_doc", "EOF", "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "old\nnew\n"


def test_here_doc_skips_limiter(tmp_path, stdin_from):
    outfile = tmp_path / "out.txt"
    stdin_from(b"line one\nline two\n")
    assert main(["here_doc", "EOF", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "line one\nline two\n"