"""Word counting, concatenation and echo."""

import sys
from dataclasses import dataclass

_CHUNK = 512
_WHITESPACE = b" \r\t\n\v"


@dataclass(frozen=True)
class Counts:
    lines: int
    words: int
    chars: int


def _count_chunks(chunks):
    lines = words = chars = 0
    inword = False
    for chunk in chunks:
        chars += len(chunk)
        lines += chunk.count(b"\n")
        for byte in chunk:
            if byte in _WHITESPACE:
                inword = False
            elif not inword:
                words += 1
                inword = True
    return Counts(lines, words, chars)


def _chunks(stream, prog):
    while True:
        try:
            chunk = stream.read(_CHUNK)
        except OSError as exc:
            raise OSError(f"{prog}: read error") from exc
        if not chunk:
            return
        yield chunk


def count(data):
    """Lines, words and bytes in ``data``."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return _count_chunks([bytes(data)])


def wc(stream, name, out):
    """Count a binary stream and write ``lines words chars name`` to ``out``."""
    counts = _count_chunks(_chunks(stream, "wc"))
    out.write(f"{counts.lines} {counts.words} {counts.chars} {name}\n")
    return counts


def cat(stream, out):
    """Copy a binary stream to a binary output."""
    for chunk in _chunks(stream, "cat"):
        try:
            written = out.write(chunk)
        except OSError as exc:
            raise OSError("cat: write error") from exc
        if written is not None and written != len(chunk):
            raise OSError("cat: write error")


def echo(args, out):
    """Write ``args`` separated by blanks and ended by a newline."""
    if args:
        out.write(" ".join(args) + "\n")


def wc_main(argv=None, stdin=None, stdout=None):
    """Command entry for ``wc [file ...]``; returns the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    stdin = sys.stdin.buffer if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    try:
        if not argv:
            wc(stdin, "", stdout)
            return 0
        for path in argv:
            try:
                stream = open(path, "rb")
            except OSError:
                stdout.write(f"wc: cannot open {path}\n")
                return 1
            with stream:
                wc(stream, path, stdout)
    except OSError as exc:
        stdout.write(f"{exc}\n")
        return 1
    return 0


def cat_main(argv=None, stdin=None, stdout=None):
    """Command entry for ``cat [file ...]``; returns the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    stdin = sys.stdin.buffer if stdin is None else stdin
    stdout = sys.stdout.buffer if stdout is None else stdout
    try:
        if not argv:
            cat(stdin, stdout)
            return 0
        for path in argv:
            try:
                stream = open(path, "rb")
            except OSError:
                sys.stderr.write(f"cat: cannot open {path}\n")
                return 1
            with stream:
                cat(stream, stdout)
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


def echo_main(argv=None, stdin=None, stdout=None):
    """Command entry for ``echo [arg ...]``; returns the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    stdout = sys.stdout if stdout is None else stdout
    echo(argv, stdout)
    return 0