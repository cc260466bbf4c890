"""Line search with a tiny regular-expression matcher: ^ . * $ only."""

import sys

_BUFSIZE = 1024


def match(re, text):
    """True if ``re`` matches anywhere in ``text``."""
    if re.startswith("^"):
        return matchhere(re[1:], text)
    return any(matchhere(re, text[i:]) for i in range(len(text) + 1))


def matchhere(re, text):
    """True if ``re`` matches at the beginning of ``text``."""
    if not re:
        return True
    if len(re) > 1 and re[1] == "*":
        return matchstar(re[0], re[2:], text)
    if re == "$":
        return text == ""
    if text and (re[0] == "." or re[0] == text[0]):
        return matchhere(re[1:], text[1:])
    return False


def matchstar(c, re, text):
    """True if ``c*`` followed by ``re`` matches at the beginning of ``text``."""
    i = 0
    while True:
        if matchhere(re, text[i:]):
            return True
        if i < len(text) and (text[i] == c or c == "."):
            i += 1
            continue
        return False


def grep(pattern, stream, out):
    """Write to ``out`` every complete line of ``stream`` that matches.

    A final line without a newline is not examined, and reading stops
    when a single line fills the whole buffer.
    """
    pending = ""
    while True:
        room = _BUFSIZE - 1 - len(pending)
        chunk = stream.read(room) if room > 0 else ""
        if not chunk:
            return
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                out.write(line + "\n")


def main(argv=None, stdin=None, stdout=None):
    """Command entry: ``grep pattern [file ...]``; returns the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    if not argv:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern, files = argv[0], argv[1:]
    if not files:
        grep(pattern, stdin, stdout)
        return 0
    for path in files:
        try:
            stream = open(path)
        except OSError:
            stdout.write(f"grep: cannot open {path}\n")
            return 1
        with stream:
            grep(pattern, stream, stdout)
    return 0