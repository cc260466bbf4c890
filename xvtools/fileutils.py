"""Directory listing, file search, and link, mkdir and rm commands."""

import os
import sys
from enum import IntEnum

DIRSIZ = 14
_PATHBUF = 512


class FileType(IntEnum):
    DIR = 1
    FILE = 2
    DEVICE = 3


def _file_type(st_mode):
    import stat as _stat

    if _stat.S_ISDIR(st_mode):
        return FileType.DIR
    if _stat.S_ISREG(st_mode):
        return FileType.FILE
    return FileType.DEVICE


def basename(path):
    """The part of ``path`` after its last slash."""
    return path.rsplit("/", 1)[-1]


def fmtname(path):
    """Last path component, blank-padded to DIRSIZ unless already that long."""
    name = basename(path)
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def _entries(path):
    """Directory entries as listed on disk, "." and ".." first."""
    return [".", ".."] + sorted(os.listdir(path))


def ls(path, out, err):
    """List a file or the entries of a directory to ``out``."""
    try:
        st = os.stat(path)
    except OSError:
        err.write(f"ls: cannot open {path}\n")
        return
    kind = _file_type(st.st_mode)
    if kind is FileType.FILE:
        out.write(f"{fmtname(path)} {int(kind)} {st.st_ino} {st.st_size}\n")
    elif kind is FileType.DIR:
        if len(path) + 1 + DIRSIZ + 1 > _PATHBUF:
            out.write("ls: path too long\n")
            return
        try:
            names = _entries(path)
        except OSError:
            err.write(f"ls: cannot open {path}\n")
            return
        for name in names:
            full = f"{path}/{name}"
            try:
                est = os.stat(full)
            except OSError:
                out.write(f"ls: cannot stat {full}\n")
                continue
            out.write(f"{fmtname(full)} {int(_file_type(est.st_mode))} {est.st_ino} {est.st_size}\n")


def find(path, fname, out, err):
    """Write every file below ``path`` whose name is ``fname``."""
    try:
        st = os.stat(path)
    except OSError:
        err.write(f"find: cannot open {path}\n")
        return
    kind = _file_type(st.st_mode)
    if kind is FileType.FILE:
        if basename(path) == fname:
            out.write(f"{path}\n")
    elif kind is FileType.DIR:
        if len(path) + 1 + DIRSIZ + 1 > _PATHBUF:
            out.write("find: path too long\n")
            return
        try:
            names = sorted(os.listdir(path))
        except OSError:
            err.write(f"find: cannot open {path}\n")
            return
        for name in names:
            full = f"{path}/{name}"
            try:
                os.stat(full)
            except OSError:
                out.write(f"ls: cannot stat {full}\n")
                continue
            find(full, fname, out, err)


def _args(argv, stdout):
    argv = sys.argv[1:] if argv is None else list(argv)
    return argv, sys.stdout if stdout is None else stdout


def ls_main(argv=None, stdin=None, stdout=None):
    """Command entry for ``ls [path ...]``."""
    argv, stdout = _args(argv, stdout)
    for path in argv or ["."]:
        ls(path, stdout, sys.stderr)
    return 0


def find_main(argv=None, stdin=None, stdout=None):
    """Command entry for ``find dir name``."""
    argv, stdout = _args(argv, stdout)
    if len(argv) != 2:
        stdout.write("Find needs two argument!\n")
        return -1
    find(argv[0], argv[1], stdout, sys.stderr)
    return 0


def ln_main(argv=None, stdin=None, stdout=None):
    """Command entry for ``ln old new``."""
    argv, stdout = _args(argv, stdout)
    if len(argv) != 2:
        sys.stderr.write("Usage: ln old new\n")
        return 1
    try:
        os.link(argv[0], argv[1])
    except OSError:
        sys.stderr.write(f"link {argv[0]} {argv[1]}: failed\n")
    return 0


def mkdir_main(argv=None, stdin=None, stdout=None):
    """Command entry for ``mkdir dir ...``; stops at the first failure."""
    argv, stdout = _args(argv, stdout)
    if not argv:
        sys.stderr.write("Usage: mkdir files...\n")
        return 1
    for path in argv:
        try:
            os.mkdir(path)
        except OSError:
            sys.stderr.write(f"mkdir: {path} failed to create\n")
            break
    return 0


def _unlink(path):
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.unlink(path)


def rm_main(argv=None, stdin=None, stdout=None):
    """Command entry for ``rm file ...``; empty directories go too."""
    argv, stdout = _args(argv, stdout)
    if not argv:
        sys.stderr.write("Usage: rm files...\n")
        return 1
    for path in argv:
        try:
            _unlink(path)
        except OSError:
            sys.stderr.write(f"rm: {path} failed to delete\n")
            break
    return 0