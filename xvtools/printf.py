"""Minimal formatted output understanding %d %l %x %p %s %c and %%."""

import sys

_DIGITS = "0123456789ABCDEF"
_U32 = 0xFFFFFFFF
_U64 = (1 << 64) - 1


def _to_int32(value):
    value = int(value) & _U32
    return value - (1 << 32) if value >= 1 << 31 else value


def _printint(value, base, signed):
    xx = _to_int32(value)
    neg = signed and xx < 0
    x = (-xx if neg else xx) & _U32
    digits = []
    while True:
        digits.append(_DIGITS[x % base])
        x //= base
        if x == 0:
            break
    if neg:
        digits.append("-")
    return "".join(reversed(digits))


def _printptr(value):
    return "0x" + format(int(value) & _U64, "016X")


def _string(value):
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)


def format(fmt, *args):
    """Render ``fmt`` with ``args`` and return the text."""
    it = iter(args)

    def arg():
        try:
            return next(it)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out = []
    pending = False
    for c in fmt:
        if not pending:
            if c == "%":
                pending = True
            else:
                out.append(c)
            continue
        if c == "d":
            out.append(_printint(arg(), 10, True))
        elif c == "l":
            out.append(_printint(arg(), 10, False))
        elif c == "x":
            out.append(_printint(arg(), 16, False))
        elif c == "p":
            out.append(_printptr(arg()))
        elif c == "s":
            out.append(_string(arg()))
        elif c == "c":
            out.append(chr(int(arg()) & 0xFF))
        elif c == "%":
            out.append("%")
        else:
            out.append("%" + c)
        pending = False
    return "".join(out)


def fprintf(stream, fmt, *args):
    """Write the formatted text to ``stream``."""
    stream.write(format(fmt, *args))


def printf(fmt, *args):
    """Write the formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)