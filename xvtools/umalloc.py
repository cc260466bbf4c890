"""First-fit free-list allocator over a simulated program break."""

HEADER_SIZE = 16  # bytes per block header and per allocation unit
_MIN_UNITS = 4096
_BASE = 0  # address of the sentinel header, below the heap


class Allocator:
    """A circular free list of blocks, sorted by address, grown with sbrk.

    Addresses are plain integers; the heap begins at ``start`` and may
    grow by at most ``capacity`` bytes.
    """

    def __init__(self, start=4096, capacity=1 << 26):
        if start <= _BASE or start % HEADER_SIZE:
            raise ValueError("start must be a positive multiple of the header size")
        self.start = start
        self.brk = start
        self.limit = start + capacity
        self._headers = {}
        self._freep = None
        self._allocated = set()

    def sbrk(self, n):
        """Move the break by ``n`` bytes and return its old value."""
        old = self.brk
        new = old + n
        if new < self.start or new > self.limit:
            raise MemoryError("sbrk: cannot move the break")
        self.brk = new
        return old

    def _release(self, bp):
        h = self._headers
        p = self._freep
        while not (p < bp < h[p][0]):
            nxt = h[p][0]
            if p >= nxt and (bp > p or bp < nxt):
                break
            p = nxt
        nxt = h[p][0]
        if bp + h[bp][1] * HEADER_SIZE == nxt:
            h[bp][1] += h[nxt][1]
            h[bp][0] = h[nxt][0]
            del h[nxt]
        else:
            h[bp][0] = nxt
        if p + h[p][1] * HEADER_SIZE == bp:
            h[p][1] += h[bp][1]
            h[p][0] = h[bp][0]
            del h[bp]
        else:
            h[p][0] = bp
        self._freep = p

    def _morecore(self, nunits):
        nunits = max(nunits, _MIN_UNITS)
        hp = self.sbrk(nunits * HEADER_SIZE)
        self._headers[hp] = [_BASE, nunits]
        self._release(hp)
        return self._freep

    def malloc(self, nbytes):
        """Allocate ``nbytes`` and return the block's address."""
        if nbytes < 0:
            raise ValueError("malloc: negative size")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        h = self._headers
        if self._freep is None:
            h[_BASE] = [_BASE, 0]
            self._freep = _BASE
        prevp = self._freep
        p = h[prevp][0]
        while True:
            size = h[p][1]
            if size >= nunits:
                if size == nunits:
                    h[prevp][0] = h[p][0]
                else:
                    h[p][1] -= nunits
                    p += h[p][1] * HEADER_SIZE
                    h[p] = [_BASE, nunits]
                self._freep = prevp
                ap = p + HEADER_SIZE
                self._allocated.add(ap)
                return ap
            if p == self._freep:
                p = self._morecore(nunits)
            prevp = p
            p = h[p][0]

    def free(self, ap):
        """Return a block obtained from malloc to the free list."""
        if ap not in self._allocated:
            raise ValueError(f"free: {ap:#x} is not an allocated block")
        self._allocated.remove(ap)
        self._release(ap - HEADER_SIZE)

    def free_units(self):
        """Total units held on the free list."""
        if self._freep is None:
            return 0
        total = 0
        p = self._headers[_BASE][0]
        while p != _BASE:
            total += self._headers[p][1]
            p = self._headers[p][0]
        return total