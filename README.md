# xvtools

Pure-Python user tools and helper code of a small RISC-V teaching operating
system. It needs nothing beyond the standard library.

## What is inside

- `xvtools.riscv` – system limits, register bit masks, the qemu `virt`
  memory map and Sv39 paging arithmetic: `pg_round_up`, `pg_round_down`,
  `pa2pte`, `pte2pa`, `pte_flags`, `px_shift`, `px`, `make_satp`, `kstack`,
  `clint_mtimecmp` and the `plic_*` register addresses.
- `xvtools.elf` – `ElfHeader` and `ProgramHeader` dataclasses with
  `unpack`/`pack`, `read_program_headers`, the `ProgType` and `ProgFlag`
  enums. Malformed data raises `ElfFormatError`.
- `xvtools.printf` – `format`, `fprintf` and `printf` understanding
  `%d %l %x %p %s %c %%`; unknown sequences are printed as they stand.
- `xvtools.grep` – the `^ . * $` matcher (`match`, `matchhere`,
  `matchstar`) and `grep(pattern, stream, out)`.
- `xvtools.textutils` – `count` returning a `Counts(lines, words, chars)`,
  and `wc`, `cat`, `echo`.
- `xvtools.umalloc` – `Allocator`, a first-fit circular free list grown
  with a simulated `sbrk`; addresses are plain integers. `malloc` raises
  `MemoryError` when the break cannot grow, `free` raises `ValueError` for a
  block it did not hand out, `free_units` reports the free-list total.
- `xvtools.rand` – `do_rand` and the `ParkMiller` generator
  (Park–Miller minimal standard).
- `xvtools.fileutils` – `fmtname`, `basename`, `ls`, `find` and the
  `ls`/`find`/`ln`/`mkdir`/`rm` commands, working on the host file system.

## Installing

```
pip install .
```

## Commands

Each command returns its exit status.

```
xv-grep 'ab*c$' file.txt   # print matching lines (stdin without files)
xv-wc file.txt             # lines, words, bytes, name
xv-cat a.txt b.txt
xv-echo hello world
xv-ls [path ...]           # name, type, inode, size
xv-find . README           # every file below "." named README
xv-ln old new
xv-mkdir dir ...
xv-rm file ...             # stops at the first failure
```

## Library use

```python
from xvtools.grep import match
from xvtools.printf import format
from xvtools.riscv import pg_round_up, px
from xvtools.umalloc import Allocator

match("^a.c", "abc")            # True
format("%d %x %s", -5, 255, "ok")   # "-5 FF ok"
pg_round_up(5000)               # 8192

heap = Allocator()
block = heap.malloc(100)
heap.free(block)
```

## What it does not do

There is no shell, no simulated page-table manager or physical memory, and
no process tools (`kill`, `sleep`, `pingpong`, `stressfs`). The `riscv`
module gives the paging arithmetic only; `elf` reads and writes headers but
does not load programs.

## Running the tests

```
pip install .[test]
pytest
```