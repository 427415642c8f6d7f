# akruntime

Small, self-contained runtime primitives with precisely defined integer
semantics. Everything works on plain Python values. Fixed-width behaviour such
as overflow, wrapping and bit counts is given explicitly through `bits` and
`signed` arguments. The package has no runtime dependencies. The test suite
uses pytest, which is listed under the `test` extra.

## Modules

| Module | Contents |
| --- | --- |
| `akruntime.bits` | `popcount`, `count_trailing_zeroes`, `count_leading_zeroes` and their `_safe` variants, `bit_scan_forward`, `exp2`, `log2`, `ipow`, and `bit_cast`, which reinterprets bytes between `struct` formats |
| `akruntime.hashing` | 32-bit integer hashes: `int_hash`, `double_hash`, `pair_int_hash`, `u64_hash`, `ptr_hash` |
| `akruntime.chartypes` | ASCII and Unicode code-point classification, case mapping, and digit parsing and formatting. The functions accept an int or a one-character string |
| `akruntime.errors` | `Error`, an exception built with `from_errno`, `from_syscall` or `from_string_literal` |
| `akruntime.checked` | `Checked` integers whose overflow is sticky, plus `is_within_range`, `addition_would_overflow`, `multiplication_would_overflow` and `make_checked` |
| `akruntime.fixedpoint` | `FixedPoint` numbers with a configurable precision and underlying width. Rounding to an integer goes to the nearest value, with ties to even |
| `akruntime.hashtable` | `HashTable`, an open-addressing set with double-hash probing and an optional insertion order, plus `HashSetResult`, `HashSetExistingEntryBehavior` and `BucketState` |
| `akruntime.dictionary` | `Dictionary` and `OrderedHashMap`, both built on `HashTable` |
| `akruntime.memsearch` | `memmem`, `memmem_chunks`, `secure_zero`, `timing_safe_compare` |
| `akruntime.bytebuffer` | `ByteBuffer`, a growable byte buffer with an inline capacity |
| `akruntime.fmath` | Floating-point functions that return NaN or an infinity where the standard `math` module would raise |
| `akruntime.file` | `File`, a binary reader and writer that raises `Error` when an operation fails |
| `akruntime.atomic` | `Atomic`, a lock-guarded value cell; `MemoryOrder`; `full_memory_barrier` |
| `akruntime.formatcheck` | `CheckedFormatString`, `count_fmt_params` and `check_format_parameter_consistency`, which check a `{}`-style format string against a number of arguments |

## Examples

Overflow-aware arithmetic:

```python
from akruntime.checked import Checked

c = Checked(250, bits=8, signed=False)
c.add(10)
assert c.has_overflow()
# c.value() now raises OverflowError
```

Fixed-point numbers:

```python
from akruntime.fixedpoint import FixedPoint

x = FixedPoint(2.5, precision=16, bits=32)
assert x.lfloor() == 2
assert x.lceil() == 3
```

Hash tables and dictionaries:

```python
from akruntime.dictionary import OrderedHashMap

m = OrderedHashMap()
m.set("b", 2)
m.set("a", 1)
assert m.keys() == ["b", "a"]
assert m.get("a") == 1
assert m.get("missing") is None
```

Byte searching:

```python
from akruntime.memsearch import memmem

assert memmem(b"hello world", b"world") == 6
assert memmem(b"hello", b"xyz") is None
```

Format-string checking:

```python
from akruntime.formatcheck import CheckedFormatString, FormatStringError

CheckedFormatString("{} and {}", 2)
try:
    CheckedFormatString("{} and {}", 3)
except FormatStringError as exc:
    print(exc)  # Format string does not reference all passed parameters
```

## Errors

Failures are raised as exceptions:

- Invalid arguments raise `ValueError`. Examples are an unsupported width, a
  value that does not fit its width, or a non-digit passed to a digit parser.
  `FormatStringError` is a subclass of `ValueError`.
- Indexing a `ByteBuffer` out of range raises `IndexError`.
- Reading the value of an overflowed `Checked` raises `OverflowError`.
- Failures in `File` raise `akruntime.errors.Error`. Its `code` attribute holds
  the errno value.

## What the package does not do

This is a library only. It provides no command-line program. `Atomic` makes its
operations atomic by means of a lock: the `MemoryOrder` arguments are checked
but do not weaken the ordering, and `is_lock_free()` always returns `False`.