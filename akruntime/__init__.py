"""Runtime support primitives: checked integers, fixed-point numbers, hash tables, buffers, bit helpers and more."""

__version__ = "0.1.0"

__all__ = [
    "atomic",
    "bits",
    "bytebuffer",
    "chartypes",
    "checked",
    "dictionary",
    "errors",
    "file",
    "fixedpoint",
    "fmath",
    "formatcheck",
    "hashing",
    "hashtable",
    "memsearch",
]