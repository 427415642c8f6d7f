"""An error carrying an errno code, a syscall name or a literal message."""

from __future__ import annotations

import os


class Error(Exception):
    """An error built from an errno code, a failed syscall or a message."""

    def __init__(self, code: int = 0, string_literal: str = "", syscall: bool = False):
        self.code = code
        self.string_literal = string_literal
        self.syscall = syscall
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.syscall:
            return f"{self.string_literal}: {os.strerror(self.code)}"
        if self.code:
            return os.strerror(self.code)
        return self.string_literal

    @classmethod
    def from_errno(cls, code: int) -> "Error":
        return cls(code=code)

    @classmethod
    def from_syscall(cls, syscall_name: str, rc: int) -> "Error":
        """Error from a syscall that returned the negated errno ``rc``."""
        return cls(code=-rc, string_literal=syscall_name, syscall=True)

    @classmethod
    def from_string_literal(cls, string_literal: str) -> "Error":
        return cls(string_literal=string_literal)

    def is_errno(self) -> bool:
        return self.code != 0

    def is_syscall(self) -> bool:
        return self.syscall