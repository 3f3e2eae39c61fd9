"""Mutable output accumulator shared by the formatting callbacks."""

from __future__ import annotations


class ManualOutput:
    """
    String builder owned by a single assembly call.

    Callbacks receive the same instance and append to it; the assembler
    returns ``str(output)`` once every section has been processed.

    Examples:
        >>> out = ManualOutput("# Manual\\n")
        >>> out.write("## Basics\\n")
        >>> str(out)
        '# Manual\\n## Basics\\n'
    """

    def __init__(self, start_text: str = ""):
        self._parts: list[str] = [start_text] if start_text else []
        self._length = len(start_text)

    def write(self, text: str) -> None:
        self._parts.append(text)
        self._length += len(text)

    def getvalue(self) -> str:
        """Collapse the written parts into one string."""
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.getvalue()

    def __repr__(self) -> str:
        return f"ManualOutput(length={self._length})"


__all__ = ["ManualOutput"]
