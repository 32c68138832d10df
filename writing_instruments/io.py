from __future__ import annotations

from typing import List


class IOInterface:
    """Where the demo sends its report lines."""

    def write(self, text: str = "") -> None:  # pragma: no cover - interface contract
        raise NotImplementedError


class StdIO(IOInterface):
    """Plain stdout implementation."""

    def write(self, text: str = "") -> None:
        print(text)


class BufferedIO(IOInterface):
    """Test double that keeps every written line."""

    def __init__(self) -> None:
        self.outputs: List[str] = []

    def write(self, text: str = "") -> None:
        self.outputs.append(text)
