"""Line scanning shared by the lint rules.

Lines are split on ``\\n`` only and numbered from 1. A line starting with a fence
marker toggles the "inside code block" state; fences do not nest, so any later
fence line closes the block whatever it contains.
"""

from collections.abc import Iterator
from dataclasses import dataclass

FENCE = "```"


@dataclass(frozen=True)
class ScannedLine:
    """One line of a document with its code-block state."""
    number: int
    text: str
    is_fence: bool
    in_code: bool  # state before this line is applied

    @property
    def opens_fence(self) -> bool:
        return self.is_fence and not self.in_code

    @property
    def closes_fence(self) -> bool:
        return self.is_fence and self.in_code


def split_lines(text: str) -> list[str]:
    return text.split("\n")


def scan_lines(text: str) -> Iterator[ScannedLine]:
    """Yield every line together with fence state."""
    in_code = False
    for index, line in enumerate(split_lines(text)):
        is_fence = line.startswith(FENCE)
        yield ScannedLine(number=index + 1, text=line, is_fence=is_fence, in_code=in_code)
        if is_fence:
            in_code = not in_code


def prose_lines(text: str) -> Iterator[ScannedLine]:
    """Yield only lines outside fenced code blocks, fence lines excluded."""
    for scanned in scan_lines(text):
        if scanned.is_fence or scanned.in_code:
            continue
        yield scanned
