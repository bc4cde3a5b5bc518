from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of character offsets.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def at(offset: int, length: int) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset, offset + length)

    @staticmethod
    def empty(offset: int) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset, offset)

    def len(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def contains(self, offset: int) -> bool:
        """Check if the range contains the given offset."""
        return self.start <= offset < self.end

    def contains_range(self, other: "TextRange") -> bool:
        return self.start <= other.start and other.end <= self.end

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both ranges."""
        return TextRange(min(self.start, other.start), max(self.end, other.end))

    def shift(self, delta: int) -> "TextRange":
        """Move the range into another coordinate space (e.g. value string -> host file)."""
        return TextRange(self.start + delta, self.end + delta)

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange."""
    return source[range.start : range.end]
