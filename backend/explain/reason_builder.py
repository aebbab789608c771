"""ReasonBuilder class for accumulating commentary sentences."""


class ReasonBuilder:
    """Accumulates sentences for a report without duplicates."""

    def __init__(self) -> None:
        self._reasons: list[str] = []

    def add(self, text: str) -> None:
        """Add a sentence if it's not empty and not already present.

        Args:
            text: The sentence to add.
        """
        if text and text not in self._reasons:
            self._reasons.append(text)

    def extend(self, texts: list[str]) -> None:
        for text in texts:
            self.add(text)

    def build(self) -> list[str]:
        """Return a copy of the accumulated sentences."""
        return self._reasons.copy()

    def to_string(self) -> str:
        """Join all sentences into a single space-separated string."""
        return " ".join(self._reasons).strip()

    def __len__(self) -> int:
        return len(self._reasons)

    def __bool__(self) -> bool:
        return len(self._reasons) > 0
