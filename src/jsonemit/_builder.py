"""Append-only text accumulator used as the encoder's output target."""

from __future__ import annotations

from collections.abc import Iterable


class TextBuilder:
    """
    Collects text fragments and flattens them once on demand.

    Appending never copies previously written text, so building a document
    out of many small tokens stays linear. Two builders concatenate with
    ``+`` (a new builder) or ``extend`` (in place); both are associative and
    the empty builder is the identity.
    """

    __slots__ = ("_fragments", "_length")

    def __init__(self, fragments: Iterable[str] = ()) -> None:
        self._fragments: list[str] = []
        self._length = 0
        for fragment in fragments:
            self.append(fragment)

    def append(self, text: str) -> TextBuilder:
        """Appends a text fragment and returns the builder for chaining."""
        if not isinstance(text, str):
            msg = f"can only append str, not {type(text).__name__}"
            raise TypeError(msg)
        if text:
            self._fragments.append(text)
            self._length += len(text)
        return self

    def extend(self, other: TextBuilder) -> TextBuilder:
        """Appends every fragment of another builder in order."""
        if not isinstance(other, TextBuilder):
            msg = (
                "can only extend with TextBuilder, "
                f"not {type(other).__name__}"
            )
            raise TypeError(msg)
        # Snapshot first so extending a builder with itself terminates
        fragments = list(other._fragments)
        added = other._length
        self._fragments.extend(fragments)
        self._length += added
        return self

    def __add__(self, other: object) -> TextBuilder:
        if not isinstance(other, TextBuilder):
            return NotImplemented
        result = TextBuilder()
        result._fragments = self._fragments + other._fragments
        result._length = self._length + other._length
        return result

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuilder):
            return self.to_text() == other.to_text()
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TextBuilder({self.to_text()!r})"

    def __str__(self) -> str:
        return self.to_text()

    def to_text(self) -> str:
        """
        Materializes the accumulated fragments into one string.

        The flattened text replaces the fragment list so repeated calls do
        not join again.
        """
        if len(self._fragments) > 1:
            self._fragments = ["".join(self._fragments)]
        return self._fragments[0] if self._fragments else ""

    def to_bytes(self) -> bytes:
        """Materializes the builder as UTF-8 encoded bytes."""
        return self.to_text().encode("utf-8")
