"""The result of spellchecking a single token."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Spellchecked:
    """A token as it was given and as it reads after correction."""

    original: str
    spellchecked: str

    def to_dict(self) -> dict[str, str]:
        """Return the fields as a plain dictionary, ready for serialisation."""
        return asdict(self)