"""Immutable career catalog."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from career_match.scoring.careers import DEFAULT_CAREERS
from career_match.scoring.loaders import load_structured_file
from career_match.scoring.matchers import normalize_term
from career_match.scoring.models import CareerDefinition
from career_match.utils.logging import get_logger

logger = get_logger("scoring.catalog")


class CareerCatalog:
    """Read-only, ordered collection of career definitions.

    Build one at start-up and pass it to the matcher; the order of entries is
    the tie-break order for equal match scores.
    """

    __slots__ = ("_careers",)

    def __init__(self, careers: Iterable[CareerDefinition] = ()) -> None:
        self._careers: tuple[CareerDefinition, ...] = tuple(careers)

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> CareerCatalog:
        """Build a catalog from plain dictionaries."""
        return cls(CareerDefinition.model_validate(record) for record in records)

    @classmethod
    def default(cls) -> CareerCatalog:
        """Return the built-in catalog."""
        return cls.from_records(DEFAULT_CAREERS)

    @classmethod
    def load(cls, path: Path | str) -> CareerCatalog:
        """Load a catalog from YAML or JSON.

        The document is either a list of careers or a mapping with a
        ``careers`` list.
        """
        catalog_path = Path(path)
        data = load_structured_file(catalog_path)

        if isinstance(data, dict):
            data = data.get("careers")
        if not isinstance(data, list):
            raise ValueError(f"Catalog must be a list of careers: {catalog_path}")

        catalog = cls.from_records(data)
        logger.debug(f"Loaded {len(catalog)} careers from {catalog_path}")
        return catalog

    @property
    def careers(self) -> tuple[CareerDefinition, ...]:
        return self._careers

    def get(self, title: str) -> CareerDefinition | None:
        """Look up a career by title, ignoring case and extra whitespace."""
        key = normalize_term(title)
        for career in self._careers:
            if normalize_term(career.title) == key:
                return career
        return None

    def __iter__(self) -> Iterator[CareerDefinition]:
        return iter(self._careers)

    def __len__(self) -> int:
        return len(self._careers)

    def __bool__(self) -> bool:
        return bool(self._careers)

    def __repr__(self) -> str:
        return f"CareerCatalog({len(self._careers)} careers)"
