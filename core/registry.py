import json
import threading
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from config.paths import CLASS_CRITERIA_PATH
from core.criteria import ClassCriteria
from exceptions.custom_errors import ClassCriteriaConfigError
from utils.logger import logger


class ClassCriteriaRegistry:
    """
    Lookup of class-name tokens to their criteria.

    Canonical definitions are fixed when the registry is built. Criteria
    synthesized by merging two classes are added under their composite name
    (e.g. "AB") and are kept for the lifetime of the registry.
    """

    def __init__(self, canonical: Optional[Mapping[str, ClassCriteria]] = None):
        self._canonical: Dict[str, ClassCriteria] = dict(canonical or {})
        self._combined: Dict[str, ClassCriteria] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ClassCriteriaRegistry":
        """Build a registry from raw JSON-like definitions keyed by class name."""
        canonical = {}
        for name, definition in raw.items():
            try:
                canonical[name] = ClassCriteria.model_validate(definition or {})
            except ValidationError as e:
                raise ClassCriteriaConfigError(
                    f"Invalid criteria for class {name!r}: {e}"
                ) from e
        return cls(canonical)

    def get(self, name: str) -> Optional[ClassCriteria]:
        """Return the canonical or combined criteria of a class, or None if unknown."""
        criteria = self._canonical.get(name)
        if criteria is None:
            criteria = self._combined.get(name)
        return criteria

    def put_combined(self, name: str, criteria: ClassCriteria) -> None:
        """Store (or replace) the criteria synthesized for a composite class name."""
        if name in self._canonical:
            raise ValueError(f"Cannot overwrite canonical class criteria {name!r}")
        with self._lock:
            self._combined[name] = criteria

    def is_canonical(self, name: str) -> bool:
        return name in self._canonical

    def canonical_names(self) -> List[str]:
        return list(self._canonical)

    def combined_names(self) -> List[str]:
        with self._lock:
            return list(self._combined)

    def __contains__(self, name: object) -> bool:
        return name in self._canonical or name in self._combined

    def __len__(self) -> int:
        return len(self._canonical) + len(self._combined)


def load_registry(path: Path = CLASS_CRITERIA_PATH) -> ClassCriteriaRegistry:
    """
    Load the canonical class criteria from a JSON file.

    Raises:
        ClassCriteriaConfigError: If the file cannot be read or a definition is invalid.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ClassCriteriaConfigError(f"Cannot read class criteria from {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ClassCriteriaConfigError(
            f"Class criteria file {path} must contain an object keyed by class name."
        )

    registry = ClassCriteriaRegistry.from_dict(raw)
    logger.info("Loaded %d class criteria from %s", len(registry), path)
    return registry
