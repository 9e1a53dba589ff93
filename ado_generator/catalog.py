"""
Catalog Store
=============

Read-only view of the archetype catalog:

- `config_all.json` maps each archetype label to
  `{"classes": [component names], "descr": "..."}`
- every component schema lives in `<components_dir>/<name>.json`

The catalog document is read once at construction; component schemas are
read on first use and cached.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .errors import CatalogIntegrityError
from .utils import read_json, read_text


@dataclass
class ArchetypeEntry:
    """Catalog entry for one archetype"""
    classes: List[str] = field(default_factory=list)
    descr: Optional[str] = None


class CatalogStore:
    """Archetype catalog loaded from JSON files"""

    def __init__(self, catalog_path, components_dir):
        self.catalog_path = Path(catalog_path)
        self.components_dir = Path(components_dir)
        self._entries = self._load(self.catalog_path)
        self._schemas: Dict[str, str] = {}

    @staticmethod
    def _load(path: Path) -> Dict[str, ArchetypeEntry]:
        try:
            document = read_json(path)
        except FileNotFoundError as e:
            raise CatalogIntegrityError(f"Catalog not found: {path}") from e
        except json.JSONDecodeError as e:
            raise CatalogIntegrityError(f"Catalog is not valid JSON: {path}: {e}") from e

        if not isinstance(document, dict):
            raise CatalogIntegrityError(f"Catalog must be a JSON object: {path}")

        entries = {}
        for label, definition in document.items():
            if not isinstance(definition, dict):
                definition = {}
            classes = definition.get("classes")
            descr = definition.get("descr")
            entries[label] = ArchetypeEntry(
                # Only string names can point at a schema document
                classes=[c for c in classes if isinstance(c, str)] if isinstance(classes, list) else [],
                descr=descr if isinstance(descr, str) else None,
            )
        return entries

    def archetypes(self) -> List[str]:
        """Labels in catalog order"""
        return list(self._entries)

    def lookup(self, label: str) -> Optional[ArchetypeEntry]:
        return self._entries.get(label)

    def component_path(self, name: str) -> Path:
        return self.components_dir / f"{name}.json"

    def fetch_component_schema(self, name: str) -> str:
        """Return the raw text of a component schema document"""
        if name not in self._schemas:
            path = self.component_path(name)
            try:
                self._schemas[name] = read_text(path)
            except OSError as e:
                raise CatalogIntegrityError(f"Component schema '{name}' cannot be read from {path}: {e}") from e
        return self._schemas[name]
