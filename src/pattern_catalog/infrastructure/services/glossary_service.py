"""GlossaryService: loads the pattern glossary and serves PatternDefinition entries."""

import logging
from pathlib import Path
from typing import Optional

import yaml

from pattern_catalog.domain.constants import GLOSSARY_RESOURCE
from pattern_catalog.domain.entities import PatternCategory
from pattern_catalog.domain.patterns import PatternDefinition
from pattern_catalog.domain.protocols import GlossaryServiceProtocol

logger = logging.getLogger(__name__)


class GlossaryService(GlossaryServiceProtocol):
    """Loads pattern_glossary.yaml. A missing or malformed file yields an empty glossary."""

    def __init__(self, glossary_path: Optional[str] = None) -> None:
        if glossary_path is not None:
            self._path = Path(glossary_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / GLOSSARY_RESOURCE
        self._glossary: dict[str, PatternDefinition] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            logger.warning("Glossary not found at %s", self._path)
            self._glossary = {}
            return
        try:
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            logger.warning("Glossary at %s is not valid YAML: %s", self._path, exc)
            self._glossary = {}
            return
        if not isinstance(data, dict):
            logger.warning("Glossary at %s is not a mapping; ignoring it.", self._path)
            self._glossary = {}
            return
        glossary: dict[str, PatternDefinition] = {}
        for key, entry in data.items():
            definition = self._parse_entry(str(key), entry)
            if definition is not None:
                glossary[definition.key] = definition
        self._glossary = glossary

    @staticmethod
    def _parse_entry(key: str, entry: object) -> Optional[PatternDefinition]:
        if not isinstance(entry, dict):
            logger.warning("Glossary entry '%s' is not a mapping; skipping.", key)
            return None
        try:
            category = PatternCategory.parse(str(entry.get("category", "")))
        except ValueError as exc:
            logger.warning("Glossary entry '%s': %s", key, exc)
            return None
        participants = entry.get("participants") or []
        references = entry.get("references") or []
        return PatternDefinition(
            key=key,
            name=str(entry.get("name", key)),
            category=category,
            intent=str(entry.get("intent", "")).strip(),
            eli5=str(entry.get("eli5", "")).strip(),
            participants=tuple(str(p) for p in participants),
            references=tuple(str(r) for r in references),
        )

    def get_definition(self, key: str) -> Optional[PatternDefinition]:
        return self._glossary.get(key)

    def get_glossary(self) -> dict[str, PatternDefinition]:
        """Return a shallow copy of the loaded glossary for use by domain/use_cases."""
        return dict(self._glossary)
