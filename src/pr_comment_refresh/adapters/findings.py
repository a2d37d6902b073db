"""Load scanner findings from JSON or YAML report files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Sequence

import yaml

from ..models import Finding, FindingFormatError
from .base import FindingsProvider

logger = logging.getLogger(__name__)


class FindingsLoadError(RuntimeError):
    """Raised when the findings report cannot be read or parsed."""


class FileFindingsProvider(FindingsProvider):
    """Read findings from a scanner report on disk.

    The report is either a list of finding objects or a mapping with a
    ``findings`` list, written as JSON or YAML. Files ending in ``.json``
    and documents opening with a bracket are parsed as JSON first.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def get_findings(self) -> List[Finding]:
        entries = self._load_entries()
        findings: List[Finding] = []
        for index, entry in enumerate(entries):
            try:
                findings.append(Finding.from_mapping(entry))
            except FindingFormatError as exc:
                raise FindingsLoadError(f"Invalid finding #{index} in {self._path}: {exc}") from exc

        logger.debug("Loaded %d findings from %s", len(findings), self._path)
        return findings

    # ------------------------------------------------------------------
    def _load_entries(self) -> Sequence[Any]:
        if not self._path.exists():
            raise FindingsLoadError(f"Findings report not found: {self._path}")

        try:
            content = self._path.read_text(encoding="utf-8-sig")
        except OSError as exc:  # pragma: no cover - filesystem errors surfaced to caller
            raise FindingsLoadError(f"Failed to read findings report {self._path}") from exc

        if not content.strip():
            return []

        data = self._parse(content)
        if data is None:
            return []
        if isinstance(data, Mapping):
            data = data.get("findings") or []
        if not isinstance(data, list):
            raise FindingsLoadError(
                f"Findings report must be a list or contain a 'findings' list: {self._path}"
            )
        return data

    def _parse(self, content: str) -> Any:
        is_json_file = self._path.suffix.lower() == ".json"
        if is_json_file or content.lstrip()[:1] in ("[", "{"):
            try:
                return json.loads(content)
            except json.JSONDecodeError as exc:
                if is_json_file:
                    raise FindingsLoadError(
                        f"Invalid findings report {self._path}: {exc.msg}"
                    ) from exc

        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise FindingsLoadError(f"Invalid findings report {self._path}") from exc
