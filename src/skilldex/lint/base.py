"""Check interface and shared context for lint rules."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from skilldex.config import SkilldexConfig
from skilldex.model import Catalog, FindingCandidate, IndexDocument
from skilldex.types import Severity
from skilldex.utils import relative_posix

_RULE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z][A-Z0-9_]+$")


@dataclass(frozen=True)
class LintContext:
    """Everything a check may inspect for one workspace."""

    catalog: Catalog
    config: SkilldexConfig
    index_documents: tuple[IndexDocument, ...] = ()

    def relative(self, path: Path) -> str:
        """Return *path* relative to the catalog root for evidence."""
        return relative_posix(path, self.catalog.root)


class Check(ABC):
    """Abstract base class for lint checks."""

    rule_id: ClassVar[str]
    default_severity: ClassVar[Severity]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate check subclasses define an UPPER_SNAKE_CASE `rule_id` and a severity."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        rule_id = getattr(cls, "rule_id", None)
        if not isinstance(rule_id, str) or not rule_id.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `rule_id`")
        if not _RULE_ID_PATTERN.match(rule_id):
            raise TypeError(f"{cls.__name__}.rule_id must be UPPER_SNAKE_CASE (got {rule_id!r})")
        if getattr(cls, "default_severity", None) not in {"error", "warning", "info"}:
            raise TypeError(f"{cls.__name__} must define `default_severity` as error, warning or info")

    @abstractmethod
    def run(self, context: LintContext) -> list[FindingCandidate]:
        """Run the check against a workspace context."""
