"""Check registry and rule selection."""

from __future__ import annotations

import logging

from skilldex.config import SkilldexConfig
from skilldex.constants.lint import ALL_RULE_IDS
from skilldex.lint.base import Check
from skilldex.lint.content import CONTENT_CHECK_CLASSES
from skilldex.lint.frontmatter import FRONTMATTER_CHECK_CLASSES
from skilldex.lint.index import INDEX_CHECK_CLASSES

logger = logging.getLogger(__name__)

CHECK_CLASSES: tuple[type[Check], ...] = (
    *FRONTMATTER_CHECK_CLASSES,
    *CONTENT_CHECK_CLASSES,
    *INDEX_CHECK_CLASSES,
)

if tuple(check_cls.rule_id for check_cls in CHECK_CLASSES) != ALL_RULE_IDS:
    raise RuntimeError("CHECK_CLASSES and ALL_RULE_IDS are out of sync")


def select_rule_ids(config: SkilldexConfig) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Return ``(executed, disabled)`` rule ids after applying ``checks`` toggles."""
    enabled = set(config.checks.enabled) if config.checks.enabled else set(ALL_RULE_IDS)
    enabled -= set(config.checks.disabled)
    executed = tuple(rule_id for rule_id in ALL_RULE_IDS if rule_id in enabled)
    disabled = tuple(rule_id for rule_id in ALL_RULE_IDS if rule_id not in enabled)
    return executed, disabled


def build_checks(rule_ids: tuple[str, ...]) -> list[Check]:
    """Build check instances for the given rule ids in registry order."""
    known = {check_cls.rule_id: check_cls for check_cls in CHECK_CLASSES}
    checks: list[Check] = []
    for rule_id in rule_ids:
        check_cls = known.get(rule_id)
        if check_cls is None:
            logger.warning("Unknown check id ignored: %s", rule_id)
            continue
        checks.append(check_cls())
    return checks
