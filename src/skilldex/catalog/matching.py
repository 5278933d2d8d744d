"""Rank catalog skills against a free-text task description."""

from __future__ import annotations

from skilldex.constants.matching import (
    DESCRIPTION_TERM_WEIGHT,
    MIN_TOKEN_LENGTH,
    NAME_TERM_WEIGHT,
    PLURAL_STRIP_MIN_LENGTH,
    SCORE_PRECISION,
    STOPWORDS,
    TOKEN_SPLIT_PATTERN,
)
from skilldex.model import Catalog, SkillMatch


def tokenize(text: str) -> tuple[str, ...]:
    """Split text into normalized, distinct match terms in first-seen order."""
    terms: dict[str, None] = {}
    for token in TOKEN_SPLIT_PATTERN.split(text.lower()):
        if len(token) < MIN_TOKEN_LENGTH or token in STOPWORDS:
            continue
        if len(token) >= PLURAL_STRIP_MIN_LENGTH and token.endswith("s") and not token.endswith("ss"):
            token = token[:-1]
        terms[token] = None
    return tuple(terms)


def match_skills(
    catalog: Catalog,
    task: str,
    *,
    limit: int,
    min_score: float,
) -> list[SkillMatch]:
    """Return skills whose name or description overlaps *task*, best first.

    Each distinct task term is worth ``NAME_TERM_WEIGHT`` when it appears in
    the skill name and ``DESCRIPTION_TERM_WEIGHT`` when it only appears in the
    description; the score is the earned weight over the maximum possible.
    """
    task_terms = tokenize(task)
    if not task_terms:
        return []

    max_weight = NAME_TERM_WEIGHT * len(task_terms)
    matches: list[SkillMatch] = []
    for skill in catalog.skills:
        name_terms = set(tokenize(skill.name))
        if skill.declared_name:
            name_terms.update(tokenize(skill.declared_name))
        description_terms = set(tokenize(skill.description or ""))

        earned = 0
        matched: list[str] = []
        for term in task_terms:
            if term in name_terms:
                earned += NAME_TERM_WEIGHT
            elif term in description_terms:
                earned += DESCRIPTION_TERM_WEIGHT
            else:
                continue
            matched.append(term)

        if not earned:
            continue
        score = round(earned / max_weight, SCORE_PRECISION)
        if score < min_score:
            continue
        matches.append(SkillMatch(skill=skill, score=score, matched_terms=tuple(matched)))

    matches.sort(key=lambda match: (-match.score, match.skill.name))
    return matches[:limit]
