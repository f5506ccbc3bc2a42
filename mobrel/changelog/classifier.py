"""Commit subject classification into changelog sections.

Subjects are matched against ``DEFAULT_RULES`` in order and the first match
wins. Conventional-commit prefixes come first; plain capitalized subjects
fall back to verb heuristics; anything else (lowercase, unrecognised types
such as ``docs:``) is dropped.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "ChangelogBuckets",
    "ClassifyRule",
    "DEFAULT_RULES",
    "Section",
    "classify",
    "classify_subject",
]


class Section(Enum):
    """Changelog subsections, in rendering order."""

    ADDED = "Added"
    CHANGED = "Changed"
    FIXED = "Fixed"


@dataclass(frozen=True, slots=True)
class ClassifyRule:
    """Send subjects matching ``pattern`` to ``section``.

    The entry text is the ``text`` named group when the pattern defines one,
    otherwise the whole subject.
    """

    pattern: re.Pattern[str]
    section: Section

    def apply(self, subject: str) -> str | None:
        m = self.pattern.match(subject)
        if m is None:
            return None
        if "text" in self.pattern.groupindex:
            return m.group("text")
        return subject


def _conventional(types: str) -> re.Pattern[str]:
    return re.compile(rf"^(?:{types})(?:\(.*\))?: (?P<text>.+)$")


DEFAULT_RULES: tuple[ClassifyRule, ...] = (
    ClassifyRule(_conventional("feat"), Section.ADDED),
    ClassifyRule(_conventional("fix"), Section.FIXED),
    ClassifyRule(_conventional("refactor|perf|style|chore"), Section.CHANGED),
    ClassifyRule(re.compile(r"^(?:Add|Implement|Create|Build)"), Section.ADDED),
    ClassifyRule(re.compile(r"^(?:Fix|Resolve|Correct)"), Section.FIXED),
    ClassifyRule(re.compile(r"^[A-Z]"), Section.CHANGED),
)


@dataclass(frozen=True, slots=True)
class ChangelogBuckets:
    added: tuple[str, ...] = ()
    changed: tuple[str, ...] = ()
    fixed: tuple[str, ...] = ()

    def entries(self, section: Section) -> tuple[str, ...]:
        match section:
            case Section.ADDED:
                return self.added
            case Section.CHANGED:
                return self.changed
            case Section.FIXED:
                return self.fixed

    def sections(self) -> list[tuple[Section, tuple[str, ...]]]:
        """Non-empty sections in rendering order."""
        return [(s, self.entries(s)) for s in Section if self.entries(s)]

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.changed or self.fixed)


def classify_subject(
    subject: str,
    rules: Sequence[ClassifyRule] = DEFAULT_RULES,
) -> tuple[Section, str] | None:
    """Return ``(section, entry)`` for one subject, or None if it is dropped."""
    for rule in rules:
        text = rule.apply(subject)
        if text is not None:
            return (rule.section, text)
    return None


def classify(
    subjects: Iterable[str],
    rules: Sequence[ClassifyRule] = DEFAULT_RULES,
) -> ChangelogBuckets:
    """Sort commit subjects into buckets, keeping the order they were given in."""
    buckets: dict[Section, list[str]] = {s: [] for s in Section}
    for subject in subjects:
        matched = classify_subject(subject, rules)
        if matched is not None:
            section, text = matched
            buckets[section].append(text)

    return ChangelogBuckets(
        added=tuple(buckets[Section.ADDED]),
        changed=tuple(buckets[Section.CHANGED]),
        fixed=tuple(buckets[Section.FIXED]),
    )
