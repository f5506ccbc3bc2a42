from .classifier import ChangelogBuckets, ClassifyRule, DEFAULT_RULES, Section, classify
from .document import ChangelogEntry, NoInsertionPoint, merge, render, tag_message

__all__ = [
    "ChangelogBuckets",
    "ChangelogEntry",
    "ClassifyRule",
    "DEFAULT_RULES",
    "NoInsertionPoint",
    "Section",
    "classify",
    "merge",
    "render",
    "tag_message",
]
