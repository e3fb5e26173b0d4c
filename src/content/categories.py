# src/content/categories.py — v1
"""Static taxonomy: tech post categories and essay types."""

from __future__ import annotations

from blogcore.core.models import Category, EssayType

CATEGORIES: tuple[Category, ...] = (
    Category(
        id="website",
        name="Website",
        description="Building, deploying and tuning websites",
        color="bg-blue-100 text-blue-800",
    ),
    Category(
        id="frontend",
        name="Frontend",
        description="React, Vue, JavaScript and other frontend topics",
        color="bg-green-100 text-green-800",
    ),
    Category(
        id="security",
        name="Security",
        description="Network security, vulnerability analysis, hardening",
        color="bg-red-100 text-red-800",
    ),
    Category(
        id="backend",
        name="Backend",
        description="Server development, databases, API design",
        color="bg-purple-100 text-purple-800",
    ),
    Category(
        id="fun",
        name="Fun",
        description="Odd stories and thoughts from the road",
        color="bg-yellow-100 text-yellow-800",
    ),
    Category(
        id="ctf",
        name="CTF",
        description="CTF competitions, write-ups and tricks",
        color="bg-indigo-100 text-indigo-800",
    ),
)

ESSAY_TYPES: tuple[EssayType, ...] = (
    EssayType(
        id="reading",
        name="Reading notes",
        description="Notes and reflections on books",
        color="bg-blue-100 text-blue-800",
    ),
    EssayType(
        id="thoughts",
        name="Thoughts",
        description="Musings on life and work",
        color="bg-purple-100 text-purple-800",
    ),
    EssayType(
        id="life",
        name="Life",
        description="Everyday life, travel logs and impressions",
        color="bg-green-100 text-green-800",
    ),
)


def get_category_by_id(category_id: str) -> Category | None:
    return next((c for c in CATEGORIES if c.id == category_id), None)


def get_category_by_name(name: str) -> Category | None:
    return next((c for c in CATEGORIES if c.name == name), None)


def get_essay_type(type_id: str) -> EssayType | None:
    return next((t for t in ESSAY_TYPES if t.id == type_id), None)
