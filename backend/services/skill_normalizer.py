"""Skill normalization: case, whitespace and synonym resolution.

Every alias in SKILL_SYNONYMS resolves to one canonical spelling, so
"JS" and "JavaScript" compare equal no matter which side declared which.
"""

import re

MAX_SKILLS = 50

# ---------------------------------------------------------------------------
# Skill synonym mapping: aliases -> canonical form
# ---------------------------------------------------------------------------
SKILL_SYNONYMS: dict[str, str] = {
    # JavaScript ecosystem
    "js": "javascript", "es6": "javascript",
    "ts": "typescript",
    "react.js": "react", "reactjs": "react",
    "node": "node.js", "nodejs": "node.js",
    # Office / analysis
    "spreadsheets": "excel", "spreadsheet": "excel", "ms excel": "excel",
    "microsoft excel": "excel",
    # Cloud & DevOps
    "amazon web services": "aws",
    "google cloud": "gcp", "google cloud platform": "gcp",
    "k8s": "kubernetes",
    "cicd": "ci/cd",
    # Databases
    "postgres": "postgresql",
    "mongo": "mongodb",
    # AI/ML
    "ml": "machine learning",
    "ai": "artificial intelligence",
    "dl": "deep learning",
    "nlp": "natural language processing",
    # Design
    "ui/ux": "ux design", "ux": "ux design", "user experience": "ux design",
}

_WHITESPACE = re.compile(r"\s+")


def canonical_skill(name: str) -> str:
    """Resolve one skill to its canonical comparison key."""
    lower = _WHITESPACE.sub(" ", name.lower().strip())
    return SKILL_SYNONYMS.get(lower, lower)


def normalize_skills(raw_skills: list[str]) -> list[str]:
    """Canonicalize, dedupe (first-seen order) and cap a list of skills."""
    seen: set[str] = set()
    result: list[str] = []
    for raw in raw_skills:
        skill = canonical_skill(raw)
        if not skill or skill in seen:
            continue
        seen.add(skill)
        result.append(skill)
        if len(result) == MAX_SKILLS:
            break
    return result
