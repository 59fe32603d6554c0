"""Deterministic fallback: table-driven plans and template explanations.

Used when the generative backend is unavailable or its output keeps
failing validation. No external calls, no failure modes: every plan built
here passes validate_plan by construction.
"""

import logging
import re

from models.schemas.plan import Plan, WeekPlan
from models.schemas.profile import UserProfile

logger = logging.getLogger(__name__)

# Four (topic, practice) steps per role track
ROLE_TRACKS: dict[str, list[tuple[str, str]]] = {
    "frontend_developer": [
        ("React Fundamentals", "Build a simple todo app"),
        ("State Management & Hooks", "Create a shopping cart component"),
        ("Routing & API Integration", "Build a weather app with API"),
        ("Testing & Deployment", "Deploy your app to Vercel"),
    ],
    "data_analyst": [
        ("SQL basics & Joins", "Analyze sample dataset"),
        ("Excel & Pivot tables", "Data cleaning exercise"),
        ("Data visualization basics", "Create charts and dashboard"),
        ("Capstone: Complete analysis", "Present findings report"),
    ],
    "uiux_designer": [
        ("Design basics & Figma intro", "Redesign a simple page"),
        ("Wireframes & user flows", "Create 2 wireframes"),
        ("Prototyping & usability testing", "Run quick usability test"),
        ("Capstone: Prototype an app page", "Usability report"),
    ],
    "backend_developer": [
        ("Node.js & Express basics", "Build a simple API"),
        ("Database integration", "Connect to MongoDB"),
        ("Authentication & Security", "Add JWT authentication"),
        ("Deployment & Testing", "Deploy to cloud platform"),
    ],
    "mobile_developer": [
        ("React Native basics", "Build a simple mobile app"),
        ("Navigation & State", "Add navigation between screens"),
        ("API Integration", "Connect to backend services"),
        ("Testing & Publishing", "Test on device and publish"),
    ],
    "product_manager": [
        ("Product Strategy & Market Research", "Create user personas"),
        ("User Research & Interviews", "Conduct user interviews"),
        ("Agile Methodology", "Create product backlog"),
        ("Metrics & Analytics", "Design product metrics"),
    ],
    "cybersecurity_analyst": [
        ("Security Fundamentals", "Analyze security vulnerabilities"),
        ("Network Security", "Configure firewall rules"),
        ("Incident Response", "Simulate security incident"),
        ("Compliance & Reporting", "Create security report"),
    ],
    "cloud_engineer": [
        ("AWS/Cloud basics", "Deploy a simple application"),
        ("Infrastructure as Code", "Create Terraform templates"),
        ("Monitoring & Logging", "Set up monitoring dashboard"),
        ("DevOps & CI/CD", "Create deployment pipeline"),
    ],
    "machine_learning_engineer": [
        ("Python & Data Science", "Clean and analyze dataset"),
        ("ML Algorithms", "Build a simple ML model"),
        ("Model Training & Evaluation", "Train and test model"),
        ("Deployment & Production", "Deploy model to production"),
    ],
    "devops_engineer": [
        ("Docker & Containers", "Containerize an application"),
        ("Kubernetes & Orchestration", "Deploy to Kubernetes"),
        ("CI/CD Pipelines", "Create automated pipeline"),
        ("Monitoring & Alerting", "Set up monitoring system"),
    ],
}

GENERIC_TRACK: list[tuple[str, str]] = [
    ("Core concept 1", "Hands-on practice 1"),
    ("Core concept 2", "Hands-on practice 2"),
    ("Core concept 3", "Hands-on practice 3"),
    ("Core concept 4", "Hands-on practice 4"),
]

# Keyword hints tried in order when no track key matches the title;
# specific tracks come before generic words like "analyst".
# Matched against underscore-separated tokens so "ai" does not hit "maintainer".
TRACK_HINTS: list[tuple[tuple[str, ...], str]] = [
    (("frontend", "react"), "frontend_developer"),
    (("mobile", "android", "ios"), "mobile_developer"),
    (("backend", "api"), "backend_developer"),
    (("security", "cyber", "cybersecurity"), "cybersecurity_analyst"),
    (("cloud", "aws"), "cloud_engineer"),
    (("devops", "deployment", "sre"), "devops_engineer"),
    (("machine", "ml", "ai"), "machine_learning_engineer"),
    (("ui", "ux", "uiux", "design", "designer"), "uiux_designer"),
    (("data", "analyst"), "data_analyst"),
    (("product", "manager"), "product_manager"),
]

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def _normalize_title(role_title: str) -> str:
    return _NON_ALNUM.sub("_", (role_title or "").lower()).strip("_")


def match_track(role_title: str) -> str | None:
    """Find the track key for a role title, or None for the generic template."""
    normalized = _normalize_title(role_title)
    if not normalized:
        return None

    for key in ROLE_TRACKS:
        # Whole-token containment either way: "frontend" matches, "a" does not
        if key in normalized or f"_{normalized}_" in f"_{key}_":
            return key

    tokens = set(normalized.split("_"))
    for hints, key in TRACK_HINTS:
        if tokens & set(hints):
            return key
    return None


def build_plan(
    role_title: str,
    gap_skills: list[str] | None = None,
    profile: UserProfile | None = None,
) -> Plan:
    """Build a 4-week plan from the track table; never raises."""
    track_key = match_track(role_title)
    steps = ROLE_TRACKS[track_key] if track_key else GENERIC_TRACK
    title = (role_title or "").strip() or "your target role"
    gaps = [g.strip() for g in (gap_skills or []) if g and g.strip()]

    weeks = []
    for idx, (topic, practice) in enumerate(steps):
        week = idx + 1
        topics = [topic]
        if idx < len(gaps):
            topics.append(gaps[idx][:200])
        weeks.append(
            WeekPlan(
                week=week,
                topics=topics,
                practice=[practice],
                assessment=f"Short checklist and 5 quick quiz questions for week {week}",
                project=(
                    f"Capstone project for {title}"[:200]
                    if week == 4
                    else f"Mini project for week {week}"
                ),
            )
        )

    logger.info(
        "Built fallback plan for %r using %s track",
        role_title,
        track_key or "generic",
    )
    return Plan(weeks=weeks)


def build_why(role_title: str, overlap_skills: list[str], gap_skills: list[str]) -> str:
    """Template explanation citing up to 4 overlap and 3 gap skills."""
    title = (role_title or "").strip() or "this role"
    overlap = ", ".join(overlap_skills[:4]) if overlap_skills else "foundational skills"
    gaps = ", ".join(gap_skills[:3]) if gap_skills else "no critical gaps"
    return f"You match {title} thanks to {overlap}. To improve fit, work on {gaps}."
