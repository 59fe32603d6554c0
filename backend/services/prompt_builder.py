"""All prompt templates for Gemini API calls."""

from models.schemas.profile import UserProfile
from models.schemas.role import ScoredRole
from services.gemini_client import ChatMessage

PLAN_JSON_SHAPE = """{
  "weeks": [
    {
      "week": 1,
      "topics": ["topic 1", "topic 2"],
      "practice": ["practice task 1", "practice task 2"],
      "assessment": "assessment description",
      "project": "project description"
    }
  ]
}"""

PLAN_RULES = """RULES (follow strictly):
- EXACTLY 4 entries in "weeks", with "week" set to 1, 2, 3 and 4 (each used once)
- "topics": 1-10 non-empty strings
- "practice": 1-8 non-empty strings
- "assessment" and "project": non-empty strings, at most 200 characters
- No other keys"""

FAIRNESS_RULES = """IMPORTANT RULES:
- NEVER use gender, caste, religion, college rank, or any sensitive personal traits in your reasoning
- Base ALL recommendations ONLY on skills, interests, goals, and learning capacity
- Focus on India-specific career paths and entry opportunities
- Be encouraging but realistic about skill gaps
- Use simple, clear language without buzzwords"""

FAIRNESS_DISCLAIMER = """This career recommendation system is designed to be fair and transparent.

We do NOT consider:
- Gender, caste, religion, or ethnicity
- College ranking or tier
- Family background or connections
- Personal appearance or characteristics

All recommendations are based solely on:
- Your technical skills and knowledge
- Your stated interests and goals
- Your learning capacity and time availability
- How your skills overlap with each role's expected skills

Fit scores are computed as 60% skill-vector cosine similarity plus 40% coverage
of the role's expected skills. You can edit your profile anytime and
regenerate recommendations."""


def _language_line(profile: UserProfile) -> str:
    if profile.language == "hi":
        return "Write all text values in simple Hindi (Devanagari script)."
    return "Write all text values in simple English."


def _join(items: list[str], fallback: str) -> str:
    return ", ".join(items) if items else fallback


def build_explain_prompt(profile: UserProfile, scored: ScoredRole) -> list[ChatMessage]:
    """Explanation call: why this role fits, in at most 120 words."""
    role = scored.role
    return [
        ChatMessage(
            role="system",
            content=f"""You are a fair, transparent career advisor for Indian students and professionals.

{FAIRNESS_RULES}
- Keep explanations under 120 words
- Reply with plain text only: no markdown, no lists, no JSON""",
        ),
        ChatMessage(
            role="user",
            content=f"""Student Profile (sanitized):
Education: {profile.education}
Skills: {_join(profile.skills, 'None listed')}
Interests: {_join(profile.interests, 'None listed')}
Weekly Learning Time: {profile.weekly_time} hours
Budget: {profile.budget}

Target Role: {role.title}
Role Description: {role.description}
Fit Score: {scored.score}/100 (60% skill similarity + 40% skill coverage)
Overlapping Skills: {_join(scored.overlap_skills, 'None yet')}
Top Skill Gaps: {_join(scored.gap_skills[:5], 'None')}

In at most 120 words, explain why this role fits this person. Cite specific skill overlaps and how to address the main gaps. Include India-specific entry paths or opportunities. {_language_line(profile)}""",
        ),
    ]


def build_plan_prompt(profile: UserProfile, scored: ScoredRole) -> list[ChatMessage]:
    """Standard plan call: full context plus the required JSON shape."""
    return [
        ChatMessage(
            role="system",
            content=f"""You are a career planning expert. Return ONLY valid JSON. No commentary, no markdown, no code fences.

REQUIRED JSON SCHEMA:
{PLAN_JSON_SHAPE}

{PLAN_RULES}
Keep tasks realistic for {profile.weekly_time} hours per week.""",
        ),
        ChatMessage(
            role="user",
            content=f"""Generate a 4-week learning plan for becoming a {scored.role.title}.

Student Constraints:
- Weekly time: {profile.weekly_time} hours
- Budget: {profile.budget}
- Skills already known: {_join(scored.overlap_skills, 'none of the core skills yet')}

Skills to Learn: {_join(scored.gap_skills[:8], 'deepen the core skills of the role')}

Requirements:
- Week 1: Focus on foundational concepts
- Week 2: Build practical skills
- Week 3: Advanced topics and real-world application
- Week 4: Capstone project work and assessment

Prefer free resources when possible. Use generic categories like 'official documentation', 'practice portals', 'online tutorials'. Keep descriptions concise but clear. {_language_line(profile)}""",
        ),
    ]


def build_retry_prompt(failed_output: str, reason: str) -> list[ChatMessage]:
    """Strict plan call: schema only, with the rejected output to correct."""
    return [
        ChatMessage(
            role="system",
            content=f"""The previous response was invalid. You MUST return ONLY valid JSON that matches this exact schema:

{PLAN_JSON_SHAPE}

{PLAN_RULES}

No text before or after the JSON. No markdown formatting. Just the raw JSON object.""",
        ),
        ChatMessage(
            role="user",
            content=f"""Fix this invalid output and return ONLY the corrected JSON.

Problem: {reason}

Previous output:
{failed_output[:4000]}""",
        ),
    ]
