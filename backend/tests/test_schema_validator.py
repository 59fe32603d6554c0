import copy

from conftest import make_plan_dict

from models.schemas.plan import Plan
from services.fallback_plan import build_plan
from services.schema_validator import validate_plan, validate_recommendation


def _recommendation(**overrides) -> dict:
    rec = {
        "roleId": "frontend_developer",
        "title": "Frontend Developer",
        "fitScore": 70,
        "why": "You already know JavaScript, HTML and CSS.",
        "overlapSkills": ["JavaScript", "HTML", "CSS"],
        "gapSkills": ["React", "TypeScript"],
        "plan": make_plan_dict(),
    }
    rec.update(overrides)
    return rec


class TestValidatePlan:
    def test_accepts_valid_plan(self):
        result = validate_plan(make_plan_dict())
        assert result.valid
        assert isinstance(result.value, Plan)
        assert [w.week for w in result.value.weeks] == [1, 2, 3, 4]

    def test_accepts_weeks_out_of_order(self):
        plan = make_plan_dict()
        plan["weeks"].reverse()
        assert validate_plan(plan).valid

    def test_rejects_three_weeks(self):
        plan = make_plan_dict()
        plan["weeks"].pop()
        result = validate_plan(plan)
        assert not result.valid
        assert result.field == "weeks"

    def test_rejects_five_weeks(self):
        plan = make_plan_dict()
        plan["weeks"].append(copy.deepcopy(plan["weeks"][0]))
        assert not validate_plan(plan).valid

    def test_rejects_duplicate_week_numbers(self):
        plan = make_plan_dict()
        plan["weeks"][3]["week"] = 3
        result = validate_plan(plan)
        assert not result.valid
        assert result.field == "weeks"
        assert "1, 2, 3, 4" in result.reason

    def test_rejects_week_out_of_range(self):
        plan = make_plan_dict()
        plan["weeks"][2]["week"] = 5
        result = validate_plan(plan)
        assert not result.valid
        assert result.field == "weeks[2].week"

    def test_rejects_string_week_number(self):
        plan = make_plan_dict()
        plan["weeks"][0]["week"] = "1"
        assert not validate_plan(plan).valid

    def test_rejects_empty_topics(self):
        result = validate_plan(make_plan_dict(topics=[]))
        assert not result.valid
        assert result.field == "weeks[0].topics"

    def test_rejects_blank_topic(self):
        result = validate_plan(make_plan_dict(topics=["Real topic", "   "]))
        assert not result.valid
        assert result.field == "weeks[0].topics[1]"

    def test_rejects_too_many_topics(self):
        assert not validate_plan(make_plan_dict(topics=[f"t{i}" for i in range(11)])).valid

    def test_rejects_too_many_practice_items(self):
        assert not validate_plan(make_plan_dict(practice=[f"p{i}" for i in range(9)])).valid

    def test_rejects_blank_assessment(self):
        result = validate_plan(make_plan_dict(assessment="  "))
        assert not result.valid
        assert result.field == "weeks[0].assessment"

    def test_rejects_long_project(self):
        assert not validate_plan(make_plan_dict(project="x" * 201)).valid

    def test_rejects_missing_field(self):
        plan = make_plan_dict()
        del plan["weeks"][1]["project"]
        result = validate_plan(plan)
        assert not result.valid
        assert result.field == "weeks[1].project"

    def test_rejects_extra_keys(self):
        plan = make_plan_dict()
        plan["title"] = "Plan"
        assert not validate_plan(plan).valid

    def test_rejects_non_object(self):
        result = validate_plan(["weeks"])
        assert not result.valid
        assert "list" in result.reason

    def test_does_not_modify_candidate(self):
        plan = make_plan_dict(topics=["  padded topic  "])
        before = copy.deepcopy(plan)
        result = validate_plan(plan)
        assert plan == before
        assert result.value.weeks[0].topics == ["  padded topic  "]

    def test_fallback_plan_passes(self):
        assert validate_plan(build_plan("Data Analyst", ["SQL"])).valid


class TestValidateRecommendation:
    def test_accepts_valid_recommendation(self):
        result = validate_recommendation(_recommendation())
        assert result.valid
        assert result.value.fit_score == 70

    def test_rejects_score_above_100(self):
        result = validate_recommendation(_recommendation(fitScore=101))
        assert not result.valid
        assert result.field == "fitScore"

    def test_rejects_short_why(self):
        assert not validate_recommendation(_recommendation(why="Too short")).valid

    def test_rejects_long_why(self):
        assert not validate_recommendation(_recommendation(why="x" * 601)).valid

    def test_rejects_blank_title(self):
        assert not validate_recommendation(_recommendation(title="   ")).valid

    def test_rejects_more_than_20_gap_skills(self):
        result = validate_recommendation(_recommendation(gapSkills=[f"s{i}" for i in range(21)]))
        assert not result.valid
        assert result.field == "gapSkills"

    def test_skill_lists_optional(self):
        rec = _recommendation()
        del rec["overlapSkills"]
        del rec["gapSkills"]
        assert validate_recommendation(rec).valid

    def test_rejects_invalid_nested_plan(self):
        plan = make_plan_dict()
        plan["weeks"] = plan["weeks"][:2]
        result = validate_recommendation(_recommendation(plan=plan))
        assert not result.valid
        assert result.field.startswith("plan.weeks")
