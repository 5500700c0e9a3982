"""Skill routes: /api/v1/skills, plus the older POST /api/v1/create-skill path."""

from portfolio.routes.resources import create_resource_router
from portfolio.schemas.resources import SkillInput, SkillRecord
from portfolio.services.resource_service import skill_service

router = create_resource_router(
    service=skill_service,
    input_model=SkillInput,
    record_model=SkillRecord,
    plural="skills",
    legacy_create_path="/create-skill",
)
