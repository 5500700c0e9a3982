"""Project routes: /api/v1/projects."""

from portfolio.routes.resources import create_resource_router
from portfolio.schemas.resources import ProjectInput, ProjectRecord
from portfolio.services.resource_service import project_service

router = create_resource_router(
    service=project_service,
    input_model=ProjectInput,
    record_model=ProjectRecord,
    plural="projects",
)
