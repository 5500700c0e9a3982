"""Blog routes: /api/v1/blogs."""

from portfolio.routes.resources import create_resource_router
from portfolio.schemas.resources import BlogInput, BlogRecord
from portfolio.services.resource_service import blog_service

router = create_resource_router(
    service=blog_service,
    input_model=BlogInput,
    record_model=BlogRecord,
    plural="blogs",
)
