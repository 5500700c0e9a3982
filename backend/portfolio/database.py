"""
Portfolio Backend — MongoDB Connection Management
===================================================

What:  Owns the async MongoDB client and exposes the database handle to routes.
Why:   One place for connection lifecycle; handlers never reach for a global.
How:   MongoContext is built once in the application lifespan and stored on
       `app.state.mongo`. Routes receive the database through the
       `get_database` FastAPI dependency.
When:  Connected at startup, closed at shutdown. One client serves every
       request; reconnection after a dropped connection is left to the driver.

Collections:
    users, skills, blogs, projects (all in `settings.mongodb_db_name`)
"""

import logging
from typing import Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
SKILLS_COLLECTION = "skills"
BLOGS_COLLECTION = "blogs"
PROJECTS_COLLECTION = "projects"


class MongoContext:
    """
    Holds the client and database handle for the lifetime of the app.

    Usage (lifespan):
        mongo = MongoContext(settings.mongodb_uri, settings.mongodb_db_name)
        await mongo.connect()
        app.state.mongo = mongo
        ...
        await mongo.close()
    """

    def __init__(self, uri: str, db_name: str):
        self.uri = uri
        self.db_name = db_name
        self.client: Optional[AsyncMongoClient] = None
        self.db: Optional[AsyncDatabase] = None

    async def connect(self) -> None:
        """
        Creates the client and verifies the server answers.

        Raises:
            pymongo.errors.PyMongoError: the deployment is unreachable or the
            URI is rejected. Startup is aborted in that case.
        """
        self.client = AsyncMongoClient(self.uri)
        self.db = self.client[self.db_name]
        await self.client.admin.command("ping")
        logger.info("Connected to MongoDB (database=%s)", self.db_name)

    async def ping(self) -> bool:
        """Lightweight liveness probe used by the health endpoint."""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except Exception as e:
            logger.warning("MongoDB ping failed: %s", str(e))
            return False

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()
            logger.info("MongoDB connection closed")
        self.client = None
        self.db = None


def get_mongo(request: Request) -> MongoContext:
    """FastAPI dependency returning the app's MongoContext."""
    return request.app.state.mongo


def get_database(request: Request) -> AsyncDatabase:
    """
    FastAPI dependency returning the database handle.

    Example usage in a route:
        @router.get("/skills")
        async def list_skills(db: AsyncDatabase = Depends(get_database)):
            ...

    Tests override this dependency with an in-memory double.
    """
    return request.app.state.mongo.db
