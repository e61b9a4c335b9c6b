"""Repository for project geometry documents.

Stores and fetches raw GeoJSON documents keyed by project id and object
kind. The repository does not parse or validate documents; callers decode
them and run the design rules before writing.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from texel.models.db import GeometryDocument, Project
from texel.models.enums import ObjectKind

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """No document of the requested kind is stored for the project."""

    def __init__(self, project_id: str, kind: ObjectKind):
        self.project_id = project_id
        self.kind = kind
        super().__init__(f"No {kind} stored for project {project_id}")


class Repository:
    """Repository for geometry documents.

    Each call runs in its own session and transaction.

    Attributes:
        engine: SQLAlchemy engine for database connections
    """

    def __init__(self, engine: Engine):
        """Initialize repository with SQLAlchemy engine.

        Args:
            engine: SQLAlchemy engine with the schema already created
        """
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    def session(self) -> Session:
        """Create a new SQLAlchemy session."""
        return self._session_factory()

    def get(self, project_id: str, kind: ObjectKind) -> str:
        """Fetch the stored document of one kind for a project.

        Args:
            project_id: Canonical project UUID string
            kind: Object kind to fetch

        Returns:
            Raw GeoJSON text

        Raises:
            NotFoundError: If nothing of that kind is stored for the project
        """
        with self.session() as session:
            document = session.get(GeometryDocument, (project_id, kind))
            if document is None:
                raise NotFoundError(project_id, kind)
            return document.data

    def put(self, project_id: str, kind: ObjectKind, data: str) -> None:
        """Insert or replace the document of one kind for a project.

        The project row is created on first write.

        Args:
            project_id: Canonical project UUID string
            kind: Object kind to store
            data: Raw GeoJSON text
        """
        with self.session() as session, session.begin():
            if session.get(Project, project_id) is None:
                logger.info(f"Creating project {project_id}")
                session.add(Project(id=project_id))
                session.flush()

            document = session.get(GeometryDocument, (project_id, kind))
            if document is None:
                session.add(GeometryDocument(project_id=project_id, kind=kind, data=data))
            else:
                document.data = data

        logger.debug(f"Stored {kind} for project {project_id} ({len(data)} bytes)")

    def ping(self) -> None:
        """Check the database answers a trivial query.

        Raises:
            SQLAlchemyError: If the database cannot be reached
        """
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
