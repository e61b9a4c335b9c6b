"""SQLAlchemy database models for project geometry documents.

Documents are stored as raw GeoJSON text, one row per project and object
kind. The service never queries inside a document; it reads and writes whole
FeatureCollections.
"""

from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from texel.models.enums import ObjectKind


class Base(DeclarativeBase):
    """Base class for all database models."""


class Project(Base):
    """A planning project owning building limits and height plateaus.

    Attributes:
        id: Canonical UUID string of the project
        created_at: Timestamp when the project was created (server-side default)
    """

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id})>"


class GeometryDocument(Base):
    """Latest GeoJSON FeatureCollection of one kind for one project.

    Attributes:
        project_id: Owning project
        kind: Which layer the document holds (building limits or height plateaus)
        data: Raw GeoJSON FeatureCollection text
        updated_at: Timestamp of the last write
    """

    __tablename__ = "geometry_documents"

    project_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("projects.id"), primary_key=True
    )
    kind: Mapped[ObjectKind] = mapped_column(
        Enum(
            ObjectKind,
            name="object_kind",
            native_enum=False,
            values_callable=lambda kinds: [kind.value for kind in kinds],
        ),
        primary_key=True,
    )
    data: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<GeometryDocument(project_id={self.project_id}, kind={self.kind})>"
