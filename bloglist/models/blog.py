"""Blog database model using SQLModel."""

from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import CheckConstraint, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Every blog belongs to exactly one user through ``user_id``. Deleting the
    user deletes its blogs.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign key to User
    user_id: UUID = Field(
        sa_column=Column(
            "user_id",
            Uuid,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )

    title: str = Field(
        sa_column=Column(String(300), nullable=False),
        description="Blog title",
    )
    author: str | None = Field(
        default=None,
        sa_column=Column(String(200)),
        description="Blog author",
    )
    url: str = Field(
        sa_column=Column(String(2000), nullable=False),
        description="Blog URL",
    )
    likes: int = Field(
        default=0,
        nullable=False,
        description="Like count",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
            },
        },
    )
