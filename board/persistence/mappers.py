"""Mappers between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
rather than through ORM classes.
"""

from typing import Any, Dict

from board.domain.model import Post, User

# Aggregate fields kept inside the JSONB document column
POST_DOCUMENT_FIELDS = {"title", "content", "tags", "likes", "comments"}


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert a posts row to the Post aggregate.

    Args:
        row: Database row as dict

    Returns:
        Post domain model, comments and replies included
    """
    return Post.model_validate(
        {
            **row["document"],
            "id": row["id"],
            "author_id": row["author_id"],
            "version": row["version"],
            "created_at": row["created_at"],
            "updated_at": row["updated_at"],
        }
    )


def post_to_row(post: Post) -> Dict[str, Any]:
    """Convert the Post aggregate to a posts row.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for insert/update
    """
    return {
        "id": post.id,
        "author_id": post.author_id,
        "document": post.model_dump(mode="json", include=POST_DOCUMENT_FIELDS),
        "version": post.version,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert a users row to the User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User.model_validate(row)


def user_to_row(user: User) -> Dict[str, Any]:
    """Convert the User domain model to a users row."""
    return user.model_dump()
