from libs.result import Error, Result, Return
from src.domain.entities.comment import COMMENT_MAX_LENGTH


def validate_content(content) -> Result[str]:
    """Trim comment content and check it is 1-1000 characters"""
    if not isinstance(content, str):
        return Return.err(Error("INVALID_CONTENT", "Comment content is required"))

    trimmed = content.strip()
    if not trimmed:
        return Return.err(Error("INVALID_CONTENT", "Comment cannot be empty"))
    if len(trimmed) > COMMENT_MAX_LENGTH:
        return Return.err(
            Error(
                "INVALID_CONTENT",
                f"Comment must be at most {COMMENT_MAX_LENGTH} characters",
            )
        )
    return Return.ok(trimmed)
