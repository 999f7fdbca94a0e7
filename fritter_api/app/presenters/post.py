from fritter_api.app.models import PostRecord
from fritter_api.app.schemas.post import PostRead

from .common import format_date


def construct_post_response(post: PostRecord) -> PostRead:
    return PostRead(
        id=str(post.id),
        author=post.author.username,
        content=post.content,
        date_created=format_date(post.date_created),
    )
