from fritter_api.app.models import ReactionRecord
from fritter_api.app.schemas.reaction import ReactionRead

from .common import format_date


def construct_reaction_response(reaction: ReactionRecord) -> ReactionRead:
    return ReactionRead(
        id=str(reaction.id),
        user=reaction.user.username,
        post_id=str(reaction.post_id),
        symbol=reaction.symbol,
        date_created=format_date(reaction.date_created),
        date_modified=format_date(reaction.date_modified),
    )
