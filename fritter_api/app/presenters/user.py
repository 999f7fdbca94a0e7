from fritter_api.app.models import UserRecord
from fritter_api.app.schemas.user import UserRead

from .common import format_date


def construct_user_response(user: UserRecord) -> UserRead:
    return UserRead(
        id=str(user.id),
        username=user.username,
        date_joined=format_date(user.date_joined),
    )
