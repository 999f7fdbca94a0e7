from fritter_api.app.models import ProfileRecord
from fritter_api.app.schemas.profile import ProfileRead

from .common import format_date


def construct_profile_response(profile: ProfileRecord) -> ProfileRead:
    """Transform a stored profile into the view sent to clients.

    The owner is shown by username under ``user``; ``bio`` may be
    ``None`` when the profile was created without one.
    """
    return ProfileRead(
        id=str(profile.id),
        user=profile.user.username,
        handle=profile.handle,
        type=profile.type,
        bio=profile.bio,
        date_created=format_date(profile.date_created),
        date_modified=format_date(profile.date_modified),
    )
