from fritter_api.app.models import DisplayRecord
from fritter_api.app.schemas.display import DisplayRead

from .common import format_date


def construct_display_response(display: DisplayRecord) -> DisplayRead:
    """Transform a stored display into the view sent to clients."""
    return DisplayRead(
        id=str(display.id),
        author=display.author.username,
        display_type=display.display_type,
        date_modified=format_date(display.date_modified),
    )
