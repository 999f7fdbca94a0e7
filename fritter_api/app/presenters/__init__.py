"""
Presenters turn stored records into API views.

Every presenter replaces the owner reference with the owner's
username, renders identifiers as strings and formats timestamps with
:func:`format_date`.  Presenters take records straight from the
service layer; they are never applied to their own output.
"""

from .common import format_date
from .user import construct_user_response
from .post import construct_post_response
from .display import construct_display_response
from .incognito import construct_incognito_response
from .profile import construct_profile_response
from .reaction import construct_reaction_response

__all__ = [
    "format_date",
    "construct_user_response",
    "construct_post_response",
    "construct_display_response",
    "construct_incognito_response",
    "construct_profile_response",
    "construct_reaction_response",
]
