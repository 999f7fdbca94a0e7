from fritter_api.app.models import IncognitoRecord
from fritter_api.app.schemas.incognito import IncognitoRead


def construct_incognito_response(incognito: IncognitoRecord) -> IncognitoRead:
    return IncognitoRead(id=str(incognito.id), user=incognito.user.username)
