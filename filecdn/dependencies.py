from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from filecdn.database import Catalog, get_catalog
from filecdn.services.token_authority import authenticate

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(request: Request,
                        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
                        catalog: Catalog = Depends(get_catalog)) -> str:
    if credentials is not None:
        token = credentials.credentials
    else:
        # clients may also send the bare token without the "Bearer" scheme
        token = request.headers.get("Authorization", "").strip()

    return authenticate(catalog, token)
