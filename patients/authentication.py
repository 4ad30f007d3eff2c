"""
Bearer JWT authentication for the API.

``BearerJWTAuthentication`` wraps simplejwt's ``JWTAuthentication`` with
a more forgiving reading of the ``Authorization`` header: the ``Bearer``
keyword may be in any case or missing entirely, and a token pasted with
surrounding quotes is accepted.  Keeping this separate from the views
avoids circular imports when DRF loads authentication classes.
"""
from __future__ import annotations

import re

from rest_framework_simplejwt.authentication import JWTAuthentication

_BEARER = re.compile(rb'bearer\s+', re.IGNORECASE)


class BearerJWTAuthentication(JWTAuthentication):
    www_authenticate_realm = 'api'

    def get_raw_token(self, header: bytes) -> bytes | None:
        token = _BEARER.sub(b'', header).strip()
        if token[:1] in (b'"', b"'"):
            token = token[1:-1].strip()
        if not token:
            return None
        return token
