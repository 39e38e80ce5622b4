"""Gate in front of state-mutating requests."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from kellum_library.auth.exceptions import GenerallyForbidden, SuspiciousRequest

if TYPE_CHECKING:
    from kellum_library.auth.models import AuthenticatedUser
    from kellum_library.auth.sessions import SessionManager

logger = logging.getLogger(__name__)

SESSION_HEADER = "X-Session-Id"


class RequestAuthorizer:
    """Reads the session credential from request headers and checks it is live."""

    def __init__(self, sessions: SessionManager, header_name: str = SESSION_HEADER) -> None:
        self._sessions = sessions
        self.header_name = header_name

    def authorize(self, headers: Mapping[str, str]) -> AuthenticatedUser:
        """Authorize a request by its headers.

        Args:
            headers: Request headers. Starlette headers match names
                     case-insensitively; plain dicts must use the exact name.

        Returns:
            The AuthenticatedUser behind the session.

        Raises:
            GenerallyForbidden: If the session header is missing or empty.
            InvalidSessionToken: If the session is absent or expired.
            FailedToRegister: On storage fault.
        """
        session_id = headers.get(self.header_name)
        if not session_id:
            logger.info("Request without %s header refused", self.header_name)
            raise GenerallyForbidden()
        return self._sessions.validate(session_id.strip())

    def check_integrity(self, headers: Mapping[str, str]) -> None:
        """Request-integrity hook for signed requests.

        No signature scheme is defined yet, so every request is rejected.

        Raises:
            SuspiciousRequest: Always.
        """
        logger.warning("Integrity check requested; no signature scheme configured")
        raise SuspiciousRequest()
