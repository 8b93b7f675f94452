"""Firebase authentication provider implementation.

Verifies Firebase ID tokens issued to the single-page application. The
Firebase app is initialized lazily on first use so importing this module
never requires credentials.
"""

import asyncio
from typing import Optional

import firebase_admin
import structlog
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from firebase_admin import exceptions as firebase_exceptions

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = structlog.get_logger()

FIREBASE_APP_NAME = "alumni-connect"


class FirebaseAuthProvider:
    """Identity provider backed by Firebase Authentication."""

    def __init__(
        self,
        credentials_path: str = settings.firebase_credentials_path,
        project_id: str = settings.firebase_project_id,
        app: Optional[firebase_admin.App] = None,
    ) -> None:
        self._credentials_path = credentials_path
        self._project_id = project_id
        self._app = app

    def _get_app(self) -> firebase_admin.App:
        """Return the Firebase app, initializing it once."""
        if self._app is not None:
            return self._app

        try:
            self._app = firebase_admin.get_app(FIREBASE_APP_NAME)
        except ValueError:
            if self._credentials_path:
                cred = credentials.Certificate(self._credentials_path)
            else:
                cred = credentials.ApplicationDefault()
            options = {"projectId": self._project_id} if self._project_id else None
            self._app = firebase_admin.initialize_app(cred, options, name=FIREBASE_APP_NAME)
            logger.info("firebase_app_initialized", project_id=self._project_id or None)
        return self._app

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Verify a Firebase ID token.

        Verification may fetch Google's public certificates, so it runs in a
        worker thread.

        Args:
            token: The Firebase ID token

        Returns:
            TokenUser if valid, None if invalid, expired or revoked
        """
        app = self._get_app()
        try:
            decoded = await asyncio.to_thread(firebase_auth.verify_id_token, token, app=app)
        except firebase_auth.InvalidIdTokenError:
            return None
        except (firebase_exceptions.FirebaseError, ValueError) as e:
            logger.warning("firebase_token_verification_failed", error=str(e))
            return None

        uid = decoded.get("uid") or decoded.get("sub")
        if not uid:
            return None

        return TokenUser(
            uid=uid,
            email=decoded.get("email"),
            display_name=decoded.get("name"),
        )
