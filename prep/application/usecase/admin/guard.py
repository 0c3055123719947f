"""Admin access check."""

import logfire

from prep.application.usecase.caller import CallerResolver
from prep.config import AuthSettings
from prep.domain.error import NotAuthorizedError
from prep.domain.service import IdentityService
from prep.domain.value import ExternalIdentity


class AdminGuard:
    """Admits callers whose provider email is on the admin allowlist."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        identity_service: IdentityService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize admin guard.

        Args:
            caller_resolver: Session token resolver
            identity_service: Identity provider domain service
            auth_settings: Settings holding admin_emails
        """
        self.caller_resolver = caller_resolver
        self.identity_service = identity_service
        self.admin_emails = {
            email.strip().lower() for email in auth_settings.admin_emails if email.strip()
        }

    async def require_admin(self, token: str | None) -> ExternalIdentity:
        """Identity of the caller, who must be an admin.

        The email is read from the identity provider, not the local record,
        so a changed address takes effect without a sync.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotAuthorizedError: If the caller's email is not an admin email
        """
        external_id = await self.caller_resolver.require_external_id(token)
        identity = await self.identity_service.get_identity(external_id)

        email = (identity.email or "").strip().lower()
        if not email or email not in self.admin_emails:
            logfire.warn("Admin access denied", external_id=external_id.root)
            raise NotAuthorizedError("Admin access required")
        return identity
