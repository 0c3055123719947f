"""Client-side view of the identity provider session."""

from pydantic import BaseModel, ConfigDict


class Identity(BaseModel):
    """Signed-in identity as seen by the client."""

    model_config = ConfigDict(frozen=True)

    external_id: str


class IdentitySession(BaseModel):
    """Identity session state owned by the identity provider's SDK.

    The session starts unloaded. Once the SDK has resolved it, `identity`
    holds the signed-in person or stays None for anonymous visitors.
    """

    identity: Identity | None = None
    is_loaded: bool = False

    @property
    def is_present(self) -> bool:
        """Whether a signed-in identity exists."""
        return self.identity is not None

    def load(self, identity: Identity | None) -> None:
        """Mark the session resolved with the given identity (or none)."""
        self.identity = identity
        self.is_loaded = True

    def sign_out(self) -> None:
        """Drop the signed-in identity."""
        self.identity = None
