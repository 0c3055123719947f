"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class IdentityNotFoundError(ProviderError):
    """Identity provider has no user for the requested id."""

    def __init__(self, external_id: str):
        self.external_id = external_id
        super().__init__(f"Identity not found at provider: {external_id}")
