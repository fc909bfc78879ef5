# =============================================================================
# core/models/credentials.py - Login Credentials
# =============================================================================
# Credentials are passed into the fetch flow explicitly instead of being read
# from the process environment deep inside it. Build them from Settings at
# the edge of the program with Credentials.from_settings().
# =============================================================================

from pydantic import BaseModel, Field, SecretStr

from app.config import Settings
from app.exceptions import MissingCredentialsError


class Credentials(BaseModel):
    """
    Email/password pair for the privileged account.

    Used once per run to open a session; never written anywhere.
    """

    email: str = Field(..., min_length=1)
    password: SecretStr

    @classmethod
    def from_settings(cls, settings: Settings) -> "Credentials":
        """
        Build credentials from POCKETBASE_EMAIL / POCKETBASE_PASSWORD.

        Raises:
            MissingCredentialsError: If either value is unset or blank
        """
        password = (
            settings.POCKETBASE_PASSWORD.get_secret_value()
            if settings.POCKETBASE_PASSWORD
            else ""
        )

        missing = []
        if not settings.POCKETBASE_EMAIL or not settings.POCKETBASE_EMAIL.strip():
            missing.append("POCKETBASE_EMAIL")
        if not password:
            missing.append("POCKETBASE_PASSWORD")
        if missing:
            raise MissingCredentialsError(missing)

        return cls(email=settings.POCKETBASE_EMAIL.strip(), password=SecretStr(password))
