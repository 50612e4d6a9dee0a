"""Admin credential model definitions."""

from pydantic import BaseModel, ConfigDict


class AdminCredential(BaseModel):
    """Represents an administrator allowed to sign in."""
    model_config = ConfigDict(extra='ignore')

    user: str
    password: str
