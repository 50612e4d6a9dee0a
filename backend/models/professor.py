"""Professor model definitions."""

from pydantic import BaseModel, ConfigDict, field_validator


class Professor(BaseModel):
    """Represents a stored professor record."""
    model_config = ConfigDict(extra='ignore', coerce_numbers_to_str=True)

    id: str
    name: str
    email: str
    gender: str
    password: str

    @field_validator('id')
    @classmethod
    def validate_id(cls, value: str) -> str:
        if not value:
            raise ValueError('Professor ID is required.')
        if value != value.strip():
            raise ValueError('Professor ID must not start or end with whitespace.')
        return value


class ProfessorUpdate(BaseModel):
    """Fields that may be changed on an existing professor."""
    model_config = ConfigDict(extra='ignore')

    name: str | None = None
    email: str | None = None
    gender: str | None = None
    password: str | None = None
