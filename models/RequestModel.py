from typing import Any, ClassVar, Tuple

from pydantic import BaseModel, ConfigDict, model_validator


MISSING_FIELDS_MESSAGE = "Missing required fields"


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class CapabilityRequest(BaseModel):
    """
    Base for the POST bodies of the AI capabilities.

    Subclasses list their mandatory fields in `required_fields`. A field that is
    absent, null or whitespace-only counts as missing, and the whole request is
    rejected before anything else happens. Requests of the JSON capabilities
    also provide `prompt_fields()`, the values for their prompt template.
    """
    model_config = ConfigDict(extra="ignore")

    required_fields: ClassVar[Tuple[str, ...]] = ("user_id",)

    user_id: str

    @model_validator(mode="before")
    @classmethod
    def required_fields_must_be_present(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if any(is_blank(data.get(name)) for name in cls.required_fields):
            raise ValueError(MISSING_FIELDS_MESSAGE)
        return data
