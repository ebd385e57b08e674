from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class UserPayload(BaseModel):
    """User body returned by the user management service"""

    # Missing keys decode to zero values, unknown keys are dropped
    model_config = ConfigDict(strict=True, extra="ignore")

    id: str = ""
    name: str = ""
    age: int = 0

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        """Match keys to fields ignoring case; null leaves a field untouched"""
        if not isinstance(data, dict):
            return data

        fields = {name.lower(): name for name in cls.model_fields}
        folded = {}
        # Later keys win, like repeated keys in a JSON object
        for key, value in data.items():
            field = fields.get(key.lower()) if isinstance(key, str) else None
            if field is None or value is None:
                continue
            folded[field] = value
        return folded
