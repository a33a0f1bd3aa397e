from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError

from vanguardmoney.domain.exceptions import FieldError


class BaseEntity(BaseModel):
    model_config = ConfigDict(from_attributes=True)


def to_field_errors(exc: ValidationError) -> list[FieldError]:
    """Flattens a pydantic `ValidationError` into one `FieldError` per violation."""
    return [
        FieldError(
            field=".".join(str(part) for part in error["loc"]) or "__root__",
            message=error["msg"],
        )
        for error in exc.errors()
    ]
