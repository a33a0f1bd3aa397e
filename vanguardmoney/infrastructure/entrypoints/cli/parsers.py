from pydantic import TypeAdapter
from pydantic import ValidationError

import typer

from vanguardmoney.domain.schemas.user import EmailField
from vanguardmoney.domain.schemas.user import PasswordField

EmailAdapter: TypeAdapter[str] = TypeAdapter(EmailField)
PasswordAdapter: TypeAdapter[str] = TypeAdapter(PasswordField)


def parse_password(value: str) -> str:
    try:
        PasswordAdapter.validate_python(value)
    except ValidationError as e:
        raise typer.BadParameter(e.errors()[0]["msg"]) from e

    return value


def parse_email(value: str) -> str:
    try:
        return EmailAdapter.validate_python(value)
    except ValidationError as e:
        raise typer.BadParameter(e.errors()[0]["msg"]) from e
