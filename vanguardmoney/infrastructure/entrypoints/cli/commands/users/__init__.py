import asyncio
from typing import Any

from pydantic import ValidationError

import typer

from vanguardmoney.domain.exceptions import DomainError
from vanguardmoney.domain.exceptions import UserValidationError
from vanguardmoney.domain.schemas.user import UserUpdate
from vanguardmoney.infrastructure.entrypoints.cli.commands.users.create import user_create_logic
from vanguardmoney.infrastructure.entrypoints.cli.commands.users.update import user_update_logic
from vanguardmoney.infrastructure.entrypoints.cli.parsers import parse_email
from vanguardmoney.infrastructure.entrypoints.cli.parsers import parse_password

__all__ = ["app", "user_create_logic", "user_update_logic"]

app = typer.Typer()


def secho_domain_error(e: DomainError) -> None:
    typer.secho(f"Error: {e.message}", fg=typer.colors.RED, err=True)
    if isinstance(e, UserValidationError):
        for detail in e.details:
            typer.secho(f"  - {detail.field}: {detail.message}", fg=typer.colors.RED, err=True)


@app.command("create", help="Create a new user.")
def create(
    email: str = typer.Option(..., help="User email address", parser=parse_email),
    password: str = typer.Option(
        ...,
        prompt=True,
        confirmation_prompt=True,
        hide_input=True,
        help="User password",
        parser=parse_password,
    ),
    first_name: str | None = typer.Option(None, help="User first name"),
    last_name: str | None = typer.Option(None, help="User last name"),
):
    """
    Create a new active user, with the same validation rules as the registration.
    """
    try:
        user = asyncio.run(user_create_logic(email, password, first_name=first_name, last_name=last_name))
    except DomainError as e:
        secho_domain_error(e)
        raise typer.Exit(code=1) from e
    except Exception as e:
        typer.secho(f"Unexpected error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho(f"User {user.email} created successfully!", fg=typer.colors.GREEN)


@app.command("update", help="Update an existing user.")
def update(
    email: str = typer.Option(..., help="Current email address of the user", parser=parse_email),
    new_email: str | None = typer.Option(None, help="New email address", parser=parse_email),
    password: str | None = typer.Option(None, help="New password", parser=parse_password),
    first_name: str | None = typer.Option(None, help="New first name"),
    last_name: str | None = typer.Option(None, help="New last name"),
    clear_first_name: bool = typer.Option(False, "--clear-first-name", help="Remove the first name"),
    clear_last_name: bool = typer.Option(False, "--clear-last-name", help="Remove the last name"),
    is_active: bool | None = typer.Option(None, "--active/--inactive", help="Activate or deactivate the user"),
):
    """
    Update the given fields of a user, identified by its current email.
    """
    values: dict[str, Any] = {
        "email": new_email,
        "password": password,
        "first_name": first_name,
        "last_name": last_name,
        "is_active": is_active,
    }
    update_data = {field: value for field, value in values.items() if value is not None}
    for field, clear in (("first_name", clear_first_name), ("last_name", clear_last_name)):
        if clear and field in update_data:
            option = field.replace("_", "-")
            typer.secho(f"Error: --{option} and --clear-{option} are mutually exclusive", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        if clear:
            update_data[field] = None

    try:
        user_data = UserUpdate(**update_data)
    except ValidationError as e:
        typer.secho(f"Error: {e.errors()[0]['msg']}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    try:
        user = asyncio.run(user_update_logic(email, user_data))
    except DomainError as e:
        secho_domain_error(e)
        raise typer.Exit(code=1) from e
    except Exception as e:
        typer.secho(f"Unexpected error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho(f"User {user.email} updated successfully!", fg=typer.colors.GREEN)
