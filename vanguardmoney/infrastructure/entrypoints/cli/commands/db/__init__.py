import asyncio

import typer

from vanguardmoney.infrastructure.adapters.database.models import Base
from vanguardmoney.infrastructure.adapters.database.session import async_engine

app = typer.Typer()


async def create_tables_logic() -> None:
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@app.command("create-tables", help="Create the missing database tables.")
def create_tables():
    try:
        asyncio.run(create_tables_logic())
    except Exception as e:
        typer.secho(f"Unexpected error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    typer.secho("Database tables created.", fg=typer.colors.GREEN)
