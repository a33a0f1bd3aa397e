from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import DisconnectionError
from sqlalchemy.exc import InterfaceError
from sqlalchemy.exc import OperationalError

from vanguardmoney.domain.exceptions import CredentialStoreUnavailable


@asynccontextmanager
async def store_errors() -> AsyncIterator[None]:
    """Translates connectivity failures of the driver into `CredentialStoreUnavailable`."""
    try:
        yield
    except (OperationalError, InterfaceError, DisconnectionError) as e:
        raise CredentialStoreUnavailable(str(e.orig or e)) from e
