from vanguardmoney.infrastructure.adapters.database.models.base import Base
from vanguardmoney.infrastructure.adapters.database.models.transactions import Transaction
from vanguardmoney.infrastructure.adapters.database.models.users import User

__all__ = ["Base", "Transaction", "User"]
