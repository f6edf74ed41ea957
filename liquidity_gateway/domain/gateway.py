"""Read-only ledger data contract consumed by the projection engine"""

from datetime import datetime
from typing import List, Protocol

from liquidity_gateway.domain.models import Account, ARAPItem, ExpenseTransaction


class DataGateway(Protocol):
    """
    Source of ledger snapshots for a single user.

    Implementations raise DataGatewayError (or a subclass) when the backing
    store cannot be read. Empty results are returned as empty lists.
    """

    async def list_accounts(self, user_id: str) -> List[Account]:
        ...

    async def list_expense_transactions(self, user_id: str, since: datetime) -> List[ExpenseTransaction]:
        """Transactions with amount <= 0 dated on or after `since`"""
        ...

    async def list_arap_items(self, user_id: str, kind: str) -> List[ARAPItem]:
        """Receivable or payable items, selected by `kind`"""
        ...
