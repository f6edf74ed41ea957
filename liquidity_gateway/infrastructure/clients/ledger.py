"""Ledger API HTTP client - DataGateway over the external ledger service"""

import httpx
from datetime import datetime
from typing import Any, Dict, List
from liquidity_gateway.domain.models import Account, ExpenseTransaction, ARAPItem
from liquidity_gateway.domain.exceptions import LedgerAPIError
from liquidity_gateway.config import settings


class LedgerClient:
    """Client for the external ledger read API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.ledger_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        GET a ledger resource and return the decoded JSON body.

        Raises:
            LedgerAPIError: On timeout, HTTP errors, or a non-JSON response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}{path}", params=params)
                response.raise_for_status()
                return response.json()
            except httpx.TimeoutException as e:
                raise LedgerAPIError(f"Ledger API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise LedgerAPIError(f"Ledger API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise LedgerAPIError(f"Ledger API unreachable: {e}") from e
            except ValueError as e:
                raise LedgerAPIError(f"Invalid JSON from ledger: {e}") from e

    async def list_accounts(self, user_id: str) -> List[Account]:
        data = await self._get("/ledger/accounts", {"user_id": user_id})
        try:
            return [
                Account(
                    balance=acc["balance"],
                    currency=acc.get("currency", "TRY"),
                    type=acc.get("type", "bank"),
                )
                for acc in data.get("accounts", [])
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise LedgerAPIError(f"Invalid account data from ledger: {e}") from e

    async def list_expense_transactions(self, user_id: str, since: datetime) -> List[ExpenseTransaction]:
        data = await self._get(
            "/ledger/transactions",
            {"user_id": user_id, "since": since.isoformat(), "max_amount": 0},
        )
        try:
            return [
                ExpenseTransaction(
                    amount=txn["amount"],
                    occurred_at=datetime.fromisoformat(txn["occurred_at"]),
                )
                for txn in data.get("transactions", [])
            ]
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise LedgerAPIError(f"Invalid transaction data from ledger: {e}") from e

    async def list_arap_items(self, user_id: str, kind: str) -> List[ARAPItem]:
        data = await self._get("/ledger/ar-ap-items", {"user_id": user_id, "type": kind})
        try:
            return [
                ARAPItem(
                    kind=item.get("type", kind),
                    amount=item["amount"],
                    age_days=int(item["age_days"]) if item.get("age_days") is not None else 0,
                    status=item.get("status", "pending"),
                )
                for item in data.get("items", [])
            ]
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise LedgerAPIError(f"Invalid AR/AP data from ledger: {e}") from e
