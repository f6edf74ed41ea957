"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from liquidity_gateway.config import settings
from liquidity_gateway.domain.gateway import DataGateway
from liquidity_gateway.infrastructure.clients.ledger import LedgerClient
from liquidity_gateway.infrastructure.database.repositories import SqlDataGateway
from liquidity_gateway.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_data_gateway(db: Session = Depends(get_db)) -> DataGateway:
    """Provide the configured ledger data source"""
    if settings.data_source == "ledger_api":
        return LedgerClient()
    return SqlDataGateway(db)
