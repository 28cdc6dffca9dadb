"""
Repositories.

Data access layer over an explicitly passed async session.
"""

from roistake.repositories.base import BaseRepository
from roistake.repositories.ledger_event_repository import LedgerEventRepository
from roistake.repositories.participant_repository import ParticipantRepository
from roistake.repositories.pool_state_repository import PoolStateRepository
from roistake.repositories.token_repository import TokenRepository

__all__ = [
    "BaseRepository",
    "LedgerEventRepository",
    "ParticipantRepository",
    "PoolStateRepository",
    "TokenRepository",
]
