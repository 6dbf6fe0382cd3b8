from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.clock import Clock
from src.domain.entities import Permission, Role, TeamMember
from src.domain.permissions import ALL_PERMISSIONS


class FixedClock(Clock):
    def __init__(self, now: datetime):
        self._now = now

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        self._now += delta


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def now():
    return datetime(2024, 3, 15, 10, 30)


@pytest.fixture
def clock(now):
    return FixedClock(now)


@pytest.fixture
def dispatcher():
    """Dispatcher double that records every published batch"""
    dispatcher = MagicMock()
    dispatcher.publish = AsyncMock()
    return dispatcher


@pytest.fixture
def grant(mock_uow):
    """Make ``user_id`` a team member of ``business`` holding ``permissions``"""

    def _grant(user_id, business, permissions=ALL_PERMISSIONS, role_name="Owner"):
        role = Role.create(role_name)
        for name in sorted(permissions):
            role.add_permission(Permission.create(name, ""))

        mock_uow.businesses.get_by_id = AsyncMock(return_value=business)
        mock_uow.team_members.get_by_user_and_business = AsyncMock(
            return_value=TeamMember.create(user_id, business.id, role.id)
        )
        mock_uow.roles.get_by_id = AsyncMock(return_value=role)
        return role

    return _grant
