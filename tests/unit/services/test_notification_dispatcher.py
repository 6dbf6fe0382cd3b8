import logging
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.adapter.services.notification_dispatcher import LoggingNotificationDispatcher
from src.adapter.services.token_issuer import SecretsTokenIssuer
from src.app.services.notification_dispatcher import dispatch_after_commit
from src.domain.base import utc_now
from src.domain.facts import BusinessDeleted, InvitationAccepted, InvitationCreated


@pytest.mark.asyncio
async def test_dispatch_after_commit_publishes_facts():
    dispatcher = MagicMock()
    dispatcher.publish = AsyncMock()
    fact = BusinessDeleted(business_id=uuid4(), deleted_by=uuid4())

    await dispatch_after_commit(dispatcher, [fact])

    dispatcher.publish.assert_called_once_with([fact])


@pytest.mark.asyncio
async def test_dispatch_after_commit_skips_empty_batches():
    dispatcher = MagicMock()
    dispatcher.publish = AsyncMock()

    await dispatch_after_commit(dispatcher, [])
    await dispatch_after_commit(None, [BusinessDeleted(business_id=uuid4(), deleted_by=uuid4())])

    dispatcher.publish.assert_not_called()


@pytest.mark.asyncio
async def test_dispatch_failure_is_logged_not_raised(caplog):
    dispatcher = MagicMock()
    dispatcher.publish = AsyncMock(side_effect=RuntimeError("smtp down"))

    with caplog.at_level(logging.ERROR):
        await dispatch_after_commit(
            dispatcher,
            [InvitationAccepted(invitation_id=uuid4(), business_id=uuid4(), user_id=uuid4())],
        )

    assert "invitation_accepted" in caplog.text


@pytest.mark.asyncio
async def test_logging_dispatcher_keeps_history_and_hides_token(caplog):
    dispatcher = LoggingNotificationDispatcher(history_size=2)
    facts = [
        InvitationCreated(
            invitation_id=uuid4(),
            business_id=uuid4(),
            business_name="Acme",
            email="new@acme.com",
            role_name="Editor",
            token="secret-token-value",
            expires_at=utc_now(),
        ),
        BusinessDeleted(business_id=uuid4(), deleted_by=uuid4()),
        BusinessDeleted(business_id=uuid4(), deleted_by=uuid4()),
    ]

    with caplog.at_level(logging.INFO):
        await dispatcher.publish(facts)

    assert list(dispatcher.published) == facts[1:]
    assert "invitation_created" in caplog.text
    assert "secret-token-value" not in caplog.text


def test_secrets_token_issuer_issues_distinct_tokens():
    issuer = SecretsTokenIssuer()

    tokens = {issuer.issue() for _ in range(10)}

    assert len(tokens) == 10
    assert all(len(t) >= 43 for t in tokens)
