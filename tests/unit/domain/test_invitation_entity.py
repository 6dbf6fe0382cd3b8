from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.domain.entities import Invitation, InvitationStatus
from src.domain.errors import ConflictError, InvalidStateError, ValidationError

NOW = datetime(2024, 3, 15, 10, 30)


def make_invitation(**overrides) -> Invitation:
    params = dict(
        business_id=uuid4(),
        email="new.member@example.com",
        role_id=uuid4(),
        validity_hours=24,
        now=NOW,
    )
    params.update(overrides)
    return Invitation.create(**params)


def test_create_pending_invitation():
    invitation = make_invitation(token="fixed-token")

    assert invitation.status == InvitationStatus.pending
    assert invitation.token == "fixed-token"
    assert invitation.expires_at == NOW + timedelta(hours=24)


def test_generated_tokens_are_unique_and_url_safe():
    tokens = {make_invitation().token for _ in range(20)}

    assert len(tokens) == 20
    for token in tokens:
        assert len(token) >= 43
        assert all(c.isalnum() or c in "-_" for c in token)


def test_cannot_invite_existing_member_case_insensitive():
    with pytest.raises(ConflictError) as exc_info:
        make_invitation(
            email="Member@Example.com",
            existing_member_emails=["owner@example.com", "member@example.com"],
        )

    assert exc_info.value.code == "ALREADY_MEMBER"


def test_blank_email_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        make_invitation(email=" ")

    assert exc_info.value.code == "EMAIL_REQUIRED"


@pytest.mark.parametrize("hours", [0, -1])
def test_validity_window_must_be_positive(hours):
    with pytest.raises(ValidationError) as exc_info:
        make_invitation(validity_hours=hours)

    assert exc_info.value.code == "INVALID_VALIDITY_WINDOW"


def test_accept_within_window():
    invitation = make_invitation()

    invitation.accept(NOW + timedelta(hours=23))

    assert invitation.status == InvitationStatus.accepted


def test_accept_at_exact_expiry_is_allowed():
    invitation = make_invitation()

    invitation.accept(invitation.expires_at)

    assert invitation.status == InvitationStatus.accepted


def test_accept_after_expiry_fails_without_state_change():
    invitation = make_invitation()

    with pytest.raises(InvalidStateError) as exc_info:
        invitation.accept(NOW + timedelta(hours=25))

    assert exc_info.value.code == "INVITATION_EXPIRED"
    assert invitation.status == InvitationStatus.pending


def test_accept_twice_fails():
    invitation = make_invitation()
    invitation.accept(NOW)

    with pytest.raises(InvalidStateError) as exc_info:
        invitation.accept(NOW)

    assert exc_info.value.code == "INVITATION_NOT_PENDING"
    assert invitation.status == InvitationStatus.accepted


def test_expired_invitation_cannot_be_accepted():
    invitation = make_invitation()
    invitation.expire()

    with pytest.raises(InvalidStateError) as exc_info:
        invitation.accept(NOW)

    assert exc_info.value.code == "INVITATION_NOT_PENDING"


def test_expire_only_touches_pending():
    invitation = make_invitation()
    invitation.accept(NOW)

    invitation.expire()

    assert invitation.status == InvitationStatus.accepted
