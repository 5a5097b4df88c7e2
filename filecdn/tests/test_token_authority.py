import string

import pytest

from filecdn.errors import Unauthorized
from filecdn.models.auth_token_model import AuthToken
from filecdn.services import account_service
from filecdn.services.token_authority import authenticate, issue_token
from filecdn.utils.auth import generate_token, hash_password, verify_password


def test_generate_token_is_alphanumeric():
    token = generate_token()
    assert len(token) == 32
    assert set(token) <= set(string.ascii_letters + string.digits)


def test_generated_tokens_do_not_repeat():
    tokens = {generate_token() for _ in range(1000)}
    assert len(tokens) == 1000


def test_issued_token_authenticates_to_its_user(catalog):
    account_service.register(catalog, "gina", "gina@example.com", "pw")
    with catalog.session() as db:
        user_id = db.query(AuthToken.user_id).scalar()

    token = issue_token(catalog, user_id)

    assert authenticate(catalog, token) == user_id
    with catalog.session() as db:
        assert db.query(AuthToken).filter(AuthToken.user_id == user_id).count() == 2


@pytest.mark.parametrize("token", [None, "", "unknown", "x" * 32])
def test_unknown_tokens_are_rejected(catalog, token):
    with pytest.raises(Unauthorized):
        authenticate(catalog, token)


def test_register_creates_user_and_token_together(catalog):
    token = account_service.register(catalog, "hank", "hank@example.com", "pw")
    user_id = authenticate(catalog, token)

    assert account_service.login(catalog, "hank", "pw") != token
    assert authenticate(catalog, account_service.login(catalog, "hank", "pw")) == user_id


def test_verify_password():
    digest = hash_password("pw1")
    assert verify_password("pw1", digest)
    assert not verify_password("pw2", digest)


@pytest.mark.parametrize("digest", ["", "not-a-hash", "$2b$12$short"])
def test_verify_password_fails_closed_on_malformed_digest(digest):
    assert verify_password("pw1", digest) is False
