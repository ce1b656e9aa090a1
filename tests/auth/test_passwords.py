from roster.auth.passwords import hash_password, verify_password


def test_hash_password_embeds_cost_and_salt() -> None:
    hashed = hash_password('secret1', rounds=4)

    assert hashed.startswith('$2b$04$')
    assert hashed != 'secret1'


def test_hash_password_uses_a_fresh_salt_each_call() -> None:
    assert hash_password('secret1') != hash_password('secret1')


def test_verify_password_accepts_matching_password() -> None:
    hashed = hash_password('secret1')

    assert verify_password('secret1', hashed) is True


def test_verify_password_rejects_wrong_password() -> None:
    hashed = hash_password('secret1')

    assert verify_password('secret2', hashed) is False


def test_verify_password_returns_false_for_malformed_hash() -> None:
    assert verify_password('secret1', 'not-a-bcrypt-hash') is False
