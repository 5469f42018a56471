import gc

import pytest

from paillier_core import KeyDestroyed, PrivateKey


def test_private_key_wiped_on_scope_exit(fresh_keypair):
    pub, priv = fresh_keypair
    c = pub.encrypt(31)
    with priv as sk:
        assert sk.decrypt(pub, c) == 31
        assert not sk.destroyed
    assert priv.destroyed
    assert (priv.lam, priv.mu, priv.p, priv.q) == (0, 0, 0, 0)


def test_private_key_wiped_when_block_raises(fresh_keypair):
    pub, priv = fresh_keypair
    with pytest.raises(RuntimeError):
        with priv:
            raise RuntimeError("boom")
    assert priv.destroyed


def _decrypt_and_return_early(pub, priv, c):
    with priv:
        return priv.decrypt(pub, c)


def test_private_key_wiped_on_early_return(fresh_keypair):
    pub, priv = fresh_keypair
    assert _decrypt_and_return_early(pub, priv, pub.encrypt(8)) == 8
    assert priv.destroyed


def test_keypair_scope_wipes_private_key(fresh_keypair):
    with fresh_keypair as kp:
        c = kp.public_key.encrypt(5)
        assert kp.private_key.decrypt(kp.public_key, c) == 5
    assert fresh_keypair.private_key.destroyed


def test_wiped_key_refuses_to_decrypt(fresh_keypair):
    pub, priv = fresh_keypair
    c = pub.encrypt(2)
    priv.wipe()
    with pytest.raises(KeyDestroyed):
        priv.decrypt(pub, c)
    with pytest.raises(KeyDestroyed):
        priv.decrypt_crt(pub, c)


def test_wipe_is_idempotent(fresh_keypair):
    _, priv = fresh_keypair
    priv.wipe()
    priv.wipe()
    assert priv.destroyed


def test_public_key_survives_private_key_wipe(fresh_keypair):
    pub, priv = fresh_keypair
    priv.wipe()
    assert pub.encrypt(3).value > 0


def test_repr_does_not_leak_secrets(fresh_keypair):
    _, priv = fresh_keypair
    text = repr(priv)
    assert str(priv.p) not in text
    assert str(priv.lam) not in text
    priv.wipe()
    assert repr(priv) == "PrivateKey(<wiped>)"


def test_collection_fallback_wipes(fresh_keypair):
    _, priv = fresh_keypair
    sk = PrivateKey(priv.lam, priv.mu, priv.p, priv.q)
    sk.__del__()
    assert sk.destroyed
    del sk
    gc.collect()
