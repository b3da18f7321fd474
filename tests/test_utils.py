import string

from jssdk_signer.src.utils import NONCE_ALPHABET, make_nonce_str, strip_fragment


def test_nonce_alphabet_is_alphanumeric():
    assert len(NONCE_ALPHABET) == 62
    assert set(NONCE_ALPHABET) == set(string.digits + string.ascii_letters)


def test_make_nonce_str_shape():
    for _ in range(200):
        nonce = make_nonce_str()
        assert len(nonce) == 16
        assert all(c in NONCE_ALPHABET for c in nonce)


def test_make_nonce_str_varies():
    assert len({make_nonce_str() for _ in range(50)}) > 1


def test_strip_fragment():
    assert strip_fragment("https://example.com/page?a=1#top") == "https://example.com/page?a=1"
    assert strip_fragment("https://example.com/page") == "https://example.com/page"
