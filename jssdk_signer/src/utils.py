import random
import string

NONCE_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
NONCE_LENGTH = 16


def make_nonce_str(length: int = NONCE_LENGTH) -> str:
    return "".join(random.choice(NONCE_ALPHABET) for _ in range(length))


def strip_fragment(url: str) -> str:
    return url.split("#", 1)[0]
