import secrets
import time
import uuid


def new_id(prefix: str) -> str:
    """Short prefixed identifier, e.g. ``ven_3f9a1c2b7d4e``."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def id_factory(prefix: str):
    return lambda: new_id(prefix)


def base36(number: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if number == 0:
        return "0"
    out = ""
    while number:
        number, rem = divmod(number, 36)
        out = digits[rem] + out
    return out


def short_random_id(length: int = 8) -> str:
    alphabet = "0123456789abcdefghijklmnopqrstuvwxyz"
    return "".join(secrets.choice(alphabet) for _ in range(length))


def deleted_slug_suffix() -> str:
    # -DELETED-<ms timestamp in base36>-<random>
    return f"-DELETED-{base36(int(time.time() * 1000))}-{short_random_id(8)}"
