"""Password hashing with bcrypt."""

import bcrypt

from askboard.util.error import PasswordHashError


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a plaintext password.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash as a UTF-8 string
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode(
        "utf-8"
    )


def check_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Raises:
        PasswordHashError: If the stored hash is malformed
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        raise PasswordHashError(str(e)) from e
