import hashlib
import hmac
import secrets

PBKDF2_ITERATIONS = 100000


def _derive(password: str, salt: str) -> str:
    return hashlib.pbkdf2_hmac(
        'sha256',
        password.encode('utf-8'),
        salt.encode('utf-8'),
        PBKDF2_ITERATIONS
    ).hex()


def hash_password(password: str) -> str:
    """Хеширование пароля с солью (pbkdf2, формат salt$hash)"""
    salt = secrets.token_hex(16)
    return f"{salt}${_derive(password, salt)}"


def verify_password(password: str, password_hash: str) -> bool:
    """Проверка пароля за постоянное время"""
    try:
        salt, stored_hash = password_hash.split('$')
    except ValueError:
        return False
    return hmac.compare_digest(_derive(password, salt), stored_hash)
