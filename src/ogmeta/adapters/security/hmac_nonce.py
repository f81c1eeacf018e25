from __future__ import annotations

import hmac
import secrets
from dataclasses import dataclass
from hashlib import sha256


@dataclass(frozen=True, slots=True)
class HmacNonceIssuer:
    """
    Stateless form tokens: "<salt>.<hmac(secret, action|salt)>".
    """
    secret: str

    def _sign(self, action: str, salt: str) -> str:
        msg = f"{action}|{salt}".encode("utf-8")
        return hmac.new(self.secret.encode("utf-8"), msg, sha256).hexdigest()

    def create(self, action: str) -> str:
        salt = secrets.token_hex(8)
        return f"{salt}.{self._sign(action, salt)}"

    def verify(self, token: str, action: str) -> bool:
        salt, sep, sig = (token or "").partition(".")
        if not sep or not salt or not sig:
            return False
        return hmac.compare_digest(sig, self._sign(action, salt))
