import secrets

from src.app.services.token_issuer import TokenIssuer
from src.domain.entities.invitation import TOKEN_BYTES


class SecretsTokenIssuer(TokenIssuer):
    """URL-safe tokens from the OS random source (32 bytes of entropy)"""

    def __init__(self, nbytes: int = TOKEN_BYTES):
        self.nbytes = nbytes

    def issue(self) -> str:
        return secrets.token_urlsafe(self.nbytes)
