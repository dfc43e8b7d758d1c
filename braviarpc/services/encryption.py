"""Encryption service.

Only the public key is exposed; encrypting payloads is left to the caller.
"""
from ..const import ENCRYPTION
from ..envelope import ResultPath
from .base import BraviaService, expect


class EncryptionService(BraviaService):
    """APIs of the ``encryption`` endpoint."""

    endpoint = ENCRYPTION

    async def get_public_key(self) -> str:
        """Return the device RSA public key (base64)."""
        result = await self._call(
            1, "getPublicKey", expects_result=True, path=ResultPath.field("publicKey")
        )
        return expect(str, result)
