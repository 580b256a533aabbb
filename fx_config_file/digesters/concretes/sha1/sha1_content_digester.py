import hashlib

from fx_config_file.digesters.interfaces.content_digester_interface import IContentDigester


class Sha1ContentDigester(IContentDigester):
    """SHA-1 hex digest. Used for change detection only, not for security."""

    def digest(self, data: bytes) -> str:
        return hashlib.sha1(data, usedforsecurity=False).hexdigest()
