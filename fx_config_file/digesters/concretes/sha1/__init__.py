from fx_config_file.digesters.concretes.sha1.sha1_content_digester import Sha1ContentDigester

__all__ = [
    "Sha1ContentDigester"
]
