"""Store configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Store settings loaded from environment variables."""

    # Root holding one directory per network
    data_dir: str = "/var/lib/cni/networks"

    # Permissions for the network directory and record files
    dir_mode: int = 0o755
    record_mode: int = 0o644

    # Advisory lock file created inside each network directory
    lock_file_name: str = "lock"

    # Refuse to save keys whose parts contain the record separator
    reject_separator_in_keys: bool = True

    class Config:
        env_prefix = "MACSTORE_"


settings = Settings()
