"""Configuration management for bankapp."""

import os
from dataclasses import dataclass


@dataclass
class BankConfig:
    """Runtime configuration for a bank instance."""

    first_account_number: int = 1001
    max_accounts_per_user: int = 2
    log_level: str = "WARNING"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.first_account_number < 1:
            raise ValueError("first_account_number must be positive")
        if self.max_accounts_per_user < 1:
            raise ValueError("max_accounts_per_user must be at least 1")
        if self.log_format not in ("standard", "json"):
            raise ValueError(f"Unknown log format '{self.log_format}'")

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        return cls(
            first_account_number=int(os.getenv("BANKAPP_FIRST_ACCOUNT_NUMBER", "1001")),
            max_accounts_per_user=int(os.getenv("BANKAPP_MAX_ACCOUNTS", "2")),
            log_level=os.getenv("BANKAPP_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("BANKAPP_LOG_FORMAT", "standard"),
        )
