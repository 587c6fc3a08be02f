"""
Configuration for Console Banking System
Settings are read from environment variables with sensible defaults
"""

import os
import logging
from dataclasses import dataclass

from console_bank.utils.exceptions import ValidationException

logger = logging.getLogger(__name__)

_TRUE_VALUES = ('1', 'true', 'yes', 'on')

def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() in _TRUE_VALUES

@dataclass
class BankConfig:
    """Banking system configuration"""
    account_number_seed: int = 1000
    # plaintext storage mirrors the legacy behaviour; enable for bcrypt hashes
    hash_passwords: bool = False
    keep_session_on_failed_login: bool = False
    log_level: str = 'WARNING'
    log_file: str = ''
    currency_symbol: str = '$'

    @classmethod
    def from_env(cls) -> 'BankConfig':
        """Build configuration from BANK_* environment variables"""
        seed = os.getenv('BANK_ACCOUNT_NUMBER_SEED', '1000')
        try:
            account_number_seed = int(seed)
        except ValueError:
            raise ValidationException(f"BANK_ACCOUNT_NUMBER_SEED must be an integer, got {seed!r}",
                                      "INVALID_CONFIG")

        config = cls(
            account_number_seed=account_number_seed,
            hash_passwords=_env_flag('BANK_HASH_PASSWORDS'),
            keep_session_on_failed_login=_env_flag('BANK_KEEP_SESSION_ON_FAILED_LOGIN'),
            log_level=os.getenv('BANK_LOG_LEVEL', 'WARNING').upper(),
            log_file=os.getenv('BANK_LOG_FILE', ''),
            currency_symbol=os.getenv('BANK_CURRENCY_SYMBOL', '$'),
        )
        logger.debug("Loaded configuration: %s", config)
        return config
