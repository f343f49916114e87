from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	RATE_API_URL: str = 'https://api.frankfurter.app/latest'
	REQUEST_TIMEOUT: float = 10.0

	DEFAULT_PIVOT: str = 'USD'
	# Snapshots older than this are reported as stale
	RATE_MAX_AGE_SECONDS: int = 3600
	STARTUP_REFRESH_ATTEMPTS: int = 3
	# Base delay of the exponential backoff between startup attempts
	STARTUP_RETRY_WAIT_SECONDS: float = 1.0

	# Reference rate table
	REFERENCE_BASE: str = 'CNY'
	REFERENCE_CURRENCIES: list[str] = ['USD', 'EUR', 'JPY', 'GBP', 'CAD', 'AUD']

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str = 'logs'
	LOG_TO_FILE: bool = False

	# Application
	APP_NAME: str = 'Currency Widget API'
	DEBUG: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
