"""Configuration settings and constants for doc-vault.

Everything lives in `config.settings`; this package re-exports it so
callers can write `from config import DEFAULT_ITERATIONS`.
"""

from config.settings import (
	DEFAULT_ITERATIONS, SALT_LENGTH, KEY_LENGTH, IV_LENGTH, AUTH_TAG_LENGTH, MIN_BLOB_LENGTH,
	DATABASE_EXTENSION, TABLE_NAME, DATABASE_PATH_ENV, LOG_LEVEL, LOG_FORMAT, BACKUP_SUFFIX,
)

__all__ = [
	'DEFAULT_ITERATIONS', 'SALT_LENGTH', 'KEY_LENGTH', 'IV_LENGTH', 'AUTH_TAG_LENGTH', 'MIN_BLOB_LENGTH',
	'DATABASE_EXTENSION', 'TABLE_NAME', 'DATABASE_PATH_ENV', 'LOG_LEVEL', 'LOG_FORMAT', 'BACKUP_SUFFIX'
]
