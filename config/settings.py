"""Project configuration settings.

Constants shared by the cipher, the bucket store and the CLI. The
per-instance storage location lives in `doc_vault.lib.configuration`.
"""

# Security / crypto
DEFAULT_ITERATIONS = 100_000
SALT_LENGTH = 16
KEY_LENGTH = 32  # AES-256
IV_LENGTH = 12   # GCM nonce
AUTH_TAG_LENGTH = 16  # GCM tag length
MIN_BLOB_LENGTH = SALT_LENGTH + IV_LENGTH + AUTH_TAG_LENGTH

# Storage
DATABASE_EXTENSION = ".db"
TABLE_NAME = "documents"
DATABASE_PATH_ENV = "DOC_VAULT_PATH"

# Logging
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Backup extensions
BACKUP_SUFFIX = ".backup"

__all__ = [
	'DEFAULT_ITERATIONS','SALT_LENGTH','KEY_LENGTH','IV_LENGTH','AUTH_TAG_LENGTH','MIN_BLOB_LENGTH',
	'DATABASE_EXTENSION','TABLE_NAME','DATABASE_PATH_ENV','LOG_LEVEL','LOG_FORMAT','BACKUP_SUFFIX'
]
