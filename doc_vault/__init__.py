"""doc-vault: passphrase-encrypted document storage in per-bucket SQLite files.

Usage:
	from doc_vault import TextDocument, store, retrieve
	store(TextDocument("hello"), id="a", bucket="b", key="k")
	retrieve("a", bucket="b", key="k")  # TextDocument(content='hello')
"""
from doc_vault.lib.configuration import Configuration
from doc_vault.lib.errors import (
	DocVaultError, ValidationError, ConfigurationError, StorageError, EncryptionError, DocumentNotFoundError
)
from doc_vault.lib.serializer import TextDocument, BinaryDocument, Document, to_tempfile
from doc_vault.lib.vault import DocVault, store, retrieve

__version__ = "0.1.0"
__all__ = [
	"Configuration",
	"DocVault",
	"store",
	"retrieve",
	"TextDocument",
	"BinaryDocument",
	"Document",
	"to_tempfile",
	"DocVaultError",
	"ValidationError",
	"ConfigurationError",
	"StorageError",
	"EncryptionError",
	"DocumentNotFoundError",
]
