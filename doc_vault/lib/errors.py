"""Exception hierarchy shared by the cipher, codec, store and pipelines."""
from __future__ import annotations


class DocVaultError(Exception):
	"""Base class for every failure surfaced by doc_vault."""


class ValidationError(DocVaultError):
	"""Malformed or missing caller input, or a malformed serialized document."""


class ConfigurationError(ValidationError):
	pass


class StorageError(DocVaultError):
	"""Bucket database failure other than a missing document."""


class EncryptionError(DocVaultError):
	"""Cipher failure: bad blob encoding, short blob, wrong key or tampering."""


class DocumentNotFoundError(DocVaultError):
	def __init__(self, document_id: str):
		self.document_id = document_id
		super().__init__(f"Document with id '{document_id}' not found")
