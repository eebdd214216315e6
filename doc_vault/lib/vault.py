"""Store and retrieve pipelines.

store:    validate -> serialize -> encrypt -> BucketStore.put
retrieve: validate -> BucketStore.get -> decrypt -> deserialize

Validation runs before any database is opened, and the blob is fully built
before the bucket is touched, so a failed call leaves nothing behind.
"""
from __future__ import annotations
import logging
from typing import List, Optional
from .configuration import Configuration
from .crypto import DocumentCipher
from .database import BucketStore
from .errors import DocumentNotFoundError, ValidationError
from .serializer import BinaryDocument, Document, DocumentSerializer, TextDocument

log = logging.getLogger(__name__)


def _require_text(value, message: str) -> None:
	if not isinstance(value, str) or not value.strip():
		raise ValidationError(message)


def _validate_location(document_id, bucket) -> None:
	_require_text(document_id, 'Document ID cannot be nil or empty')
	_require_text(bucket, 'Database name cannot be nil or empty')


def _validate_key(key) -> None:
	_require_text(key, 'Encryption key cannot be nil or empty')


class DocVault:
	"""Encrypted document storage rooted at one `Configuration`."""

	def __init__(self, config: Optional[Configuration] = None, cipher: Optional[DocumentCipher] = None):
		self.config = config or Configuration()
		self.cipher = cipher or DocumentCipher()

	def bucket(self, name: str) -> BucketStore:
		return BucketStore(name, self.config)

	def store(self, document: Document, id: str, bucket: str, key: str) -> str:
		if document is None:
			raise ValidationError('Document cannot be nil')
		_validate_location(id, bucket)
		_validate_key(key)
		if not isinstance(document, (TextDocument, BinaryDocument)):
			raise ValidationError('Document must be a TextDocument or BinaryDocument')

		blob = self.cipher.encrypt(DocumentSerializer.serialize(document), key)
		stored = self.bucket(bucket).put(id, blob)
		log.info(f"Stored document {id!r} in bucket {bucket!r}")
		return stored

	def retrieve(self, id: str, bucket: str, key: str) -> Document:
		_validate_location(id, bucket)
		_validate_key(key)

		blob = self.bucket(bucket).get(id)
		if blob is None:
			log.info(f"Document {id!r} not found in bucket {bucket!r}")
			raise DocumentNotFoundError(id)
		document = DocumentSerializer.deserialize(self.cipher.decrypt(blob, key))
		log.info(f"Retrieved document {id!r} from bucket {bucket!r}")
		return document

	def delete(self, id: str, bucket: str) -> bool:
		_validate_location(id, bucket)
		removed = self.bucket(bucket).delete(id)
		if removed:
			log.info(f"Deleted document {id!r} from bucket {bucket!r}")
		return removed

	def list_ids(self, bucket: str) -> List[str]:
		_require_text(bucket, 'Database name cannot be nil or empty')
		return self.bucket(bucket).list_ids()


def store(document: Document, id: str, bucket: str, key: str, config: Optional[Configuration] = None) -> str:
	return DocVault(config).store(document, id=id, bucket=bucket, key=key)


def retrieve(id: str, bucket: str, key: str, config: Optional[Configuration] = None) -> Document:
	return DocVault(config).retrieve(id, bucket=bucket, key=key)
