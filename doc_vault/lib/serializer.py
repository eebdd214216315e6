"""Document model and the JSON envelope that gets encrypted.

Envelope shapes:

	{"type": "string", "content": "<text>"}
	{"type": "file", "content": "<base64>", "original_filename": "a.pdf",
	 "content_type": "application/pdf", "size": 1234}

Metadata keys are only written when they have a value, and a missing key
comes back as None rather than a default.
"""
from __future__ import annotations
import base64, binascii, json, mimetypes, tempfile
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Any, Dict, Optional, Union
from .errors import ValidationError

STRING_TYPE = 'string'
FILE_TYPE = 'file'


@dataclass
class TextDocument:
	content: str


@dataclass
class BinaryDocument:
	content: bytes
	original_filename: Optional[str] = None
	content_type: Optional[str] = None
	# only set by deserialize from an envelope's informational `path`; never serialized
	path: Optional[str] = None

	@property
	def size(self) -> int:
		return len(self.content)

	@property
	def extension(self) -> str:
		name = self.original_filename or self.path
		if not name:
			return ''
		return PurePath(name).suffix

	@classmethod
	def from_path(cls, path: Union[str, Path], content_type: Optional[str] = None) -> 'BinaryDocument':
		path = Path(path)
		if not path.is_file(): raise ValidationError(f"File not found: {path}")
		if content_type is None:
			content_type, _ = mimetypes.guess_type(path.name)
		return cls(content=path.read_bytes(), original_filename=path.name, content_type=content_type)


Document = Union[TextDocument, BinaryDocument]


def _check_metadata(*values) -> None:
	for value in values:
		if value is not None and not isinstance(value, str):
			raise ValidationError('Document metadata must be a string')


class DocumentSerializer:
	@staticmethod
	def serialize(document: Document) -> bytes:
		if isinstance(document, TextDocument):
			if not isinstance(document.content, str):
				raise ValidationError('Text document content must be a string')
			envelope: Dict[str, Any] = {'type': STRING_TYPE, 'content': document.content}
		elif isinstance(document, BinaryDocument):
			if not isinstance(document.content, (bytes, bytearray)):
				raise ValidationError('Binary document content must be bytes')
			_check_metadata(document.original_filename, document.content_type)
			envelope = {'type': FILE_TYPE, 'content': base64.b64encode(document.content).decode('ascii')}
			if document.original_filename is not None:
				envelope['original_filename'] = document.original_filename
			if document.content_type is not None:
				envelope['content_type'] = document.content_type
			envelope['size'] = document.size
		else:
			raise ValidationError('Document must be a TextDocument or BinaryDocument')
		return json.dumps(envelope).encode('utf-8')

	@classmethod
	def deserialize(cls, data: Union[bytes, str]) -> Document:
		try:
			if isinstance(data, (bytes, bytearray)):
				data = data.decode('utf-8')
			parsed = json.loads(data)
		except (UnicodeDecodeError, json.JSONDecodeError, TypeError) as e:
			raise ValidationError('Invalid serialized document data') from e
		if not isinstance(parsed, dict):
			raise ValidationError('Invalid serialized document data')

		kind = parsed.get('type')
		if kind == STRING_TYPE:
			content = parsed.get('content')
			if not isinstance(content, str):
				raise ValidationError('Invalid serialized document data')
			return TextDocument(content)
		if kind == FILE_TYPE:
			return cls._deserialize_file(parsed)
		raise ValidationError(f"Unknown document type: {kind}")

	@staticmethod
	def _deserialize_file(parsed: Dict[str, Any]) -> BinaryDocument:
		encoded = parsed.get('content')
		if not isinstance(encoded, str):
			raise ValidationError('Invalid serialized document data')
		try:
			raw = base64.b64decode(encoded, validate=True)
		except (binascii.Error, ValueError) as e:
			raise ValidationError('Invalid serialized document data') from e

		size = parsed.get('size')
		if size is not None and (isinstance(size, bool) or size != len(raw)):
			raise ValidationError(f"Document size mismatch: envelope says {size}, content is {len(raw)} bytes")

		filename = parsed.get('original_filename')
		content_type = parsed.get('content_type')
		path = parsed.get('path')
		try:
			_check_metadata(filename, content_type, path)
		except ValidationError as e:
			raise ValidationError('Invalid serialized document data') from e
		return BinaryDocument(raw, original_filename=filename, content_type=content_type, path=path)


def serialize(document: Document) -> bytes:
	return DocumentSerializer.serialize(document)


def deserialize(data: Union[bytes, str]) -> Document:
	return DocumentSerializer.deserialize(data)


def to_tempfile(document: BinaryDocument):
	"""Write a binary document to a named temp file, keeping its extension.

	The file is returned open and rewound; it is removed when closed.
	"""
	if not isinstance(document, BinaryDocument):
		raise ValidationError('Only binary documents can be written to a file')
	handle = tempfile.NamedTemporaryFile(prefix='doc_vault', suffix=document.extension)
	handle.write(document.content)
	handle.flush()
	handle.seek(0)
	return handle
