import base64, json
from pathlib import Path
import pytest
from doc_vault.lib.errors import ValidationError
from doc_vault.lib.serializer import (
	BinaryDocument, DocumentSerializer, TextDocument, deserialize, serialize, to_tempfile
)

def test_text_envelope():
	env = json.loads(serialize(TextDocument('hello')))
	assert env == {'type': 'string', 'content': 'hello'}

def test_text_roundtrip_unicode():
	doc = TextDocument('héllo wörld ✓\nline two')
	assert deserialize(serialize(doc)) == doc

def test_binary_envelope_fields():
	doc = BinaryDocument(b'\x00\x01PDF', original_filename='report.pdf', content_type='application/pdf')
	env = json.loads(serialize(doc))
	assert env['type'] == 'file'
	assert base64.b64decode(env['content']) == b'\x00\x01PDF'
	assert env['original_filename'] == 'report.pdf'
	assert env['content_type'] == 'application/pdf'
	assert env['size'] == 5
	assert 'path' not in env

def test_binary_roundtrip_with_metadata():
	doc = BinaryDocument(bytes(range(256)), original_filename='blob.bin', content_type='application/octet-stream')
	back = deserialize(serialize(doc))
	assert back == doc
	assert back.size == 256
	assert back.extension == '.bin'

def test_binary_without_metadata_stays_absent():
	doc = BinaryDocument(b'raw bytes')
	env = json.loads(serialize(doc))
	assert 'original_filename' not in env and 'content_type' not in env
	back = deserialize(serialize(doc))
	assert back.original_filename is None
	assert back.content_type is None
	assert back.extension == ''
	assert back.content == b'raw bytes'

def test_size_is_derived():
	doc = BinaryDocument(b'abc')
	assert doc.size == 3
	with pytest.raises(AttributeError):
		doc.size = 10

def test_size_mismatch_rejected():
	env = {'type': 'file', 'content': base64.b64encode(b'abc').decode(), 'size': 4}
	with pytest.raises(ValidationError, match='size mismatch'):
		deserialize(json.dumps(env).encode())

def test_missing_size_accepted():
	env = {'type': 'file', 'content': base64.b64encode(b'abc').decode()}
	assert deserialize(json.dumps(env)).content == b'abc'

def test_path_is_informational():
	env = {'type': 'file', 'content': base64.b64encode(b'x').decode(), 'path': '/tmp/x.txt', 'size': 1}
	doc = deserialize(json.dumps(env))
	assert isinstance(doc, BinaryDocument)
	assert doc.original_filename is None
	assert doc.path == '/tmp/x.txt'
	assert 'path' not in json.loads(serialize(doc))

def test_extension_falls_back_to_path():
	doc = deserialize('{"type": "file", "content": "eA==", "path": "/tmp/y.pdf"}')
	assert doc.extension == '.pdf'
	with to_tempfile(doc) as f:
		assert Path(f.name).suffix == '.pdf'
		assert f.read() == b'x'

def test_original_filename_wins_over_path():
	doc = BinaryDocument(b'x', original_filename='a.txt', path='/tmp/b.pdf')
	assert doc.extension == '.txt'

@pytest.mark.parametrize('field', ['original_filename', 'content_type'])
@pytest.mark.parametrize('value', [Path('a.pdf'), 123, ['a']])
def test_serialize_rejects_non_string_metadata(field, value):
	with pytest.raises(ValidationError, match='metadata must be a string'):
		serialize(BinaryDocument(b'x', **{field: value}))

@pytest.mark.parametrize('field', ['original_filename', 'content_type', 'path'])
def test_deserialize_rejects_non_string_metadata(field):
	env = {'type': 'file', 'content': 'eA==', field: 123}
	with pytest.raises(ValidationError, match='Invalid serialized document data'):
		deserialize(json.dumps(env))

def test_unknown_kind_rejected():
	with pytest.raises(ValidationError, match='Unknown document type: bogus'):
		deserialize(b'{"type": "bogus", "content": "x"}')

@pytest.mark.parametrize('data', [b'{not json', b'\xff\xfe', b'[1, 2]', b'"just a string"', b''])
def test_unparsable_rejected(data):
	with pytest.raises(ValidationError):
		deserialize(data)

def test_bad_base64_rejected():
	with pytest.raises(ValidationError):
		deserialize(b'{"type": "file", "content": "***"}')

@pytest.mark.parametrize('doc', [None, 'plain str', b'bytes', 123, []])
def test_serialize_unsupported(doc):
	with pytest.raises(ValidationError):
		DocumentSerializer.serialize(doc)

def test_from_path(tmp_path: Path):
	p = tmp_path / 'notes.txt'
	p.write_bytes(b'file body')
	doc = BinaryDocument.from_path(p)
	assert doc.content == b'file body'
	assert doc.original_filename == 'notes.txt'
	assert doc.content_type == 'text/plain'

def test_from_path_missing(tmp_path: Path):
	with pytest.raises(ValidationError):
		BinaryDocument.from_path(tmp_path / 'nope.txt')

def test_to_tempfile_keeps_extension():
	doc = BinaryDocument(b'PDF content', original_filename='document.pdf')
	with to_tempfile(doc) as f:
		assert Path(f.name).suffix == '.pdf'
		assert f.read() == b'PDF content'
	assert not Path(f.name).exists()

def test_to_tempfile_rejects_text():
	with pytest.raises(ValidationError):
		to_tempfile(TextDocument('x'))
