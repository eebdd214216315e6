"""CLI commands implemented with click.

The passphrase is always prompted with hidden input (or passed with --key)
and is never echoed or logged.
"""
from __future__ import annotations
import logging, click
from pathlib import Path
from config.settings import DATABASE_PATH_ENV, LOG_FORMAT, LOG_LEVEL
from doc_vault.lib.configuration import Configuration
from doc_vault.lib.errors import DocVaultError, ValidationError
from doc_vault.lib.serializer import BinaryDocument, TextDocument
from doc_vault.lib.vault import DocVault

def _fail(e: Exception | str):
	click.echo(f'Error: {e}')
	raise SystemExit(1)

@click.group()
@click.option('--db-path', envvar=DATABASE_PATH_ENV, type=click.Path(path_type=Path), default=None,
	help=f'Directory holding bucket databases (default: cwd, or ${DATABASE_PATH_ENV}).')
@click.option('-v', '--verbose', is_flag=True, help='Log pipeline activity.')
@click.pass_context
def cli(ctx, db_path, verbose):
	"""doc-vault: encrypted document buckets"""
	logging.basicConfig(level=logging.INFO if verbose else LOG_LEVEL, format=LOG_FORMAT)
	try:
		ctx.obj = DocVault(Configuration(db_path))
	except DocVaultError as e:
		_fail(e)

@cli.command()
@click.argument('document_id')
@click.option('--bucket', required=True, help='Bucket (database) name.')
@click.option('--text', default=None, help='Store this text.')
@click.option('--file', 'file_path', type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None, help='Store this file.')
@click.option('--content-type', default=None, help='Content type for --file (guessed when omitted).')
@click.option('--key', prompt=True, hide_input=True, confirmation_prompt=True)
@click.pass_obj
def store(vault: DocVault, document_id, bucket, text, file_path, content_type, key):
	"""Encrypt a text or file and store it under DOCUMENT_ID."""
	try:
		if (text is None) == (file_path is None):
			raise ValidationError('Pass exactly one of --text or --file')
		if text is not None:
			document = TextDocument(text)
		else:
			document = BinaryDocument.from_path(file_path, content_type=content_type)
		vault.store(document, id=document_id, bucket=bucket, key=key)
		click.echo(f'Stored {document_id}.')
	except DocVaultError as e:
		_fail(e)

@cli.command()
@click.argument('document_id')
@click.option('--bucket', required=True, help='Bucket (database) name.')
@click.option('--output', type=click.Path(dir_okay=False, path_type=Path), default=None,
	help='Where to write a file document (default: its original filename).')
@click.option('--force', is_flag=True, help='Overwrite the output file if it exists.')
@click.option('--key', prompt=True, hide_input=True)
@click.pass_obj
def retrieve(vault: DocVault, document_id, bucket, output, force, key):
	"""Decrypt DOCUMENT_ID; print text, or write a file document to disk."""
	try:
		document = vault.retrieve(document_id, bucket=bucket, key=key)
	except DocVaultError as e:
		_fail(e)
	if isinstance(document, TextDocument):
		click.echo(document.content)
		return
	target = output or Path(Path(document.original_filename).name if document.original_filename else document_id)
	if target.exists() and not force:
		_fail(f'{target} already exists (use --force to overwrite)')
	try:
		target.write_bytes(document.content)
	except OSError as e:
		_fail(e)
	meta = f' [{document.content_type}]' if document.content_type else ''
	click.echo(f'Wrote {document.size} bytes to {target}{meta}')

@cli.command('list')
@click.option('--bucket', required=True, help='Bucket (database) name.')
@click.pass_obj
def list_documents(vault: DocVault, bucket):
	"""List document ids in a bucket."""
	try:
		ids = vault.list_ids(bucket)
	except DocVaultError as e:
		_fail(e)
	if not ids:
		click.echo('No documents.')
	for document_id in ids:
		click.echo(document_id)

@cli.command()
@click.argument('document_id')
@click.option('--bucket', required=True, help='Bucket (database) name.')
@click.pass_obj
def delete(vault: DocVault, document_id, bucket):
	"""Remove DOCUMENT_ID from a bucket."""
	try:
		removed = vault.delete(document_id, bucket=bucket)
	except DocVaultError as e:
		_fail(e)
	click.echo(f'Deleted {document_id}.' if removed else 'Not found')
