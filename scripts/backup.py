"""Back up every bucket database in a directory.

Usage (from repo root):
  python -m scripts.backup --db-path vault_data/ --dest backups/
"""
from __future__ import annotations
from datetime import datetime
from pathlib import Path
import click
from config import settings
from doc_vault.lib.configuration import Configuration
from doc_vault.lib.database import BucketStore
from doc_vault.lib.errors import DocVaultError

def backup_buckets(config: Configuration, dest: Path) -> list[Path]:
	stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
	written = []
	for db_file in sorted(config.database_path.glob(f"*{settings.DATABASE_EXTENSION}")):
		bucket = db_file.stem
		target = dest / f"{bucket}_{stamp}{settings.DATABASE_EXTENSION}{settings.BACKUP_SUFFIX}"
		written.append(BucketStore(bucket, config).backup(target))
	return written

@click.command()
@click.option('--db-path', envvar=settings.DATABASE_PATH_ENV, type=click.Path(file_okay=False, path_type=Path), default=None, help='Directory holding bucket databases.')
@click.option('--dest', type=click.Path(file_okay=False, path_type=Path), default=Path('backups'), help='Destination directory for backups.')
def main(db_path: Path | None, dest: Path):
	try:
		config = Configuration(db_path)
		dest.mkdir(parents=True, exist_ok=True)
		written = backup_buckets(config, dest)
	except DocVaultError as e:
		click.echo(f"Error: {e}")
		raise SystemExit(1)
	if not written:
		click.echo(f"No bucket databases in {config.database_path}; nothing to backup.")
		raise SystemExit(1)
	for target in written:
		click.echo(f"Backup written: {target}")

if __name__ == '__main__':  # pragma: no cover
	main()
