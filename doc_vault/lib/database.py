"""Per-bucket SQLite persistence of encrypted blobs.

Every bucket is its own database file holding a single `documents` table.
Connections are opened per operation; SQLite's file locking gives
single-writer, last-writer-wins semantics for concurrent puts.
"""
from __future__ import annotations
import logging, sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional
from config.settings import TABLE_NAME
from .configuration import Configuration
from .errors import StorageError

log = logging.getLogger(__name__)

_CREATE_TABLE = f"""
	CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
		id TEXT PRIMARY KEY,
		content TEXT NOT NULL,
		created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
		updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
	)
"""

_UPSERT = f"""
	INSERT INTO {TABLE_NAME} (id, content) VALUES (?, ?)
	ON CONFLICT(id) DO UPDATE SET content = excluded.content, updated_at = CURRENT_TIMESTAMP
"""


class BucketStore:
	"""Handle on one bucket's database. Creating it ensures the table exists."""

	def __init__(self, bucket: str, config: Configuration | None = None):
		self.bucket = bucket
		self.config = config or Configuration()
		self.path = self.config.full_database_path(bucket)
		self._create_table_if_not_exists()

	@contextmanager
	def _connect(self) -> Iterator[sqlite3.Connection]:
		conn = sqlite3.connect(self.path)
		try:
			yield conn
			conn.commit()
		except Exception:
			conn.rollback()
			raise
		finally:
			conn.close()

	def _create_table_if_not_exists(self) -> None:
		try:
			with self._connect() as db:
				db.execute(_CREATE_TABLE)
		except sqlite3.Error as e:
			log.error(f"Failed to create table for bucket {self.bucket!r}: {e}")
			raise StorageError(f"Failed to create table: {e}") from e
		log.debug(f"Bucket {self.bucket!r} ready at {self.path}")

	def put(self, document_id: str, blob: str) -> str:
		try:
			with self._connect() as db:
				db.execute(_UPSERT, (document_id, blob))
		except sqlite3.Error as e:
			log.error(f"Failed to store {document_id!r} in bucket {self.bucket!r}: {e}")
			raise StorageError(f"Failed to store document: {e}") from e
		return document_id

	def get(self, document_id: str) -> Optional[str]:
		try:
			with self._connect() as db:
				row = db.execute(f"SELECT content FROM {TABLE_NAME} WHERE id = ?", (document_id,)).fetchone()
		except sqlite3.Error as e:
			log.error(f"Failed to read {document_id!r} from bucket {self.bucket!r}: {e}")
			raise StorageError(f"Failed to retrieve document: {e}") from e
		return row[0] if row else None

	def delete(self, document_id: str) -> bool:
		try:
			with self._connect() as db:
				cur = db.execute(f"DELETE FROM {TABLE_NAME} WHERE id = ?", (document_id,))
		except sqlite3.Error as e:
			log.error(f"Failed to delete {document_id!r} from bucket {self.bucket!r}: {e}")
			raise StorageError(f"Failed to delete document: {e}") from e
		return cur.rowcount > 0

	def list_ids(self) -> List[str]:
		try:
			with self._connect() as db:
				rows = db.execute(f"SELECT id FROM {TABLE_NAME} ORDER BY id").fetchall()
		except sqlite3.Error as e:
			raise StorageError(f"Failed to list documents: {e}") from e
		return [r[0] for r in rows]

	def backup(self, dest: Path) -> Path:
		"""Copy the bucket to `dest` through SQLite's online backup API."""
		dest = Path(dest)
		dest.parent.mkdir(parents=True, exist_ok=True)
		try:
			with self._connect() as db:
				target = sqlite3.connect(dest)
				try:
					db.backup(target)
				finally:
					target.close()
		except sqlite3.Error as e:
			log.error(f"Failed to back up bucket {self.bucket!r}: {e}")
			raise StorageError(f"Failed to back up bucket: {e}") from e
		log.info(f"Bucket {self.bucket!r} backed up to {dest}")
		return dest
