"""Storage location for bucket databases."""
from __future__ import annotations
from pathlib import Path
from config.settings import DATABASE_EXTENSION
from .errors import ConfigurationError

class Configuration:
	"""Where bucket databases are stored.

	Built explicitly and handed to whatever needs a bucket path; there is no
	process-wide instance. Defaults to the working directory at construction.
	"""

	def __init__(self, database_path: str | Path | None = None):
		self._database_path = Path.cwd()
		if database_path is not None:
			self.database_path = database_path

	@property
	def database_path(self) -> Path:
		return self._database_path

	@database_path.setter
	def database_path(self, path: str | Path | None) -> None:
		if path is None:
			raise ConfigurationError("Database path cannot be nil")
		path = Path(path).expanduser()
		if not path.is_dir():
			raise ConfigurationError("Database path must be a valid directory")
		self._database_path = path.resolve()

	def full_database_path(self, bucket: str) -> Path:
		return self._database_path / f"{bucket}{DATABASE_EXTENSION}"

	def __repr__(self) -> str:
		return f"Configuration(database_path={str(self._database_path)!r})"
