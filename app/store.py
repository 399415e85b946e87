import json
import logging
import os
import stat
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from app.config import DEFAULT_STORAGE_PATH, INITIAL_MESSAGE
from app.errors import CorruptDataError, NotFoundError, StorageIOError, ValidationError
from app.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class Datastore(ABC):
    """What the message routes need from a storage backend."""

    @abstractmethod
    def init_data(self, path=None):
        """Prepare the backing storage, seeding it if it is missing or empty."""

    @abstractmethod
    def read(self) -> list[str]:
        """Return every stored message in insertion order."""

    @abstractmethod
    def add(self, message: str):
        """Append one message."""


def parse_file(content: bytes) -> list[str]:
    """Decode the stored document. Empty content means no messages yet."""
    if not content:
        return []
    try:
        data = json.loads(content)
    except (ValueError, UnicodeDecodeError) as exc:
        raise CorruptDataError(f"cannot decode message file: {exc}") from exc

    if not isinstance(data, dict):
        raise CorruptDataError("message file must hold a JSON object")

    messages = data.get("messages")
    if messages is None:
        return []
    if not isinstance(messages, list) or not all(isinstance(m, str) for m in messages):
        raise CorruptDataError("'messages' must be a list of strings")
    return messages


def make_json(messages: list[str]) -> bytes:
    # ascii escapes keep lone surrogates representable
    return json.dumps({"messages": messages}, separators=(",", ":")).encode("ascii")


class Storage(Datastore):
    """Message list kept as one JSON document on disk.

    Reads share a lock, appends hold it exclusively for the whole
    read-modify-write. Writes go through a temporary file that is renamed
    over the original, so a reader sees either the old list or the new one.
    There is no locking across processes.
    """

    def __init__(self, path=None):
        self.path = Path(path or DEFAULT_STORAGE_PATH)
        self._lock = ReadWriteLock()

    def init_data(self, path=None):
        with self._lock.write_lock():
            if path:
                self.path = Path(path)

            try:
                messages = self._read_file()
            except NotFoundError:
                messages = []

            if messages:
                logger.info("Using message file %s (%d messages)", self.path, len(messages))
                return

            # missing or empty: start over with the seed message
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_bytes(b"")
            except OSError as exc:
                raise StorageIOError(f"cannot create {self.path}: {exc}") from exc
            self._append(INITIAL_MESSAGE)
            logger.info("Created message file %s", self.path)

    def read(self) -> list[str]:
        with self._lock.read_lock():
            return self._read_file()

    def add(self, message: str):
        if not message:
            raise ValidationError("Empty message")
        with self._lock.write_lock():
            self._append(message)
        logger.info("Added message to %s", self.path)

    # Caller must hold the write lock.
    def _append(self, message):
        messages = self._read_file()
        messages.append(message)
        self._write_file(make_json(messages))

    def _read_file(self) -> list[str]:
        try:
            content = self.path.read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(f"message file {self.path} does not exist") from exc
        except OSError as exc:
            raise StorageIOError(f"cannot read {self.path}: {exc}") from exc
        return parse_file(content)

    def _write_file(self, content: bytes):
        directory = self.path.parent
        try:
            fd, tmp_path = tempfile.mkstemp(dir=str(directory), prefix=f".{self.path.name}.", suffix=".tmp")
        except OSError as exc:
            raise StorageIOError(f"cannot write {self.path}: {exc}") from exc

        try:
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            # mkstemp creates 0600, keep the existing file's mode
            if self.path.exists():
                os.chmod(tmp_path, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_path, self.path)
        except OSError as exc:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise StorageIOError(f"cannot write {self.path}: {exc}") from exc
