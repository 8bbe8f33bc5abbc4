"""
Session storage strategies using Strategy Pattern.
Allows switching between different key-value backends (File, In-Memory, Redis).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Optional
import json
import os
import tempfile


class SessionStorageStrategy(ABC):
    """
    Abstract base class for persisted client-side key-value storage.

    This is the Strategy Pattern interface - the session manager reads and
    writes credentials without knowing where they live.

    All methods are synchronous: a value written is visible to the very
    next read in the same process.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Get value for key.

        Args:
            key: Storage key

        Returns:
            Stored value or None if not found
        """
        pass

    @abstractmethod
    def set_items(self, items: Dict[str, str]) -> bool:
        """
        Write several keys as one unit (all of them or none).

        Args:
            items: Mapping of key to value

        Returns:
            True if every key was written, False otherwise
        """
        pass

    @abstractmethod
    def remove_items(self, keys: Iterable[str]) -> bool:
        """
        Remove keys (missing keys are ignored).

        Returns:
            True if successful
        """
        pass


class FileSessionStorage(SessionStorageStrategy):
    """
    JSON file storage, the durable default for a local client.

    The whole key space lives in one file. Writes go to a temporary file in
    the same directory and are moved into place with os.replace, so a crash
    never leaves a half-written session behind.
    """

    def __init__(self, path: str):
        """
        Initialize file storage.

        Args:
            path: Location of the JSON file (``~`` is expanded)
        """
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            print(f"⚠️  Session file unreadable, treating as empty: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".session-")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh)
                os.replace(tmp_path, self.path)
            except BaseException:
                os.unlink(tmp_path)
                raise
            return True
        except OSError as e:
            print(f"❌ Session file write error: {e}")
            return False

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_items(self, items: Dict[str, str]) -> bool:
        data = self._read()
        data.update(items)
        return self._write(data)

    def remove_items(self, keys: Iterable[str]) -> bool:
        data = self._read()
        for key in keys:
            data.pop(key, None)
        return self._write(data)


class InMemorySessionStorage(SessionStorageStrategy):
    """
    In-memory storage implementation using Python dict.

    Pros:
    - Very fast (no I/O)
    - Good for tests and throwaway sessions

    Cons:
    - Lost when the process exits
    """

    def __init__(self):
        """Initialize in-memory storage"""
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_items(self, items: Dict[str, str]) -> bool:
        self._items.update(items)
        return True

    def remove_items(self, keys: Iterable[str]) -> bool:
        for key in keys:
            self._items.pop(key, None)
        return True


class RedisSessionStorage(SessionStorageStrategy):
    """
    Redis storage implementation.

    Lets several client processes (e.g. a CLI and a background sync job)
    share one signed-in session. MSET writes all keys atomically.
    """

    def __init__(self, redis_client):
        """
        Initialize Redis storage.

        Args:
            redis_client: Redis client instance (redis.Redis)
        """
        self.redis = redis_client

    def get_item(self, key: str) -> Optional[str]:
        try:
            value = self.redis.get(key)
            return value.decode('utf-8') if value else None
        except Exception as e:
            print(f"Redis get error: {e}")
            return None

    def set_items(self, items: Dict[str, str]) -> bool:
        try:
            return bool(self.redis.mset(items))
        except Exception as e:
            print(f"Redis set error: {e}")
            return False

    def remove_items(self, keys: Iterable[str]) -> bool:
        keys = list(keys)
        if not keys:
            return True
        try:
            self.redis.delete(*keys)
            return True
        except Exception as e:
            print(f"Redis delete error: {e}")
            return False
