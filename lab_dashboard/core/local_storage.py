"""
Local persistent key-value storage
One JSON document per key, kept under a data directory
"""
import json
import logging
import os
import re
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r'^[A-Za-z0-9_\-]+$')


class LocalStorage:
    """JSON-file backed key-value store"""

    def __init__(self, directory):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key):
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f'{key}.json'

    def get_item(self, key):
        """Return the decoded value for key, or None when unset

        A corrupt document raises json.JSONDecodeError.
        """
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def set_item(self, key, value):
        """Serialize value and store it under key

        Each write goes to its own temp file and is swapped in with
        os.replace, so readers see either the old or the new document.
        """
        path = self._path(key)
        with tempfile.NamedTemporaryFile(
            'w', encoding='utf-8', dir=self.directory,
            prefix=f'.{key}.', suffix='.tmp', delete=False,
        ) as f:
            tmp_path = f.name
            try:
                json.dump(value, f, ensure_ascii=False, indent=2)
            except (TypeError, ValueError):
                f.close()
                os.unlink(tmp_path)
                raise
        os.replace(tmp_path, path)

    def remove_item(self, key):
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.info(f"Removed local storage key {key}")

    def keys(self):
        return sorted(p.stem for p in self.directory.glob('*.json'))
