import json
from pathlib import Path

FAVORITES_FILENAME = "favorites.json"


class FavoritesStore:
    """
    Favorite session names of one user, kept in <base_dir>/<user_id>/favorites.json.
    Without a base_dir the favorites live in memory only.
    """
    def __init__(self, user_id: str, base_dir: str | Path | None = None):
        self.user_id = user_id
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self._favorites: list[str] = self._read()

    def _path(self) -> Path | None:
        if self.base_dir is None:
            return None
        return self.base_dir / self.user_id / FAVORITES_FILENAME

    def _read(self) -> list[str]:
        """
        Read favorites.json for the user.
        Returns:
            The stored session names, or an empty list if the file is missing or invalid
        """
        path = self._path()
        if path is None or not path.exists():
            return []
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            return []
        if not isinstance(data, list):
            return []
        return [str(name) for name in data]

    def _write(self) -> None:
        path = self._path()
        if path is None:
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self._favorites, indent=2), encoding="utf-8")

    def has_favorite(self, session_name: str) -> bool:
        return session_name in self._favorites

    def add_favorite(self, session_name: str) -> None:
        """
        Add a session to the favorites.
        Args:
            session_name: Name of the session
        """
        if session_name in self._favorites:
            return
        self._favorites.append(session_name)
        self._write()

    def remove_favorite(self, session_name: str) -> bool:
        """
        Remove a session from the favorites.
        Args:
            session_name: Name of the session
        Returns:
            True if the session was a favorite, False otherwise
        """
        if session_name not in self._favorites:
            return False
        self._favorites.remove(session_name)
        self._write()
        return True

    def list_favorites(self) -> list[str]:
        return list(self._favorites)
