from __future__ import annotations


def bool_prop(key: str, *, default: bool) -> property:
    def _get(self) -> bool:
        try:
            return bool(self._settings.get(key, default))
        except Exception:
            return bool(default)

    def _set(self, value: bool) -> None:
        self._settings[key] = bool(value)
        self._save()

    return property(_get, _set)


def int_prop(key: str, *, default: int, min_v: int | None = None, max_v: int | None = None) -> property:
    def _get(self) -> int:
        try:
            v = int(self._settings.get(key, default) or 0)
        except Exception:
            v = int(default)
        if min_v is not None:
            v = max(int(min_v), v)
        if max_v is not None:
            v = min(int(max_v), v)
        return v

    def _set(self, value: int) -> None:
        try:
            v = int(value)
        except Exception:
            v = int(default)
        if min_v is not None:
            v = max(int(min_v), v)
        if max_v is not None:
            v = min(int(max_v), v)
        self._settings[key] = v
        self._save()

    return property(_get, _set)


def str_prop(key: str, *, default: str) -> property:
    def _get(self) -> str:
        v = self._settings.get(key, default)
        if v is None:
            return str(default)
        return str(v).strip()

    def _set(self, value: str | None) -> None:
        self._settings[key] = str(value or "").strip()
        self._save()

    return property(_get, _set)
