from dataclasses import dataclass

MUSIC_SETTINGS_KEY = "background_music"


@dataclass(frozen=True)
class MusicSettingsDTO:
    """Background music shown on every visitor page. Defaults mean 'no music'."""

    enabled: bool = False
    url: str = ""
    title: str = ""

    @classmethod
    def from_value(cls, value: dict | None) -> "MusicSettingsDTO":
        """Build from the stored JSON blob, tolerating missing or null keys."""
        value = value if isinstance(value, dict) else {}
        return cls(
            enabled=bool(value.get("enabled") or False),
            url=value.get("url") or "",
            title=value.get("title") or "",
        )

    def to_value(self) -> dict:
        return {"enabled": self.enabled, "url": self.url, "title": self.title}
