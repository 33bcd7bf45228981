from pydantic import BaseModel

from src.music.dtos import MusicSettingsDTO


class MusicSettingsResponse(BaseModel):
    enabled: bool
    url: str
    title: str

    @classmethod
    def from_dto(cls, music: MusicSettingsDTO) -> "MusicSettingsResponse":
        return cls(enabled=music.enabled, url=music.url, title=music.title)
