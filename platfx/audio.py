"""Sound bookkeeping: loading clips and tracking playback state and volume."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class PlaySoundParams:
    """How a sound is played."""

    looped: bool = False
    volume: float = 1.0


@dataclass(frozen=True)
class Sound:
    """Handle of a loaded sound."""

    id: int


@dataclass
class _Clip:
    data: bytes
    params: PlaySoundParams = PlaySoundParams()
    playing: bool = False


class AudioContext:
    """Holds loaded sounds and their playback state."""

    def __init__(self) -> None:
        self._clips: dict[int, _Clip] = {}
        self._next_id = 0

    def _clip(self, sound: Sound) -> _Clip:
        try:
            return self._clips[sound.id]
        except KeyError:
            raise KeyError(f"unknown sound {sound.id}") from None

    def load_sound_from_bytes(self, data: bytes) -> Sound:
        """Register audio data and return its handle."""
        sound = Sound(self._next_id)
        self._clips[sound.id] = _Clip(bytes(data))
        self._next_id += 1
        return sound

    def load_sound(self, path: Union[str, Path]) -> Sound:
        """Read an audio file and register it."""
        return self.load_sound_from_bytes(Path(path).read_bytes())

    def play_sound_once(self, sound: Sound) -> None:
        """Play once at full volume."""
        self.play_sound(sound, PlaySoundParams(looped=False, volume=1.0))

    def play_sound(self, sound: Sound, params: PlaySoundParams) -> None:
        clip = self._clip(sound)
        clip.params = params
        clip.playing = True

    def stop_sound(self, sound: Sound) -> None:
        self._clip(sound).playing = False

    def set_sound_volume(self, sound: Sound, volume: float) -> None:
        clip = self._clip(sound)
        clip.params = replace(clip.params, volume=volume)

    def state(self, sound: Sound) -> Optional[PlaySoundParams]:
        """Current playback parameters, or None when the sound is not playing."""
        clip = self._clip(sound)
        return clip.params if clip.playing else None