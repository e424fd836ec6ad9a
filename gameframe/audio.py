"""WAV loading and bookkeeping of playing sounds."""

from __future__ import annotations

import os
import struct
import time
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import BinaryIO, Callable, Dict, List, Mapping, Optional, Protocol, Tuple, Union

_CHUNK_HEADER = struct.Struct("<4si")
_WAVE_FORMAT = struct.Struct("<HHIIHHH")
_SKIPPED_CHUNKS = (b"bext", b"junk", b"JUNK", b"LIST")

DEFAULT_SOUND_DIR = "Resource/Sound/SE"


class WavFormatError(ValueError):
    """The file is not a WAV file this loader understands."""


@dataclass(frozen=True)
class WaveFormat:
    """Waveform description from a ``fmt `` chunk."""

    format_tag: int = 0
    channels: int = 0
    samples_per_sec: int = 0
    avg_bytes_per_sec: int = 0
    block_align: int = 0
    bits_per_sample: int = 0
    cb_size: int = 0


@dataclass
class SoundData:
    """Format and raw sample bytes of a loaded sound."""

    format: WaveFormat = field(default_factory=WaveFormat)
    buffer: bytes = b""

    @property
    def buffer_size(self) -> int:
        """Number of sample bytes."""
        return len(self.buffer)


class Voice(Protocol):
    """A playback voice for one sound instance."""

    def submit(self, data: SoundData, loop: bool) -> None: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def flush(self) -> None: ...

    def buffers_queued(self) -> int: ...


class TimedVoice:
    """A voice that plays silently, finishing after the sound's duration.

    The duration is the buffer size divided by the average byte rate; a
    looping voice never finishes. Stopping pauses; flushing drops the buffer.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._duration = 0.0
        self._loop = False
        self._queued = False
        self._started_at: Optional[float] = None
        self._played = 0.0

    def submit(self, data: SoundData, loop: bool) -> None:
        rate = data.format.avg_bytes_per_sec
        self._duration = data.buffer_size / rate if rate else 0.0
        self._loop = bool(loop)
        self._queued = True
        self._played = 0.0

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        if self._started_at is not None:
            self._played += self._clock() - self._started_at
            self._started_at = None

    def flush(self) -> None:
        self._queued = False
        self._played = 0.0

    def buffers_queued(self) -> int:
        if not self._queued:
            return 0
        if self._loop:
            return 1
        elapsed = self._played
        if self._started_at is not None:
            elapsed += self._clock() - self._started_at
        return 0 if elapsed >= self._duration else 1


@dataclass(eq=False)
class SoundInstance:
    """One playback of a sound."""

    voice: Voice
    sound_data: SoundData
    loop: bool = False


@dataclass
class SoundObject:
    """A registered sound and its live instances."""

    data: SoundData
    instances: List[SoundInstance] = field(default_factory=list)


def _read_exact(file: BinaryIO, size: int) -> bytes:
    data = file.read(size)
    if len(data) != size:
        raise WavFormatError("unexpected end of file")
    return data


def _read_chunk_header(file: BinaryIO) -> Tuple[bytes, int]:
    chunk_id, size = _CHUNK_HEADER.unpack(_read_exact(file, _CHUNK_HEADER.size))
    return chunk_id, size


def load_wav_file(path: Union[str, os.PathLike]) -> SoundData:
    """Read a RIFF/WAVE file into :class:`SoundData`.

    One each of ``bext``, ``junk``, ``JUNK`` and ``LIST`` chunks, in that
    order, may stand between the format chunk and the data chunk.
    """
    with open(path, "rb") as file:
        riff_id, _ = _read_chunk_header(file)
        riff_type = _read_exact(file, 4)
        if riff_id != b"RIFF":
            raise WavFormatError("missing RIFF header")
        if riff_type != b"WAVE":
            raise WavFormatError("RIFF file is not WAVE")

        fmt_id, fmt_size = _read_chunk_header(file)
        if fmt_id != b"fmt ":
            raise WavFormatError("missing fmt chunk")
        if not 0 <= fmt_size <= _WAVE_FORMAT.size:
            raise WavFormatError(f"fmt chunk of {fmt_size} bytes is not supported")
        raw_format = _read_exact(file, fmt_size).ljust(_WAVE_FORMAT.size, b"\0")
        wave_format = WaveFormat(*_WAVE_FORMAT.unpack(raw_format))

        chunk_id, size = _read_chunk_header(file)
        for skipped in _SKIPPED_CHUNKS:
            if chunk_id == skipped:
                if size < 0:
                    raise WavFormatError(f"negative size in {skipped!r} chunk")
                file.seek(size, os.SEEK_CUR)
                chunk_id, size = _read_chunk_header(file)
        if chunk_id != b"data":
            raise WavFormatError("missing data chunk")
        if size < 0:
            raise WavFormatError("negative data chunk size")
        buffer = _read_exact(file, size)

    return SoundData(format=wave_format, buffer=buffer)


class Audio:
    """Registry of named sounds and their playing instances."""

    def __init__(
        self,
        sound_dir: Union[str, os.PathLike] = DEFAULT_SOUND_DIR,
        voice_factory: Optional[Callable[[], Voice]] = None,
    ) -> None:
        self.sound_dir = Path(sound_dir)
        self._voice_factory: Callable[[], Voice] = voice_factory or TimedVoice
        self._sounds: Dict[str, SoundObject] = {}

    @property
    def sounds(self) -> Mapping[str, SoundObject]:
        """Read-only map of sound name to its registration."""
        return MappingProxyType(self._sounds)

    def sound_load(self, sound_name: str, file_name: str) -> None:
        """Load ``file_name`` from the sound directory as ``sound_name``.

        A name that is already registered is left as it is.
        """
        if sound_name in self._sounds:
            return
        self._sounds[sound_name] = SoundObject(load_wav_file(self.sound_dir / file_name))

    def start_sound(self, sound_name: str, is_loop: bool = False) -> Optional[SoundInstance]:
        """Start a new instance of ``sound_name``; None if it is not registered."""
        sound = self._sounds.get(sound_name)
        if sound is None:
            return None
        instance = SoundInstance(self._voice_factory(), sound.data, bool(is_loop))
        instance.voice.submit(instance.sound_data, instance.loop)
        instance.voice.start()
        sound.instances.append(instance)
        return instance

    def stop_sound(self, sound_name: str) -> None:
        """Stop every instance of ``sound_name`` and drop their buffers."""
        sound = self._sounds.get(sound_name)
        if sound is None:
            return
        for instance in sound.instances:
            instance.voice.stop()
            instance.voice.flush()

    def sound_unload(self, sound_name: str) -> None:
        """Release the sample data of ``sound_name``; the name stays registered."""
        sound = self._sounds.get(sound_name)
        if sound is None:
            return
        sound.data.buffer = b""
        sound.data.format = WaveFormat()

    def is_played(self, instance: SoundInstance) -> bool:
        """Whether ``instance`` still has audio queued."""
        return instance.voice.buffers_queued() != 0

    def update(self) -> None:
        """Forget instances that have finished playing."""
        for sound in self._sounds.values():
            sound.instances[:] = [i for i in sound.instances if self.is_played(i)]

    def finalize(self) -> None:
        """Stop everything, release all sample data and forget every sound."""
        for name, sound in self._sounds.items():
            for instance in sound.instances:
                instance.voice.stop()
            sound.instances.clear()
            self.sound_unload(name)
        self._sounds.clear()