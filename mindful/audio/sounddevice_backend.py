# mindful/audio/sounddevice_backend.py
import logging
import threading
from typing import List, Optional

import numpy as np
import sounddevice as sd

from mindful.audio.synth import SAMPLE_RATE, SineOscillator, chime_samples
from mindful.audio.tone_api import AudioBackend, AudioUnavailable, ToneHandle

logger = logging.getLogger(__name__)

# 50 ms per callback block
BLOCK_SIZE = int(SAMPLE_RATE * 0.05)


class _SineStream(ToneHandle):
    def __init__(self, frequency: float, gain: float, samplerate: int):
        self._osc = SineOscillator(frequency, gain, samplerate)
        self._stream: Optional[sd.OutputStream] = sd.OutputStream(
            samplerate=samplerate,
            blocksize=BLOCK_SIZE,
            channels=1,
            dtype="float32",
            callback=self._callback,
        )

    def _callback(self, outdata: np.ndarray, frames: int, time_info, status: sd.CallbackFlags):
        # runs on the PortAudio thread
        if status:
            logger.debug("Ambient stream status: %s", status)
        outdata[:, 0] = self._osc.render(frames)

    def start(self) -> None:
        self._stream.start()

    def close(self) -> None:
        stream, self._stream = self._stream, None
        if stream is None:
            return
        try:
            try:
                stream.stop()
            finally:
                stream.close()
        except sd.PortAudioError as e:
            raise AudioUnavailable(f"ambient stream did not close: {e}") from e


class _ChimeStream:
    def __init__(self, samples: np.ndarray, samplerate: int):
        self._samples = samples
        self._pos = 0
        self.done = threading.Event()
        self.stream = sd.OutputStream(
            samplerate=samplerate,
            blocksize=BLOCK_SIZE,
            channels=1,
            dtype="float32",
            callback=self._callback,
            finished_callback=self.done.set,
        )

    def _callback(self, outdata: np.ndarray, frames: int, time_info, status: sd.CallbackFlags):
        chunk = self._samples[self._pos:self._pos + frames]
        n = len(chunk)
        outdata[:n, 0] = chunk
        outdata[n:] = 0
        self._pos += n
        if self._pos >= len(self._samples):
            raise sd.CallbackStop

    def close(self) -> None:
        try:
            self.stream.abort()
        finally:
            self.stream.close()


class SoundDeviceBackend(AudioBackend):
    """
    PortAudio output through sounddevice.
    - ambient tone: one callback-driven OutputStream per handle
    - chime: its own OutputStream that stops itself at the end of the buffer;
      finished chime streams are closed on the next call and on close()
    """

    def __init__(self, samplerate: int = SAMPLE_RATE):
        self.samplerate = int(samplerate)
        self._chimes: List[_ChimeStream] = []
        try:
            sd.check_output_settings(samplerate=self.samplerate, channels=1, dtype="float32")
        except (sd.PortAudioError, ValueError) as e:
            raise AudioUnavailable(f"no usable output device: {e}") from e

    def open_tone(self, frequency: float, gain: float) -> ToneHandle:
        self._reap_chimes()
        try:
            tone = _SineStream(frequency, gain, self.samplerate)
        except sd.PortAudioError as e:
            raise AudioUnavailable(f"cannot open ambient stream: {e}") from e
        try:
            tone.start()
        except sd.PortAudioError as e:
            tone.close()
            raise AudioUnavailable(f"cannot start ambient stream: {e}") from e
        return tone

    def play_chime(self, frequency: float, start_gain: float, end_gain: float, seconds: float) -> None:
        self._reap_chimes()
        samples = chime_samples(frequency, start_gain, end_gain, seconds, self.samplerate)
        try:
            chime = _ChimeStream(samples, self.samplerate)
        except sd.PortAudioError as e:
            raise AudioUnavailable(f"cannot open chime stream: {e}") from e
        try:
            chime.stream.start()
        except sd.PortAudioError as e:
            chime.stream.close()
            raise AudioUnavailable(f"cannot play chime: {e}") from e
        self._chimes.append(chime)

    def close(self) -> None:
        chimes, self._chimes = self._chimes, []
        for chime in chimes:
            try:
                chime.close()
            except sd.PortAudioError as e:
                logger.debug("Chime stream close failed: %r", e)

    def _reap_chimes(self) -> None:
        keep = []
        for chime in self._chimes:
            if chime.done.is_set():
                try:
                    chime.close()
                except sd.PortAudioError as e:
                    logger.debug("Chime stream close failed: %r", e)
            else:
                keep.append(chime)
        self._chimes = keep
