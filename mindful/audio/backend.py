import logging

from mindful.audio.tone_api import AudioBackend, AudioUnavailable, SilentBackend

logger = logging.getLogger(__name__)


def open_backend() -> AudioBackend:
    """sounddevice output if the host has it, otherwise a silent backend."""
    try:
        # importing sounddevice raises OSError when the PortAudio library is missing
        from mindful.audio.sounddevice_backend import SoundDeviceBackend
        return SoundDeviceBackend()
    except (OSError, AudioUnavailable) as e:
        logger.warning("Audio disabled, timer will run silently: %s", e)
        return SilentBackend()
