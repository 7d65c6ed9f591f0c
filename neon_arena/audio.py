from __future__ import annotations

import logging
import math
import struct
from typing import Dict, Iterable

import pygame

from neon_arena import config
from neon_arena.session import SoundEvent

log = logging.getLogger(__name__)


class SoundManager:
    """Fire-and-forget effects, synthesised so no asset files are needed.

    If the mixer can't start (no audio device, ``--mute``) every call is a
    no-op.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.sounds: Dict[SoundEvent, pygame.mixer.Sound] = {}
        if not enabled:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(config.SAMPLE_RATE, -16, 1, 512)
            for event in SoundEvent:
                freq, duration, amp = config.SOUND_TONES[event.value]
                sound = self._tone(freq, duration, amp)
                sound.set_volume(config.MASTER_VOLUME)
                self.sounds[event] = sound
        except pygame.error as exc:
            log.warning("audio disabled: %s", exc)
            self.enabled = False
            self.sounds.clear()

    def _tone(self, freq_hz: float, duration: float, amp: float) -> pygame.mixer.Sound:
        rate, _, channels = pygame.mixer.get_init()
        n = int(rate * duration)
        fade = max(1, int(0.01 * rate))
        buf = bytearray()
        for i in range(n):
            sample = math.sin(2 * math.pi * freq_hz * i / rate)
            if i < fade:
                sample *= i / fade
            if i > n - fade:
                sample *= max(0.0, (n - i) / fade)
            buf += struct.pack("<h", int(sample * amp * 32767)) * channels
        return pygame.mixer.Sound(buffer=bytes(buf))

    def play(self, event: SoundEvent) -> None:
        if self.enabled and event in self.sounds:
            self.sounds[event].play()

    def play_all(self, events: Iterable[SoundEvent]) -> None:
        for event in events:
            self.play(event)
