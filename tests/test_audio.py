import logging

import pygame

from neon_arena.audio import SoundManager
from neon_arena.session import SoundEvent


def test_muted_manager_is_silent():
    sm = SoundManager(enabled=False)
    assert sm.sounds == {}
    sm.play(SoundEvent.SHOOT)
    sm.play_all(list(SoundEvent))


def test_mixer_failure_disables_audio(monkeypatch, caplog):
    def broken(*args, **kwargs):
        raise pygame.error("no audio device")

    monkeypatch.setattr(pygame.mixer, "get_init", lambda: None)
    monkeypatch.setattr(pygame.mixer, "init", broken)
    with caplog.at_level(logging.WARNING, logger="neon_arena.audio"):
        sm = SoundManager()
    assert not sm.enabled
    assert sm.sounds == {}
    assert "audio disabled" in caplog.text
    sm.play(SoundEvent.HIT)
