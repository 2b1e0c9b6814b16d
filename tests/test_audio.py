import logging
import pygame
import pytest
from catch_audio import SoundBank
from catch_symbol import ALPHABET


def test_missing_sounds_are_logged_and_skipped(tmp_path, caplog):
    bank = SoundBank(tmp_path)
    with caplog.at_level(logging.WARNING, logger="catch_audio"):
        bank.load()
    assert bank.sounds == {}
    assert set(bank.failed) == set(ALPHABET)
    assert "no sound file for A" in caplog.text


def test_play_without_unlock_is_noop(tmp_path):
    bank = SoundBank(tmp_path)
    assert bank.play("A") is False


def test_find_prefers_first_extension(tmp_path):
    (tmp_path / "B.wav").write_bytes(b"")
    (tmp_path / "B.mp3").write_bytes(b"")
    bank = SoundBank(tmp_path)
    assert bank.find("B") == tmp_path / "B.mp3"
    assert bank.find("C") is None


def test_corrupt_sound_file_is_logged_and_skipped(tmp_path, caplog):
    (tmp_path / "A.wav").write_bytes(b"not a sound file at all")
    bank = SoundBank(tmp_path)
    try:
        with caplog.at_level(logging.ERROR, logger="catch_audio"):
            if not bank.unlock():
                pytest.skip("no audio device")
        assert "A" in bank.failed
        assert "A" not in bank.sounds
        assert bank.play("A") is False
        assert "error loading" in caplog.text
    finally:
        pygame.mixer.quit()
