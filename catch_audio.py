
"""Per-letter sound bank on pygame.mixer"""
import logging
from pathlib import Path
from typing import Dict, Optional
import pygame
from catch_symbol import ALPHABET

log = logging.getLogger(__name__)

EXTENSIONS = (".mp3", ".ogg", ".wav")

class SoundBank:
    """Letter sounds loaded from `<sound_dir>/<LETTER>.<ext>`.

    The mixer is opened lazily by `unlock()` (first start press). Any letter
    whose file is missing or fails to decode is logged and skipped; `play()`
    for it is a no-op.
    """
    def __init__(self, sound_dir):
        self.sound_dir = Path(sound_dir)
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.enabled = False
        self.failed: Dict[str, str] = {}

    def find(self, letter: str) -> Optional[Path]:
        for ext in EXTENSIONS:
            p = self.sound_dir / f"{letter}{ext}"
            if p.is_file(): return p
        return None

    def unlock(self) -> bool:
        if self.enabled: return True
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            log.error("audio initialization failed: %s", e)
            return False
        self.enabled = True
        self.load()
        log.info("audio ready: %d/%d letter sounds", len(self.sounds), len(ALPHABET))
        return True

    def load(self):
        for letter in ALPHABET:
            if letter in self.sounds: continue
            path = self.find(letter)
            if path is None:
                self.failed[letter] = "missing"
                log.warning("no sound file for %s in %s", letter, self.sound_dir)
                continue
            try:
                self.sounds[letter] = pygame.mixer.Sound(str(path))
            except (pygame.error, OSError) as e:
                self.failed[letter] = str(e)
                log.error("error loading %s: %s", path, e)

    def play(self, letter: str) -> bool:
        snd = self.sounds.get(letter)
        if not self.enabled or snd is None:
            return False
        try:
            snd.play()
        except pygame.error as e:
            log.error("error playing sound %s: %s", letter, e)
            return False
        return True
