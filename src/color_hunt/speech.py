"""
Spoken feedback.

The game talks through a Speaker. The base class only logs, which is what the
tests and headless runs use; Pyttsx3Speaker speaks through the system voice
(install the `speech` extra).
"""
import logging
import queue
import threading
from typing import Optional

logger = logging.getLogger(__name__)

class Speaker:
    """Speaker that writes utterances to the log instead of the sound card."""

    def speak(self, text: str) -> None:
        logger.info(f"🔊 {text}")

    def close(self) -> None:
        pass

class Pyttsx3Speaker(Speaker):
    """
    Speaks through pyttsx3 on a single worker thread.

    runAndWait() blocks for the length of the utterance, so it never runs on
    the frame loop. New text cuts off whatever is being said (engine.stop())
    and only the newest pending utterance is kept, so the player always hears
    the current prompt rather than a backlog.
    """

    def __init__(self, language: str = "pl", rate: int = 175, startup_timeout_s: float = 5.0):
        try:
            import pyttsx3
        except ImportError as e:
            raise RuntimeError("pyttsx3 is not installed (pip install color-hunt[speech])") from e

        self._pyttsx3 = pyttsx3
        self.language = language
        self.rate = rate
        self._queue: "queue.Queue[Optional[str]]" = queue.Queue(maxsize=1)
        self._ready = threading.Event()
        self._error: Optional[Exception] = None
        self._engine = None
        self._speaking = threading.Event()

        self._thread = threading.Thread(target=self._run, name="color-hunt-speech", daemon=True)
        self._thread.start()
        if not self._ready.wait(startup_timeout_s):
            raise RuntimeError("Speech engine did not start in time")
        if self._error is not None:
            raise RuntimeError(f"Speech engine failed to start: {self._error}") from self._error

    def _select_voice(self, engine) -> None:
        for voice in engine.getProperty('voices'):
            languages = [
                lang.decode(errors='ignore') if isinstance(lang, bytes) else str(lang)
                for lang in (getattr(voice, 'languages', None) or [])
            ]
            haystack = " ".join(languages + [voice.id or "", voice.name or ""]).lower()
            if self.language in haystack:
                engine.setProperty('voice', voice.id)
                logger.info(f"Selected voice: {voice.name}")
                return
        logger.warning(f"No '{self.language}' voice found, using the system default")

    def _run(self) -> None:
        try:
            engine = self._pyttsx3.init()
            engine.setProperty('rate', self.rate)
            self._select_voice(engine)
            self._engine = engine
        except Exception as e:
            self._error = e
            self._ready.set()
            return
        self._ready.set()

        while True:
            text = self._queue.get()
            if text is None:
                break
            self._speaking.set()
            try:
                engine.say(text)
                engine.runAndWait()
            finally:
                self._speaking.clear()

    def _replace_pending(self, item: Optional[str]) -> None:
        try:
            self._queue.get_nowait()
        except queue.Empty:
            pass
        self._queue.put_nowait(item)

    def _interrupt(self) -> None:
        if self._speaking.is_set():
            logger.debug("Interrupting current utterance")
            self._engine.stop()

    def speak(self, text: str) -> None:
        logger.debug(f"Speaking: {text}")
        self._replace_pending(text)
        self._interrupt()

    def close(self) -> None:
        self._replace_pending(None)
        self._interrupt()
        self._thread.join(timeout=2.0)
