"""
Scanner Session Module.

This module connects a text recognizer to the classifier and reports
found values to a delegate. Frames are throttled: after a frame has
been recognized the session cools down and drops further frames until
a timer tick (or the configured interval) returns it to idle.

States:
    IDLE         ready to accept a frame
    CAPTURING    a frame is being recognized
    COOLING_DOWN frames are dropped until the cool-down expires

Usage:
    session = ScannerSession(recognizer, delegate)
    session.start()
    session.submit(frame)
"""

import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, List, Optional

from ocrscanner.config import get_config
from ocrscanner.extraction import Classifier, ExtractionKind, ExtractionResult, get_classifier
from ocrscanner.utils.exceptions import RecognitionError
from ocrscanner.utils.logger import get_logger
from .recognizer import TextRecognizer

# Initialize module logger
logger = get_logger(__name__)


class SessionState(Enum):
    """Frame throttle state of a scanner session."""

    IDLE = "idle"
    CAPTURING = "capturing"
    COOLING_DOWN = "cooling_down"


class ScannerDelegate(ABC):
    """Receives the values a scanner session recognizes."""

    @abstractmethod
    def did_recognize_ocr_number(self, ocr_number: str) -> None:
        """Called with each valid reference number."""

    @abstractmethod
    def did_recognize_giro_number(self, giro_number: str) -> None:
        """Called with each giro account number."""

    @abstractmethod
    def did_recognize_amount(self, amount: float) -> None:
        """Called with each valid amount."""


class ScannerSession:
    """
    Throttled recognize-classify-dispatch loop for captured frames.

    A session is meant to be driven by a single capture thread.

    Attributes:
        recognizer: Engine turning frames into text blocks
        delegate: Receiver of recognized values, may be None
        cooldown_seconds: Minimum time between two recognized frames
        state: Current SessionState

    Example:
        >>> session = ScannerSession(StaticTextRecognizer(), delegate)
        >>> session.start()
        >>> session.submit(["Att betala", "100 00 8"])
        [ExtractionResult(amount='100,00', amount=100.0, valid=True)]
    """

    def __init__(
        self,
        recognizer: TextRecognizer,
        delegate: Optional[ScannerDelegate] = None,
        classifier: Optional[Classifier] = None,
        cooldown_seconds: Optional[float] = None,
        block_separator: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic
    ) -> None:
        """
        Initialize the session.

        Args:
            recognizer: Text recognition engine.
            delegate: Receiver of recognized values.
            classifier: Classifier to use, defaults to the shared one.
            cooldown_seconds: Cool-down after a recognized frame.
                Defaults to configuration.
            block_separator: Separator used to join text blocks.
                Defaults to configuration.
            clock: Monotonic time source in seconds.
        """
        self.recognizer = recognizer
        self.delegate = delegate
        self.classifier = classifier or get_classifier()
        self.cooldown_seconds = float(
            cooldown_seconds if cooldown_seconds is not None
            else get_config("scanner.cooldown_seconds", 1.0)
        )
        self.block_separator = (
            block_separator if block_separator is not None
            else get_config("scanner.block_separator", " ")
        )
        self._clock = clock
        self._cooldown_started: Optional[float] = None
        self.state = SessionState.IDLE
        self.is_running = False

    def start(self) -> None:
        """Start accepting frames."""
        self.is_running = True
        self.state = SessionState.IDLE
        self._cooldown_started = None
        logger.info(f"Scanner session started (cool-down {self.cooldown_seconds}s)")

    def stop(self) -> None:
        """Stop accepting frames."""
        self.is_running = False
        self.state = SessionState.IDLE
        self._cooldown_started = None
        logger.info("Scanner session stopped")

    def tick(self) -> None:
        """Timer callback: end the cool-down and accept the next frame."""
        if self.state is SessionState.COOLING_DOWN:
            self.state = SessionState.IDLE
            self._cooldown_started = None

    def accepts_frames(self) -> bool:
        """Whether the next submitted frame would be recognized."""
        if not self.is_running:
            return False
        if (
            self.state is SessionState.COOLING_DOWN
            and self._clock() - self._cooldown_started >= self.cooldown_seconds
        ):
            self.tick()
        return self.state is SessionState.IDLE

    def submit(self, image: Any) -> List[ExtractionResult]:
        """
        Recognize, classify and dispatch one frame.

        Frames arriving while the session is stopped, capturing or
        cooling down are dropped. Recognition failures are logged and
        ignored.

        Args:
            image: Frame passed to the recognizer.

        Returns:
            Results dispatched to the delegate (empty if the frame was
            dropped or nothing was found).
        """
        if not self.accepts_frames():
            logger.debug(f"Frame dropped (state: {self.state.value})")
            return []

        self.state = SessionState.CAPTURING
        try:
            blocks = self.recognizer.recognize(image)
        except RecognitionError as e:
            logger.warning(f"Recognition failed, frame ignored: {e}")
            return []
        finally:
            self.state = SessionState.COOLING_DOWN
            self._cooldown_started = self._clock()

        return self.analyze_text(self.block_separator.join(blocks))

    def analyze_text(self, text: str) -> List[ExtractionResult]:
        """
        Classify recognized text and notify the delegate.

        Valid references and amounts are reported, giro account numbers
        always are.

        Args:
            text: Recognized text of one frame.

        Returns:
            Results that were dispatched.
        """
        dispatched = []

        for result in self.classifier.classify(text):
            if result.kind is ExtractionKind.REFERENCE and result.is_valid:
                logger.info(f"Found OCR number: {result.formatted_value}")
                if self.delegate:
                    self.delegate.did_recognize_ocr_number(result.formatted_value)

            elif result.kind is ExtractionKind.AMOUNT and result.is_valid:
                logger.info(f"Found amount: {result.amount}")
                if self.delegate:
                    self.delegate.did_recognize_amount(result.amount)

            elif result.kind is ExtractionKind.GIRO_ACCOUNT:
                logger.info(f"Found giro number: {result.formatted_value}")
                if self.delegate:
                    self.delegate.did_recognize_giro_number(result.formatted_value)

            else:
                logger.debug(f"Ignored {result!r}")
                continue

            dispatched.append(result)

        return dispatched
