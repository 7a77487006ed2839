"""
Text Recognizer Interface.

The scanner never runs text recognition itself. A recognizer wraps
whatever engine produces text blocks from a captured frame and exposes
them as plain strings.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List


class TextRecognizer(ABC):
    """
    Abstract base class for text recognition engines.

    Implementations return the recognized text blocks of a frame and
    raise RecognitionError when the frame cannot be processed.
    """

    @abstractmethod
    def recognize(self, image: Any) -> List[str]:
        """
        Recognize text blocks in an image.

        Args:
            image: Frame in whatever form the engine accepts.

        Returns:
            Recognized text blocks, in reading order.

        Raises:
            RecognitionError: If recognition fails.
        """


class StaticTextRecognizer(TextRecognizer):
    """
    Recognizer that treats each frame as already-recognized text.

    A frame may be a single string or an iterable of text blocks. Used
    by the command line interface to feed text files through a session.
    """

    def recognize(self, image: Any) -> List[str]:
        if image is None:
            return []
        if isinstance(image, str):
            return [image]
        blocks: Iterable[Any] = image
        return [str(block) for block in blocks if block is not None]
