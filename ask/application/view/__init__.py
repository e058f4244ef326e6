"""Client view state."""

from .board import QuestionBoard
from .sequencer import FetchSequencer
from .thread import QuestionThread

__all__ = ["FetchSequencer", "QuestionBoard", "QuestionThread"]
