from cars_practice.models.user import User
from cars_practice.models.passage import AnswerChoice, Difficulty, Passage, Question
from cars_practice.models.practice_session import PracticeSession, SessionAnswer
from cars_practice.models.progress import UserProgress

__all__ = [
    "User",
    "Passage",
    "Question",
    "AnswerChoice",
    "Difficulty",
    "PracticeSession",
    "SessionAnswer",
    "UserProgress",
]
