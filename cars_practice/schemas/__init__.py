from cars_practice.schemas.auth import AuthOutSchema, LoginSchema, MeOutSchema, SignupSchema, UserOutSchema
from cars_practice.schemas.passage import (
    ChoiceSchema,
    PassageDetailSchema,
    PassageListOutSchema,
    PassageOutSchema,
    PassageSummarySchema,
    QuestionSchema,
    QuestionWithChoicesSchema,
)
from cars_practice.schemas.progress import ProgressOutSchema, ProgressSchema
from cars_practice.schemas.session import (
    AnswerOutSchema,
    AnswerSubmitSchema,
    AnsweredQuestionResult,
    QuestionResult,
    SessionAnswerSchema,
    SessionCompleteOutSchema,
    SessionCompleteSchema,
    SessionCreateSchema,
    SessionDetailOutSchema,
    SessionResultsOutSchema,
    SessionSchema,
    SessionStartOutSchema,
    UnansweredQuestionResult,
)

__all__ = [
    "AuthOutSchema",
    "LoginSchema",
    "MeOutSchema",
    "SignupSchema",
    "UserOutSchema",
    "ChoiceSchema",
    "PassageDetailSchema",
    "PassageListOutSchema",
    "PassageOutSchema",
    "PassageSummarySchema",
    "QuestionSchema",
    "QuestionWithChoicesSchema",
    "ProgressOutSchema",
    "ProgressSchema",
    "AnswerOutSchema",
    "AnswerSubmitSchema",
    "AnsweredQuestionResult",
    "QuestionResult",
    "SessionAnswerSchema",
    "SessionCompleteOutSchema",
    "SessionCompleteSchema",
    "SessionCreateSchema",
    "SessionDetailOutSchema",
    "SessionResultsOutSchema",
    "SessionSchema",
    "SessionStartOutSchema",
    "UnansweredQuestionResult",
]
