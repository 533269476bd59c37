"""Shared test data and small lookups."""

THREE_QUESTION_PASSAGE = {
    "title": "Test Passage",
    "category": "Humanities",
    "difficulty": "Medium",
    "estimated_time": 540,
    "content": "A short passage used by the tests.",
    "questions": [
        {
            "question_number": n,
            "question_text": f"Question {n}?",
            "choices": [
                {
                    "letter": letter,
                    "text": f"Choice {letter} for question {n}",
                    # B is correct for every question
                    "is_correct": letter == "B",
                    "explanation": f"Explanation for {letter}",
                }
                # inserted out of order; reads must sort by letter
                for letter in ("D", "A", "C", "B")
            ],
        }
        # inserted out of order; reads must sort by number
        for n in (3, 1, 2)
    ],
}


def correct_choice(question):
    return next(c for c in question.choices if c.is_correct)


def wrong_choice(question):
    return next(c for c in question.choices if not c.is_correct)
