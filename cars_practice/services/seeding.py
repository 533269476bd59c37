"""Load sample passages into an empty database."""
import json
from pathlib import Path

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cars_practice.core.config import DATA_DIR
from cars_practice.models.passage import AnswerChoice, Difficulty, Passage, Question

SEED_FILE = DATA_DIR / "passages.json"


class SeedDataError(ValueError):
    pass


def load_seed_passages(path: Path = SEED_FILE) -> list[dict]:
    """Read and check seed data; every question needs exactly one correct choice."""
    with path.open(encoding="utf-8") as fh:
        passages = json.load(fh)

    for p in passages:
        Difficulty(p["difficulty"])  # raises ValueError on unknown level
        numbers = [q["question_number"] for q in p["questions"]]
        if len(numbers) != len(set(numbers)):
            raise SeedDataError(f"Duplicate question numbers in passage {p['title']!r}")
        for q in p["questions"]:
            correct = sum(1 for c in q["choices"] if c["is_correct"])
            if correct != 1:
                raise SeedDataError(
                    f"Question {q['question_number']} of {p['title']!r} has {correct} correct choices"
                )
    return passages


def build_passage(data: dict) -> Passage:
    return Passage(
        title=data["title"],
        content=data["content"],
        category=data["category"],
        difficulty=Difficulty(data["difficulty"]),
        estimated_time=data["estimated_time"],
        questions=[
            Question(
                question_number=q["question_number"],
                question_text=q["question_text"],
                choices=[
                    AnswerChoice(
                        choice_letter=c["letter"],
                        choice_text=c["text"],
                        is_correct=c["is_correct"],
                        explanation=c["explanation"],
                    )
                    for c in q["choices"]
                ],
            )
            for q in data["questions"]
        ],
    )


async def seed_passages(db: AsyncSession, path: Path = SEED_FILE) -> int:
    """Insert seed passages if the table is empty. Returns how many were created."""
    existing = await db.scalar(select(func.count(Passage.id)))
    if existing:
        logger.debug("Passages already present ({}), skipping seed", existing)
        return 0

    passages = load_seed_passages(path)
    db.add_all([build_passage(p) for p in passages])
    await db.commit()

    logger.info("Seeded {} passages", len(passages))
    return len(passages)
