from __future__ import annotations

from typing import Dict

from collabmate import models
from collabmate.core.security import hash_password
from collabmate.db import Base, SessionLocal, engine
from collabmate.services import application_service, project_service, skill_swap_service

DEMO_USERS = [
    {"email": "alice@example.com", "full_name": "Alice Demo", "bio": "Backend developer, plays guitar"},
    {"email": "bob@example.com", "full_name": "Bob Demo", "bio": "Designer, learning to code"},
    {"email": "carol@example.com", "full_name": "Carol Demo", "bio": "Pianist and data analyst"},
]


def _get_or_create_user(db, data: dict) -> models.User:
    user = db.query(models.User).filter(models.User.email == data["email"]).first()
    if user:
        return user

    user = models.User(
        email=data["email"],
        full_name=data["full_name"],
        bio=data["bio"],
        hashed_password=hash_password("demo"),
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def seed_users(db) -> Dict[str, models.User]:
    return {data["email"].split("@")[0]: _get_or_create_user(db, data) for data in DEMO_USERS}


def seed_project_with_application(db, users: Dict[str, models.User]) -> None:
    if db.query(models.Project).filter(models.Project.title == "Community garden app").first():
        print("Demo project already exists, skipping.")
        return

    project = project_service.create_project(
        db,
        creator_id=users["alice"].id,
        title="Community garden app",
        description="Plot booking and watering schedule for the neighbourhood garden.",
        required_skills="python, ui design",
    )
    application_service.submit_application(db, project.id, users["bob"].id, "I can help with the UI")


def seed_skill_swap(db, users: Dict[str, models.User]) -> None:
    if db.query(models.SkillSwap).first():
        print("Demo skill swaps already exist, skipping.")
        return

    outcome = skill_swap_service.propose_swap(
        db,
        users["alice"].id,
        users["carol"].id,
        offered_skill="guitar",
        requested_skill="piano",
        message="Weekly lessons on Saturdays?",
    )
    skill_swap_service.post_message(db, outcome.entity.id, users["carol"].id, "Sounds good, let's try it")


def seed_demo_data() -> None:
    db = SessionLocal()
    try:
        Base.metadata.create_all(bind=engine)

        users = seed_users(db)
        seed_project_with_application(db, users)
        seed_skill_swap(db, users)

        print("Demo data seeded successfully.")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_demo_data()
