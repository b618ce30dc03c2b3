#!/usr/bin/env python3
"""
Seed the database with demo users, projects and timesheets.

Every demo user can log in with DEMO_PASSWORD.
"""

import random
import sys
from datetime import date, timedelta
import logging
from dotenv import load_dotenv
from sqlalchemy.orm import Session

import model  # noqa: F401
from db.database import Base, SessionLocal, engine
from model.Project_model import Project, ProjectStatus
from model.timesheet_model import Timesheet
from model.usermodels import Gender, User
from repository.project_repository import ProjectRepository
from utils.hashing import password_hasher

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"
USER_COUNT = 10
PROJECT_COUNT = 15

FIRST_NAMES = ["Ava", "Liam", "Maya", "Noah", "Zara", "Omar", "Iris", "Leo", "Nina", "Ravi", "Elena", "Tom"]
LAST_NAMES = ["Patel", "Garcia", "Okafor", "Nguyen", "Schmidt", "Rossi", "Kim", "Silva", "Cohen", "Brown"]
DEPARTMENTS = ["Engineering", "Marketing", "Finance", "Operations", "Design", "Sales"]
PROJECT_WORDS = ["Apollo", "Beacon", "Cascade", "Delta", "Ember", "Falcon", "Granite", "Harbor", "Orbit", "Summit"]
TASKS = [
    "Review pull requests",
    "Write release notes",
    "Plan the next sprint",
    "Fix reported bugs",
    "Meet with stakeholders",
    "Update the documentation",
    "Prepare the demo",
]


def seed_users(db: Session) -> list[User]:
    """Create demo users sharing one hashed password"""
    hashed = password_hasher.hash(DEMO_PASSWORD)
    users = []
    for i in range(USER_COUNT):
        first_name = random.choice(FIRST_NAMES)
        last_name = random.choice(LAST_NAMES)
        users.append(User(
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date(1970, 1, 1) + timedelta(days=random.randint(0, 365 * 35)),
            gender=random.choice(list(Gender)),
            email=f"{first_name.lower()}.{last_name.lower()}{i}@example.com",
            password=hashed,
        ))
    db.add_all(users)
    db.commit()
    logger.info(f"Created {len(users)} users")
    return users


def seed_projects(db: Session, users: list[User]) -> list[Project]:
    """Create projects and assign 2 to 5 random users to each"""
    repository = ProjectRepository(db)
    projects = []
    for _ in range(PROJECT_COUNT):
        start_date = date.today() - timedelta(days=random.randint(30, 365))
        end_date = start_date + timedelta(days=random.randint(30, 365)) if random.random() < 0.7 else None
        project = Project(
            name=" ".join(random.sample(PROJECT_WORDS, 3)),
            department=random.choice(DEPARTMENTS),
            start_date=start_date,
            end_date=end_date,
            status=random.choice(list(ProjectStatus)),
        )
        db.add(project)
        db.commit()
        members = random.sample(users, random.randint(2, min(5, len(users))))
        projects.append(repository.assign_users(project, members))
    logger.info(f"Created {len(projects)} projects")
    return projects


def seed_timesheets(db: Session, users: list[User], projects: list[Project]) -> int:
    """Create 5 to 10 timesheets per user against that user's projects"""
    count = 0
    for user in users:
        # Users on no project still log time against a random one
        user_projects = list(user.projects) or [random.choice(projects)]
        for _ in range(random.randint(5, 10)):
            db.add(Timesheet(
                user_id=user.id,
                project_id=random.choice(user_projects).id,
                task_name=random.choice(TASKS),
                date=date.today() - timedelta(days=random.randint(1, 90)),
                hours=round(random.uniform(0.5, 8.0), 2),
            ))
            count += 1
    db.commit()
    logger.info(f"Created {count} timesheets")
    return count


def seed() -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        users = seed_users(db)
        projects = seed_projects(db, users)
        seed_timesheets(db, users, projects)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    try:
        seed()
    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)
        sys.exit(1)
    logger.info(f"Seeding completed. Demo users log in with password '{DEMO_PASSWORD}'")
