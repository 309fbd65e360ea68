import logging

from skillswap.core.config import Settings
from skillswap.core.security import get_password_hash
from skillswap.db.store import Database

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {
        "email": "john@example.com",
        "name": "John Doe",
        "location": "New York, NY",
        "availability": ["weekends", "evenings"],
        "skills": [
            ("React Development", "offered", "Frontend development with React and TypeScript, 5+ years experience"),
            ("Photography", "wanted", "Portrait and landscape photography basics"),
        ],
    },
    {
        "email": "sarah@example.com",
        "name": "Sarah Chen",
        "location": "San Francisco, CA",
        "availability": ["weekdays"],
        "skills": [
            ("UI/UX Design", "offered", "User interface and experience design, Figma expert"),
            ("Spanish Language", "wanted", "Conversational Spanish for beginners"),
        ],
    },
    {
        "email": "mike@example.com",
        "name": "Mike Johnson",
        "location": "Austin, TX",
        "availability": ["weekends", "mornings"],
        "skills": [
            ("Guitar Lessons", "offered", "Acoustic guitar for beginners and intermediate players"),
            ("Web Development", "wanted", "Full-stack web development with modern frameworks"),
        ],
    },
    {
        "email": "elena@example.com",
        "name": "Elena Rodriguez",
        "location": "Barcelona, Spain",
        "availability": ["evenings", "weekends"],
        "skills": [
            ("Spanish Language", "offered", "Native Spanish speaker, can teach conversational and business Spanish"),
            ("Cooking", "offered", "Traditional Spanish and Mediterranean cuisine"),
            ("Digital Marketing", "wanted", "Social media marketing and SEO strategies"),
        ],
    },
    {
        "email": "david@example.com",
        "name": "David Kim",
        "location": "Seoul, South Korea",
        "availability": ["weekdays", "evenings"],
        "skills": [
            ("Photography", "offered", "Professional photographer specializing in portraits and events"),
            ("Photo Editing", "offered", "Advanced Photoshop and Lightroom techniques"),
            ("Korean Language", "offered", "Native Korean speaker, can teach basic to intermediate Korean"),
            ("Web Development", "wanted", "Modern web development with React and Node.js"),
        ],
    },
    {
        "email": "amy@example.com",
        "name": "Amy Thompson",
        "location": "London, UK",
        "availability": ["weekdays", "weekends"],
        "skills": [
            ("Content Writing", "offered", "Professional content writer with expertise in tech and lifestyle"),
            ("Copywriting", "offered", "Marketing copy and email campaigns"),
            ("Video Editing", "wanted", "Video editing for social media and YouTube"),
        ],
    },
]


def seed_admin(db: Database, settings: Settings) -> None:
    if db.users.find_by_email(settings.ADMIN_EMAIL):
        return
    if not settings.ADMIN_PASSWORD:
        logger.warning("ADMIN_PASSWORD is not set, skipping admin account creation")
        return
    admin = db.users.create(
        email=settings.ADMIN_EMAIL.strip().lower(),
        name=settings.ADMIN_NAME,
        hashed_password=get_password_hash(settings.ADMIN_PASSWORD),
        availability=["weekdays", "weekends"],
        role="admin",
    )
    logger.info(f"Created admin account {admin.email} (id={admin.id})")


def seed_demo_data(db: Database, settings: Settings) -> None:
    if db.users.find_by_email(DEMO_USERS[0]["email"]):
        return

    hashed_password = get_password_hash(settings.DEMO_USER_PASSWORD)
    users = {}
    skills = {}
    for entry in DEMO_USERS:
        user = db.users.create(
            email=entry["email"],
            name=entry["name"],
            location=entry["location"],
            availability=entry["availability"],
            hashed_password=hashed_password,
        )
        users[entry["email"]] = user
        for name, skill_type, description in entry["skills"]:
            skills[(entry["email"], name)] = db.skills.create(
                user_id=user.id, name=name, type=skill_type, description=description, is_approved=True
            )

    offered = skills[("john@example.com", "React Development")]
    wanted = skills[("sarah@example.com", "UI/UX Design")]
    db.swap_requests.create(
        requester_id=users["john@example.com"].id,
        receiver_id=users["sarah@example.com"].id,
        offered_skill_id=offered.id,
        wanted_skill_id=wanted.id,
        offered_skill_ids=[offered.id],
        wanted_skill_ids=[wanted.id],
        status="pending",
        message="Hi! I would love to learn UI/UX design from you in exchange for React development lessons.",
    )
    logger.info(f"Seeded {len(users)} demo users and {len(skills)} skills")


def seed_database(db: Database, settings: Settings) -> None:
    seed_admin(db, settings)
    if settings.SEED_DEMO_DATA:
        seed_demo_data(db, settings)
