import logging
from datetime import time

from campus_booking import config
from campus_booking.storage.base import Storage
from campus_booking.utils.auth import get_password_hash

logger = logging.getLogger(__name__)

DEPARTMENTS = [
    {"name": "Computer Science", "code": "CS", "description": "Computer Science Department", "icon": "fas fa-desktop", "color": "blue"},
    {"name": "Chemistry", "code": "CHEM", "description": "Chemistry Department", "icon": "fas fa-flask", "color": "green"},
    {"name": "Physics", "code": "PHYS", "description": "Physics Department", "icon": "fas fa-atom", "color": "purple"},
    {"name": "Biology", "code": "BIO", "description": "Biology Department", "icon": "fas fa-dna", "color": "red"},
    {"name": "Mathematics", "code": "MATH", "description": "Mathematics Department", "icon": "fas fa-calculator", "color": "orange"},
    {"name": "General Facilities", "code": "GEN", "description": "General University Facilities", "icon": "fas fa-building", "color": "gray"},
]

RESOURCES = [
    {
        "name": "Computer Lab 1",
        "type": "computer_lab",
        "department": "CS",
        "capacity": 30,
        "equipment": ["Computers", "Projector", "Whiteboard"],
        "description": "Main computer lab with latest hardware",
        "location": "CS Building, Floor 2",
    },
    {
        "name": "Computer Lab 2",
        "type": "computer_lab",
        "department": "CS",
        "capacity": 25,
        "equipment": ["Computers", "Smart Board"],
        "description": "Secondary computer lab for programming courses",
        "location": "CS Building, Floor 3",
    },
    {
        "name": "Organic Chemistry Lab",
        "type": "chemistry_lab",
        "department": "CHEM",
        "capacity": 24,
        "equipment": ["Lab Equipment", "Fume Hood", "Safety Equipment"],
        "description": "Advanced chemistry laboratory",
        "location": "Chemistry Building, Floor 1",
        "requires_approval": True,
    },
    {
        "name": "Physics Lab A",
        "type": "physics_lab",
        "department": "PHYS",
        "capacity": 20,
        "equipment": ["Oscilloscopes", "Function Generators", "Lab Benches"],
        "description": "Electronics and circuits laboratory",
        "location": "Physics Building, Floor 2",
    },
    {
        "name": "Main Auditorium",
        "type": "auditorium",
        "department": "GEN",
        "capacity": 500,
        "equipment": ["Sound System", "Stage", "Projector", "Lighting"],
        "description": "Main university auditorium for large events",
        "location": "Main Building, Ground Floor",
        "requires_approval": True,
    },
    {
        "name": "Seminar Hall A",
        "type": "seminar_hall",
        "department": "GEN",
        "capacity": 50,
        "equipment": ["Projector", "Sound System", "Conference Table"],
        "description": "Medium-sized seminar hall",
        "location": "Academic Block, Floor 1",
    },
    {
        "name": "Basketball Court",
        "type": "sports_court",
        "department": "GEN",
        "capacity": 100,
        "equipment": ["Basketball Hoops", "Scoreboard", "Benches"],
        "description": "Indoor basketball court",
        "location": "Sports Complex",
    },
]

# Open around the clock
UNRESTRICTED_TYPES = {"sports_court", "sports_ground"}

DEMO_USER = {
    "email": "sarah.chen@university.edu",
    "password": "demo-password",
    "first_name": "Sarah",
    "last_name": "Chen",
    "role": "faculty",
    "department": "Computer Science",
    "profile_image": None,
}


def seed_storage(storage: Storage) -> bool:
    """Load reference data into an empty store. Returns False if data already exists."""
    if storage.list_departments():
        logger.debug("Store already seeded")
        return False

    department_ids = {}
    for dept in DEPARTMENTS:
        department_ids[dept["code"]] = storage.create_department(**dept).id

    for data in RESOURCES:
        data = dict(data)
        data["department_id"] = department_ids[data.pop("department")]
        if data["type"] in UNRESTRICTED_TYPES:
            data.update(has_working_hours=False, working_hours_start=time(0, 0), working_hours_end=time(23, 59))
        storage.create_resource(**data)

    user = dict(DEMO_USER)
    user["password"] = get_password_hash(user["password"])
    storage.create_user(username=config.DEMO_USERNAME, **user)

    logger.info(f"Seeded {len(DEPARTMENTS)} departments, {len(RESOURCES)} resources and user {config.DEMO_USERNAME}")
    return True
