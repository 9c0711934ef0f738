"""
Demo data seeding and reset
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Dict, List

from sqlalchemy.orm import Session

from app.models import Activity, Event, Group, Person, Tag, ASSOCIATION_TABLES, GROUP_KIND

logger = logging.getLogger(__name__)

TRACKED_MODELS = (Activity, Event, Person, Tag, Group)

# Children before parents; join rows cascade but are cleared explicitly first
CLEAR_ORDER = (Event, Group, Activity, Person, Tag)


def _at(days: int, hour: int) -> datetime:
    today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    return today + timedelta(days=days, hours=hour)


def has_data(db: Session) -> bool:
    """True only when every tracked table holds at least one row"""
    return all(db.query(model).first() is not None for model in TRACKED_MODELS)


def clear(db: Session) -> None:
    for table in ASSOCIATION_TABLES:
        db.execute(table.delete())
    for model in CLEAR_ORDER:
        count = db.query(model).delete(synchronize_session=False)
        logger.info("Cleared %d rows from %s", count, model.__tablename__)
    db.commit()
    db.expunge_all()


def initialize(db: Session, clear_first: bool = False) -> bool:
    """Populate the store with demo data.

    Returns False when seeding was skipped because every table already holds
    data and ``clear_first`` was not requested.
    """
    if clear_first:
        logger.info("Clearing existing data before seeding")
        clear(db)
    elif has_data(db):
        logger.info("Database already seeded, skipping")
        return False

    tag_ids = _seed_tags(db)
    person_ids = _seed_people(db)

    # Re-fetch stored instances so relationships point at tracked rows
    tags = {name: db.get(Tag, tag_id) for name, tag_id in tag_ids.items()}
    people = {name: db.get(Person, person_id) for name, person_id in person_ids.items()}

    _seed_groups(db, tags, people)
    _seed_events(db, tags, people)
    _seed_activities(db)

    logger.info("Database seeded successfully")
    return True


def _seed_tags(db: Session) -> Dict[str, uuid.UUID]:
    names = ["Outdoors", "Music", "Tech", "Food", "Community", "Sports"]
    tags = [Tag(tag_id=uuid.uuid4(), tag_name=name) for name in names]
    db.add_all(tags)
    db.commit()
    return {tag.tag_name: tag.tag_id for tag in tags}


def _seed_people(db: Session) -> Dict[str, uuid.UUID]:
    people = [
        Person(person_id=uuid.uuid4(), first_name="Ava", last_name="Johnson", age=34,
               date_of_birth=datetime(1991, 3, 14), address="12 Harbour St, Portland",
               interests="Hiking, photography"),
        Person(person_id=uuid.uuid4(), first_name="Liam", middle_name="James", last_name="Chen", age=29,
               date_of_birth=datetime(1996, 7, 2), address="88 Market St, San Francisco",
               interests="Startups, board games"),
        Person(person_id=uuid.uuid4(), first_name="Sofia", last_name="Martinez", age=41,
               date_of_birth=datetime(1984, 11, 23), address="5 Lakeview Dr, Chicago",
               interests="Running, volunteering"),
        Person(person_id=uuid.uuid4(), first_name="Noah", last_name="Okafor", age=25,
               date_of_birth=datetime(2000, 1, 9), address="301 Congress Ave, Austin",
               interests="Live music, food trucks"),
    ]
    db.add_all(people)
    db.commit()
    return {person.first_name: person.person_id for person in people}


def _seed_groups(db: Session, tags: Dict[str, Tag], people: Dict[str, Person]) -> None:
    groups = [
        Group(
            kind=GROUP_KIND,
            group_name="Trail Runners",
            group_description="Weekend runs on city and mountain trails.",
            organizers=[people["Sofia"]],
            group_tags=[tags["Outdoors"], tags["Sports"]],
        ),
        Group(
            kind=GROUP_KIND,
            group_name="Bay Area Builders",
            group_description="Engineers and founders sharing what they build.",
            organizers=[people["Liam"], people["Ava"]],
            group_tags=[tags["Tech"]],
        ),
    ]
    db.add_all(groups)
    db.commit()


def _seed_events(db: Session, tags: Dict[str, Tag], people: Dict[str, Person]) -> None:
    events = [
        Event(
            event_id=uuid.uuid4(),
            event_name="Sunrise Trail Run",
            event_description="A 10k loop with coffee at the finish line.",
            location="Forest Park, Portland",
            group_name="Portland Runners",
            group_description="Early risers who run together.",
            organizers=[people["Ava"]],
            group_tags=[tags["Outdoors"]],
            tags=[tags["Sports"], tags["Outdoors"]],
            registration=[people["Sofia"], people["Noah"]],
        ),
        Event(
            event_id=uuid.uuid4(),
            event_name="Hack Night",
            event_description="Bring a project, pair up, ship something.",
            location="SoMa Startup Hub, San Francisco",
            group_name="Hack Night Crew",
            group_description="Monthly evening of building.",
            organizers=[people["Liam"]],
            group_tags=[tags["Tech"]],
            tags=[tags["Tech"], tags["Community"]],
            registration=[people["Ava"], people["Noah"]],
        ),
        Event(
            event_id=uuid.uuid4(),
            event_name="Food Truck Friday",
            event_description="Local trucks, live music, and a long table.",
            location="Zilker Park, Austin",
            group_name="Austin Eats",
            group_description=None,
            organizers=[people["Noah"]],
            group_tags=[tags["Food"], tags["Music"]],
            tags=[tags["Food"]],
            registration=[people["Sofia"]],
        ),
    ]
    db.add_all(events)
    db.commit()


def _seed_activities(db: Session) -> None:
    activities: List[Activity] = [
        Activity(
            id=str(uuid.uuid4()),
            title="Hiking in the Alps",
            date=_at(7, 8),
            description="Join us for a breathtaking hike through the Swiss Alps. We'll meet at 8:00 AM at the Grindelwald Trailhead. Please bring water, snacks, and appropriate hiking gear. The hike will last approximately 5 hours with a lunch break at Lake Bachalpsee.",
            category="Outdoors",
            city="Interlaken",
            venue="Grindelwald Trailhead",
            latitude=46.6242,
            longitude=8.0414,
        ),
        Activity(
            id=str(uuid.uuid4()),
            title="Downtown Food Festival",
            date=_at(14, 12),
            description="Sample dishes from over 30 of Portland's best restaurants and food trucks. The festival runs from noon to 8 PM at Waterfront Park. Enjoy live music, cooking demonstrations, and a kids' play area. Entry is free, but food and drinks are available for purchase.",
            category="Food & Drink",
            city="Portland",
            venue="Waterfront Park",
            latitude=45.5152,
            longitude=-122.6784,
        ),
        Activity(
            id=str(uuid.uuid4()),
            title="Tech Innovators Meetup",
            date=_at(21, 18),
            description="Network with local tech professionals and hear talks from industry leaders at the SoMa Startup Hub. Doors open at 6:00 PM, with keynote at 7:00 PM. Complimentary pizza and drinks provided. Bring business cards for networking.",
            category="Networking",
            city="San Francisco",
            venue="SoMa Startup Hub",
            latitude=37.7786,
            longitude=-122.3893,
        ),
        Activity(
            id=str(uuid.uuid4()),
            title="Art in the Park",
            date=_at(28, 10),
            description="A day of painting, sculpture, and crafts in Zilker Park. All ages and skill levels welcome. Materials provided for the first 100 participants. Event runs from 10 AM to 4 PM. Local artists will be giving live demonstrations throughout the day.",
            category="Arts & Culture",
            city="Austin",
            venue="Zilker Park",
            latitude=30.2669,
            longitude=-97.7725,
        ),
        Activity(
            id=str(uuid.uuid4()),
            title="Charity 5K Run",
            date=_at(35, 9),
            description="Run or walk to support local children's charities. Registration opens at 8:00 AM, race starts at 9:00 AM on the Lakefront Trail. All finishers receive a medal and a free t-shirt. Water stations and first aid available along the route.",
            category="Sports",
            city="Chicago",
            venue="Lakefront Trail",
            latitude=41.8826,
            longitude=-87.6233,
        ),
        Activity(
            id=str(uuid.uuid4()),
            title="Evening Yoga at the Beach",
            date=_at(10, 18),
            description="Unwind with a relaxing yoga session at Santa Monica Beach. All levels welcome. Please bring your own mat. The session will be led by certified instructor Maya Lin and will last 75 minutes, followed by a group meditation.",
            category="Health & Wellness",
            city="Los Angeles",
            venue="Santa Monica Beach",
            latitude=34.0100,
            longitude=-118.4962,
        ),
        Activity(
            id=str(uuid.uuid4()),
            title="Board Game Night",
            date=_at(17, 19),
            description="Join us for a fun night of board games at The Game Room Café. Bring your favorite game or try something new from our collection. Snacks and drinks available for purchase. Event starts at 7:00 PM and goes until midnight.",
            category="Social",
            city="Seattle",
            venue="The Game Room Café",
            latitude=47.6097,
            longitude=-122.3331,
        ),
        Activity(
            id=str(uuid.uuid4()),
            title="Photography Walk: City Lights",
            date=_at(23, 20),
            description="Capture the beauty of the city at night with fellow photography enthusiasts. Meet at Millennium Park at 8:00 PM. Bring your camera and tripod. We'll walk through downtown and share tips on night photography.",
            category="Hobbies",
            city="Chicago",
            venue="Millennium Park",
            latitude=41.8827,
            longitude=-87.6233,
        ),
        Activity(
            id=str(uuid.uuid4()),
            title="Startup Pitch Night",
            date=_at(30, 18),
            description="Watch local startups pitch their ideas to a panel of investors at the Cambridge Innovation Center. Doors open at 6:00 PM, pitches start at 6:30 PM. Free pizza and drinks. RSVP required.",
            category="Business",
            city="Boston",
            venue="Cambridge Innovation Center",
            latitude=42.3624,
            longitude=-71.0846,
        ),
        Activity(
            id=str(uuid.uuid4()),
            title="Community Garden Volunteer Day",
            date=_at(40, 9),
            description="Help us plant, weed, and harvest at the Brooklyn Community Garden. Tools and gloves provided. Coffee and pastries served at 9:00 AM. Great opportunity to meet neighbors and learn about urban gardening.",
            category="Volunteer",
            city="New York",
            venue="Brooklyn Community Garden",
            latitude=40.6782,
            longitude=-73.9442,
        ),
    ]
    db.add_all(activities)
    db.commit()
