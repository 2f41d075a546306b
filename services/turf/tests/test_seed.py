from app.core.database import SessionLocal, verify_database_connection
from app.seed import PEAK_TIME_SLOTS, demo_time_slots, seed_demo_data


def test_demo_time_slots_cover_opening_hours():
    slots = demo_time_slots()

    assert len(slots) == 30
    assert slots[0] == "10:00"
    assert slots[-2:] == ["00:00", "00:30"]
    assert set(PEAK_TIME_SLOTS) <= set(slots)


def test_seeding_twice_is_a_no_op(client):
    with SessionLocal() as session:
        assert seed_demo_data(session) is False


def test_database_connection_check_passes(client):
    verify_database_connection()
