import threading

import pytest

from teesheet.database import SessionLocal
from teesheet.errors import BookingConflict, BookingValidationError, CapacityExceeded, SlotNotFound
from teesheet.models import TeeSlot
from teesheet.schemas.teetimes import PlayerSpec
from teesheet.services.teetimes import book_slot


def _players(*names, **fields):
    return [PlayerSpec(name=name, **fields) for name in names]


def _assert_aligned(slot):
    lengths = {
        len(slot.booked_by),
        len(slot.player_names),
        len(slot.player_types),
        len(slot.transport_modes),
        len(slot.holes_playing),
    }
    assert len(lengths) == 1
    assert lengths.pop() <= slot.max_players


def test_book_appends_players_for_member(db, slot_id):
    slot = book_slot(db, slot_id, "u1", _players("A", "B"))

    assert slot.occupancy == 2
    assert slot.booked_by == ["u1", "u1"]
    assert slot.player_names == ["A", "B"]
    assert slot.status == "partial"
    _assert_aligned(slot)


def test_blank_fields_fall_back_to_defaults(db, slot_id):
    players = [
        PlayerSpec(),
        PlayerSpec.model_validate({"name": "", "type": "", "transportMode": None, "holesPlaying": ""}),
    ]
    slot = book_slot(db, slot_id, "u1", players)

    assert slot.player_names == ["Player 1", "Player 2"]
    assert slot.player_types == ["member", "member"]
    assert slot.transport_modes == ["riding", "riding"]
    assert slot.holes_playing == ["18", "18"]


def test_guest_attributes_are_kept(db, slot_id):
    players = [
        PlayerSpec(name="Host"),
        PlayerSpec.model_validate({"name": "Guest", "type": "guest", "transportMode": "walking", "holesPlaying": 9}),
    ]
    slot = book_slot(db, slot_id, "u1", players)

    assert slot.player_types == ["member", "guest"]
    assert slot.transport_modes == ["riding", "walking"]
    assert slot.holes_playing == ["18", "9"]
    assert slot.booked_by == ["u1", "u1"]


def test_unknown_slot_is_not_found(db):
    with pytest.raises(SlotNotFound):
        book_slot(db, "missing", "u1", _players("A"))


def test_member_cannot_book_twice(db, slot_id):
    book_slot(db, slot_id, "u1", _players("A"))

    with pytest.raises(BookingConflict):
        book_slot(db, slot_id, "u1", _players("B"))

    assert db.get(TeeSlot, slot_id).booked_by == ["u1"]


def test_conflict_wins_over_capacity(db, slot_id):
    book_slot(db, slot_id, "u1", _players("A", "B", "C", "D"))

    with pytest.raises(BookingConflict):
        book_slot(db, slot_id, "u1", _players("E"))


def test_capacity_exceeded_reports_remaining_and_changes_nothing(db, slot_id):
    book_slot(db, slot_id, "u1", _players("A", "B", "C"))

    with pytest.raises(CapacityExceeded) as exc_info:
        book_slot(db, slot_id, "u2", _players("D", "E"))

    assert exc_info.value.available == 1
    assert "1 spot remaining" in exc_info.value.message
    slot = db.get(TeeSlot, slot_id)
    assert slot.booked_by == ["u1", "u1", "u1"]
    assert slot.player_names == ["A", "B", "C"]


def test_more_players_than_capacity_on_empty_slot(db, slot_id):
    with pytest.raises(CapacityExceeded) as exc_info:
        book_slot(db, slot_id, "u1", _players("A", "B", "C", "D", "E"))

    assert exc_info.value.available == 4
    assert db.get(TeeSlot, slot_id).occupancy == 0


def test_filling_the_slot_makes_it_full(db, slot_id):
    book_slot(db, slot_id, "u1", _players("A", "B"))
    slot = book_slot(db, slot_id, "u2", _players("C", "D"))

    assert slot.status == "full"
    assert slot.spots_available == 0
    assert slot.booked_by == ["u1", "u1", "u2", "u2"]

    with pytest.raises(CapacityExceeded):
        book_slot(db, slot_id, "u3", _players("E"))


@pytest.mark.parametrize("user_id,players", [
    ("", [PlayerSpec(name="A")]),
    ("u1", []),
])
def test_invalid_requests_are_rejected(db, slot_id, user_id, players):
    with pytest.raises(BookingValidationError):
        book_slot(db, slot_id, user_id, players)


def test_concurrent_bookings_never_overflow(db, slot_id):
    db.close()
    barrier = threading.Barrier(2)
    outcomes = {}

    def attempt(user_id, count):
        session = SessionLocal()
        try:
            barrier.wait()
            book_slot(session, slot_id, user_id, [PlayerSpec(name=f"{user_id}-{i}") for i in range(count)])
            outcomes[user_id] = "ok"
        except CapacityExceeded:
            outcomes[user_id] = "capacity"
        finally:
            session.close()

    threads = [
        threading.Thread(target=attempt, args=("u3", 3)),
        threading.Thread(target=attempt, args=("u2", 2)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=60)

    assert sorted(outcomes.values()) == ["capacity", "ok"]

    check = SessionLocal()
    try:
        slot = check.get(TeeSlot, slot_id)
        winner = next(user for user, result in outcomes.items() if result == "ok")
        assert slot.occupancy == (3 if winner == "u3" else 2)
        assert set(slot.booked_by) == {winner}
        _assert_aligned(slot)
    finally:
        check.close()
