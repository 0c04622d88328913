import pytest

from venue_booking.reservation.domain.enum import ReservationStatus
from venue_booking.reservation.domain.event import ReservationStatusChanged
from venue_booking.reservation.domain.service import ReservationStateMachine
from venue_booking.shared.domain.exception import (
    AlreadyCancelledException,
    CannotCancelCompletedException,
    InvalidTransitionException,
)

S = ReservationStatus

LEGAL = [
    (S.PENDING, S.CONFIRMED),
    (S.PENDING, S.CANCELLED),
    (S.CONFIRMED, S.CHECKED_IN),
    (S.CONFIRMED, S.CANCELLED),
    (S.CHECKED_IN, S.CHECKED_OUT),
    (S.CHECKED_IN, S.NO_SHOW),
]


@pytest.fixture
def state_machine(clock):
    return ReservationStateMachine(clock=clock)


class TestReservationStateMachine:
    @pytest.mark.parametrize("current, target", LEGAL)
    def test_legal_transitions(self, state_machine, create_reservation, current, target):
        reservation = create_reservation(status=current)

        result = state_machine.apply_transition(reservation, target)

        assert result is reservation
        assert reservation.status == target

    @pytest.mark.parametrize(
        "current, target",
        [
            (current, target)
            for current in S
            for target in S
            if (current, target) not in LEGAL and current != S.CANCELLED
        ],
    )
    def test_illegal_transitions_raise(
        self, state_machine, create_reservation, current, target
    ):
        reservation = create_reservation(status=current)

        with pytest.raises(InvalidTransitionException):
            state_machine.validate_transition(reservation, target)
        assert reservation.status == current

    def test_cancelling_cancelled_reservation_raises_already_cancelled(
        self, state_machine, create_reservation
    ):
        reservation = create_reservation(status=S.CANCELLED)

        with pytest.raises(AlreadyCancelledException) as exc_info:
            state_machine.apply_transition(reservation, S.CANCELLED)

        assert exc_info.value.reservation is reservation
        assert exc_info.value.code == "ALREADY_CANCELLED"

    def test_cancelling_checked_out_reservation_raises_cannot_cancel_completed(
        self, state_machine, create_reservation
    ):
        reservation = create_reservation(status=S.CHECKED_OUT)

        with pytest.raises(CannotCancelCompletedException):
            state_machine.apply_transition(reservation, S.CANCELLED)

    def test_specific_errors_are_invalid_transitions(self):
        assert issubclass(AlreadyCancelledException, InvalidTransitionException)
        assert issubclass(CannotCancelCompletedException, InvalidTransitionException)

    @pytest.mark.parametrize("status", [S.CHECKED_OUT, S.CANCELLED, S.NO_SHOW])
    def test_terminal_states(self, state_machine, status):
        assert state_machine.is_terminal(status)
        assert state_machine.allowed_targets(status) == frozenset()

    def test_non_terminal_state(self, state_machine):
        assert not state_machine.is_terminal(S.PENDING)
        assert state_machine.allowed_targets(S.PENDING) == {S.CONFIRMED, S.CANCELLED}

    def test_transition_records_domain_event(self, state_machine, create_reservation, now):
        reservation = create_reservation(status=S.PENDING)

        state_machine.apply_transition(reservation, S.CONFIRMED)

        events = reservation.flush_domain_events()
        assert events == [
            ReservationStatusChanged(
                reservation_id=reservation.id,
                from_status=S.PENDING,
                to_status=S.CONFIRMED,
                occurred_at=now,
            )
        ]
        assert reservation.flush_domain_events() == []
