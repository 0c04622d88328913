from .reservation_state_machine import ReservationStateMachine

__all__ = ["ReservationStateMachine"]
