from .lifecycle_payloads import AdminAlert, PaymentEventPayload, ReservationEventPayload

__all__ = ["AdminAlert", "PaymentEventPayload", "ReservationEventPayload"]
