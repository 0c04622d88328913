from abc import ABC, abstractmethod

from venue_booking.reservation.domain.entity import Reservation
from venue_booking.reservation.domain.enum import RefundStatus, ReservationStatus
from venue_booking.reservation.domain.value_object import ReservationId


class ReservationRepository(ABC):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """新規予約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus | None = None,
        expected_refund_status: RefundStatus | None = None,
    ) -> None:
        """予約を更新する

        expected_status / expected_refund_status を指定した場合、
        保存済みの値が一致するときだけ書き込む。
        一致しなければ OptimisticLockException を送出する。
        """
        raise NotImplementedError
