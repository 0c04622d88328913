from venue_booking.reservation.applications._loader import load_reservation
from venue_booking.reservation.domain.entity import Reservation
from venue_booking.reservation.domain.enum import RefundStatus
from venue_booking.reservation.domain.gateway import RefundGateway
from venue_booking.reservation.domain.repository import ReservationRepository
from venue_booking.reservation.domain.value_object import ReservationId
from venue_booking.shared.domain.exception import OptimisticLockException
from venue_booking.shared.utils.logger import get_logger

logger = get_logger("reservation")


class RefundReservationService:
    """キャンセル確定後の返金ワークフロー

    返金の実行は RefundGateway に任せ、ここでは返金ステータスだけを進める。
    予約ステータスは変更しない。
    """

    def __init__(
        self, repository: ReservationRepository, gateway: RefundGateway
    ) -> None:
        self._repository = repository
        self._gateway = gateway

    def start(self, reservation_id: ReservationId) -> Reservation:
        """返金を依頼して PROCESSING に進める

        PENDING 以外・完了済み決済がない場合は何もしない。
        ゲートウェイを呼ぶ前に PENDING -> PROCESSING の条件付き書き込みで返金を確保し、
        確保に負けた呼び出しはゲートウェイを呼ばない。
        ゲートウェイが失敗した場合は FAILED を記録する。
        """
        reservation = load_reservation(self._repository, reservation_id)
        if reservation.refund_status != RefundStatus.PENDING:
            return reservation
        if not reservation.has_completed_payment:
            logger.info(
                "No completed payment to refund",
                extra={"reservation_id": str(reservation_id)},
            )
            return reservation

        reservation.advance_refund(RefundStatus.PROCESSING)
        try:
            self._repository.update(
                reservation, expected_refund_status=RefundStatus.PENDING
            )
        except OptimisticLockException:
            logger.info(
                "Refund already claimed by another invocation",
                extra={"reservation_id": str(reservation_id)},
            )
            return load_reservation(self._repository, reservation_id)

        try:
            refund_id = self._gateway.request_refund(
                reservation, reservation.refund_amount
            )
        except Exception:
            logger.exception(
                "Refund request failed",
                extra={"reservation_id": str(reservation_id)},
            )
            reservation.advance_refund(RefundStatus.FAILED)
            self._repository.update(
                reservation, expected_refund_status=RefundStatus.PROCESSING
            )
            return reservation

        logger.info(
            "Refund requested",
            extra={"reservation_id": str(reservation_id), "refund_id": refund_id},
        )
        return reservation

    def resolve(self, reservation_id: ReservationId, succeeded: bool) -> Reservation:
        """ゲートウェイの結果を受けて COMPLETED / FAILED を記録する

        同じ結果の再通知は書き込まずにそのまま返す。
        """
        reservation = load_reservation(self._repository, reservation_id)
        target = RefundStatus.COMPLETED if succeeded else RefundStatus.FAILED
        if reservation.refund_status == target:
            return reservation

        previous = reservation.refund_status
        reservation.advance_refund(target)
        self._repository.update(reservation, expected_refund_status=previous)
        return reservation
