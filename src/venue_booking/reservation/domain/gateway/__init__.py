from .refund_gateway import RefundGateway

__all__ = ["RefundGateway"]
