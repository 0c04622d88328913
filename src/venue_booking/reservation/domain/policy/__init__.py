from .refund_policy import RefundPolicy, compute_refund

__all__ = ["RefundPolicy", "compute_refund"]
