from .checkout import CheckoutUseCase
from .get_purchase_history import GetPurchaseHistoryUseCase

__all__ = ["CheckoutUseCase", "GetPurchaseHistoryUseCase"]
