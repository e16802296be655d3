"""Operations modules for the GoFetch API."""

from gofetch.operations.delivery_operations import DeliveryOperations

__all__ = ["DeliveryOperations"]
