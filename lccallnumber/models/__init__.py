from lccallnumber.models.call_number import CallNumberField, CallNumberRecord

__all__ = ["CallNumberField", "CallNumberRecord"]
