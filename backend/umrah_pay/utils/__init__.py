from umrah_pay.utils.validators import validate_upi_id, generate_receipt, build_upi_deep_link

__all__ = ["validate_upi_id", "generate_receipt", "build_upi_deep_link"]
