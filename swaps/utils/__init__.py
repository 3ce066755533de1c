from swaps.utils.address import safe_to_checksum_address, to_lower_case_compare

__all__ = ["safe_to_checksum_address", "to_lower_case_compare"]
