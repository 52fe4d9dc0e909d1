from .response_utils import describe_error, robust_parse_text, serialize_error, to_payload

__all__ = ["describe_error", "robust_parse_text", "serialize_error", "to_payload"]
