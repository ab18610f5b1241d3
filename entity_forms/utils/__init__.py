"""Entity form utility helpers."""

from .serialization import compute_form_version, to_json_value

__all__ = ["compute_form_version", "to_json_value"]
