from strings_panel.models.panel import FieldValueRequest, FormSnapshotResponse, NotificationResponse
from strings_panel.models.strings import (
    StringProperties,
    TwoPropObject,
    decode_json_string,
    encode_json_string,
    parse_model,
)

__all__ = [
    "FieldValueRequest",
    "FormSnapshotResponse",
    "NotificationResponse",
    "StringProperties",
    "TwoPropObject",
    "decode_json_string",
    "encode_json_string",
    "parse_model",
]
