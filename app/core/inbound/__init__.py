"""Inbound SMS command handling."""

from .types import InboundAction, InboundKind, InboundSms
from .classifier import (
    AVAILABILITY_KEYWORDS,
    OPT_IN_KEYWORDS,
    OPT_OUT_KEYWORDS,
    InboundClassifier,
    classify_inbound,
    normalize_command,
)
from .handler import InboundHandler, InboundOutcome

__all__ = [
    # Types
    "InboundAction",
    "InboundKind",
    "InboundSms",
    # Classifier
    "AVAILABILITY_KEYWORDS",
    "OPT_IN_KEYWORDS",
    "OPT_OUT_KEYWORDS",
    "InboundClassifier",
    "classify_inbound",
    "normalize_command",
    # Handler
    "InboundHandler",
    "InboundOutcome",
]
