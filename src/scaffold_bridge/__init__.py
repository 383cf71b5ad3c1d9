"""Build-time bridge that generates FFI scaffolding for an interface file."""

from .bridge import ScaffoldingBridge, generate_scaffolding
from .config import BridgeConfig
from .directives import DirectiveWriter
from .errors import (
    ConfigurationError,
    ErrorCode,
    GenerationError,
    ScaffoldBridgeError,
    ToolInvocationError,
    ValidationError,
)
from .models import ScaffoldingRequest, ScaffoldingResult, scaffolding_filename
from .observability import StructuredLogger

__all__ = [
    "BridgeConfig",
    "ConfigurationError",
    "DirectiveWriter",
    "ErrorCode",
    "GenerationError",
    "ScaffoldBridgeError",
    "ScaffoldingBridge",
    "ScaffoldingRequest",
    "ScaffoldingResult",
    "StructuredLogger",
    "ToolInvocationError",
    "ValidationError",
    "generate_scaffolding",
    "scaffolding_filename",
]
