"""Loading and validation of JVMChaos documents."""

from jvmchaos.config.loader import load_chaos_documents
from jvmchaos.config.validator import ValidationError, validate_chaos

__all__ = ["load_chaos_documents", "ValidationError", "validate_chaos"]
