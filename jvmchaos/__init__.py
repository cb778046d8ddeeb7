"""JVMChaos - parameter validation for JVM chaos experiments."""

__version__ = "0.1.0"
