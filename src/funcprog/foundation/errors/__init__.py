"""Fault handling for funcprog.

- ErrorCode: Classification of misuse faults and captured exceptions
- Fault: Frozen Pydantic model describing a fault
- FaultException: RuntimeError carrying a Fault
- classify_exception: Map arbitrary exceptions to ErrorCode
"""

from .errors import ErrorCode, Fault, FaultException, classify_exception

__all__ = ["ErrorCode", "Fault", "FaultException", "classify_exception"]
