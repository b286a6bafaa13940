"""spec — the microvm workload schema.

This package owns the data contract between the reconciling controller and
the flintlock provisioning service:
- Pydantic models for the desired VMSpec and its nested value objects
- Batch admission validation (validate_spec, load_spec)
- VMState and the total status classifier (classify_state)
"""

from microvm.spec.models import (
    ContainerFileSource,
    Host,
    IfaceType,
    NetworkInterface,
    SSHPublicKey,
    VMSpec,
    Volume,
)
from microvm.spec.state import StateObservation, VMState, classify_state, observe_state
from microvm.spec.validation import (
    FieldViolation,
    SpecValidationError,
    ViolationRule,
    ensure_valid,
    load_spec,
    validate_host,
    validate_spec,
    validate_ssh_public_key,
)

__all__ = [
    "ContainerFileSource",
    "FieldViolation",
    "Host",
    "IfaceType",
    "NetworkInterface",
    "SSHPublicKey",
    "SpecValidationError",
    "StateObservation",
    "VMSpec",
    "VMState",
    "ViolationRule",
    "Volume",
    "classify_state",
    "ensure_valid",
    "load_spec",
    "observe_state",
    "validate_host",
    "validate_spec",
    "validate_ssh_public_key",
]
