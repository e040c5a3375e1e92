"""
Operations Module - The catalog of generation operations.

- inputs.py: validated input models, one per operation
- registry.py: OperationName, OperationSpec and the operation_registry

Import from the submodules directly; the prompt builders depend on
``inputs`` and the registry depends on the prompt builders.
"""
