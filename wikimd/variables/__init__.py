from .store import VariableStore, preprocess_variables

__all__ = ["VariableStore", "preprocess_variables"]
