"""
Parameter Plumbing.

Most request parts accept free-form engine options on top of their required
arguments (`boost`, `minimum_should_match`, `order`, `size`, ...). The
`ParametersMixin` stores them in insertion order and merges them into the
rendered body.
"""

from typing import Any, Dict, Optional


class ParametersMixin:
    """
    Adds an ordered bag of scalar or structured options to a request part.

    Parameters are merged at the level of the body the owning class renders;
    a parameter with the same name as a generated key overrides it
    (last write wins).
    """

    def _init_parameters(self, parameters: Optional[Dict[str, Any]] = None):
        self._parameters: Dict[str, Any] = dict(parameters or {})

    def add_parameter(self, name: str, value: Any):
        """
        Sets a parameter, replacing any previous value stored under `name`.

        Returns:
            The instance itself for method chaining.
        """
        self._parameters[name] = value
        return self

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def get_parameter(self, name: str, default: Any = None) -> Any:
        return self._parameters.get(name, default)

    def get_parameters(self) -> Dict[str, Any]:
        """Returns a copy of all parameters in insertion order."""
        return dict(self._parameters)

    def set_parameters(self, parameters: Dict[str, Any]):
        """Replaces all parameters at once."""
        self._parameters = dict(parameters)
        return self

    def remove_parameter(self, name: str):
        self._parameters.pop(name, None)
        return self

    def _process_dict(self, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        # Parameters are merged last so they can refine generated keys
        return {**(body or {}), **self._parameters}
