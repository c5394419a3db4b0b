"""Parameter bundles forwarded to model derivative functions."""

from dataclasses import dataclass
from types import MappingProxyType
from collections.abc import Mapping
from typing import Any, Iterator, Optional, Type, Union

from .errors import ParameterError


@dataclass(frozen=True)
class FieldResult:
    """Outcome of reading one field from a :class:`ParameterBundle`.

    Exactly one of ``value`` (on success) or ``error`` (on failure) is
    meaningful. Use :meth:`unwrap` to get the value or raise.
    """

    name: str
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise ParameterError(self.error)
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        return self.value if self.error is None else default


class ParameterBundle(Mapping):
    """Read-only named mapping of model parameters.

    The simulator never interprets the contents; models read what they need
    with :meth:`get_field` or plain mapping access.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None, **kwargs):
        data = dict(values or {})
        data.update(kwargs)
        self._data = MappingProxyType(data)

    @classmethod
    def coerce(cls, par: Union["ParameterBundle", Mapping[str, Any], None]) -> "ParameterBundle":
        """Wrap a plain mapping (or ``None``) into a bundle."""
        if isinstance(par, ParameterBundle):
            return par
        if par is None:
            return cls()
        if not isinstance(par, Mapping):
            raise ParameterError(
                f"Parameters must be a mapping, got {type(par).__name__}"
            )
        return cls(par)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ParameterBundle({dict(self._data)!r})"

    def get_field(self, name: str, kind: Optional[Type] = None) -> FieldResult:
        """Look up ``name``, optionally checking it is an instance of ``kind``."""
        if name not in self._data:
            return FieldResult(name, error=f"Parameter bundle has no field '{name}'")
        value = self._data[name]
        if kind is not None and not isinstance(value, kind):
            return FieldResult(
                name,
                error=(
                    f"Parameter '{name}' must be {kind.__name__}, "
                    f"got {type(value).__name__}"
                ),
            )
        return FieldResult(name, value=value)

    def get_str(self, name: str) -> FieldResult:
        return self.get_field(name, str)

    def get_float(self, name: str, default: Optional[float] = None) -> float:
        """Read a numeric field as ``float``, falling back to ``default``.

        Scalars and 0-d arrays (NumPy or JAX) are accepted; strings are not.
        """
        result = self.get_field(name)
        if not result.ok:
            if default is not None:
                return float(default)
            result.unwrap()
        value = result.value
        try:
            if isinstance(value, (str, bytes)):
                raise TypeError(value)
            return float(value)
        except (TypeError, ValueError) as e:
            raise ParameterError(
                f"Parameter '{name}' must be numeric, got {type(value).__name__}"
            ) from e

    def to_dict(self) -> dict:
        return dict(self._data)
