from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

_ALIASES = {
    "attributesKey": "attributes_key",
    "cdataKey": "cdata_key",
    "valueKey": "value_key",
    "formatOutput": "format_output",
    "useNamespaces": "use_namespaces",
    "forceOneElementArray": "force_one_element_array",
}

_STRING_FIELDS = ("version", "encoding", "attributes_key", "cdata_key", "value_key")
_BOOL_FIELDS = ("format_output", "use_namespaces", "force_one_element_array")


@dataclass(frozen=True)
class Config:
    """Options shared by the encoder and the decoder."""

    version: str = "1.0"
    encoding: str = "UTF-8"
    attributes_key: str = "@attributes"
    cdata_key: str = "@cdata"
    value_key: str = "@value"
    format_output: bool = False
    use_namespaces: bool = False
    force_one_element_array: bool = False

    def __post_init__(self) -> None:
        for name in _STRING_FIELDS:
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be str")
        for name in _BOOL_FIELDS:
            object.__setattr__(self, name, bool(getattr(self, name)))

    @classmethod
    def _resolve(cls, overrides: Mapping[str, Any]) -> Dict[str, Any]:
        if not isinstance(overrides, Mapping):
            raise TypeError("overrides must be a mapping")
        known = {item.name for item in fields(cls)}
        values = {}
        for key, value in overrides.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise TypeError(f"unknown option: {key}")
            values[name] = value
        return values

    @classmethod
    def from_dict(cls, overrides: Optional[Mapping[str, Any]] = None) -> "Config":
        """Merge sparse overrides over the defaults.

        Keys may be field names (``value_key``) or option names (``valueKey``).
        """

        if overrides is None:
            return cls()
        return cls(**cls._resolve(overrides))

    @classmethod
    def coerce(cls, config: Union["Config", Mapping[str, Any], None] = None) -> "Config":
        if isinstance(config, Config):
            return config
        return cls.from_dict(config)

    def merged(self, overrides: Mapping[str, Any]) -> "Config":
        """Return a copy with overrides applied on top of this config."""

        if not overrides:
            return self
        return replace(self, **self._resolve(overrides))


__all__ = ["Config"]
