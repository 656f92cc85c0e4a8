"""Layered property store with typed lookups."""
import logging
import re
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, TypeVar

from gconfig.exceptions.config import ConfigParseError
from gconfig.parser import PropertyLayer
from gconfig.substitutor import EnvSubstitutor


logger = logging.getLogger(__name__)

T = TypeVar("T")

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")

# Same spellings strconv.ParseBool-style parsers accept
TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(value: str) -> int:
    if not INT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    return int(value)


def parse_float(value: str) -> float:
    """Decimal or exponent notation only; no underscores, nan or infinity."""
    if not FLOAT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid float: {value!r}")
    return float(value)


def parse_bool(value: str) -> bool:
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean: {value!r}")


class ConfigStore:
    """Default layer plus an optional profile layer, resolved per key.

    The profile layer wins for any key it defines, as long as its source
    name contains the active profile. Values are kept as raw strings and
    parsed on lookup.

    Typed getters never raise by default: unparsable values come back as
    the type's zero value and unset environment variables expand to "".
    With ``strict=True`` they raise ConfigParseError / EnvVarNotFoundError
    instead. Use ``exists()`` to tell a missing key from an empty one.

    Example:
        store = ConfigStore(profile="dev", default_layer=base, profile_layer=dev)
        port = store.get_int("server.port")
    """

    def __init__(
        self,
        profile: str = "",
        default_layer: Optional[PropertyLayer] = None,
        profile_layer: Optional[PropertyLayer] = None,
        strict: bool = False,
        environ: Optional[Mapping[str, str]] = None,
        source_path: Optional[Path] = None,
    ):
        self.profile = profile.lower()
        self.default_layer = default_layer
        self.profile_layer = profile_layer
        self.strict = strict
        self.source_path = source_path
        self.substitutor = EnvSubstitutor(environ=environ, strict=strict)

    def __repr__(self) -> str:
        return (
            f"ConfigStore(profile={self.profile!r}, "
            f"default={self._layer_name(self.default_layer)}, "
            f"profile_layer={self._layer_name(self.profile_layer)})"
        )

    @staticmethod
    def _layer_name(layer: Optional[PropertyLayer]) -> Optional[str]:
        return layer.source_name if layer is not None else None

    def _profile_layer_active(self) -> bool:
        return self.profile_layer is not None and self.profile in self.profile_layer.source_name

    def is_empty(self) -> bool:
        """True when no layer holds a single entry."""
        return all(layer is None or len(layer) == 0 for layer in (self.default_layer, self.profile_layer))

    def get_value(self, key: str) -> Optional[str]:
        """Resolve the raw value for a key across both layers.

        Returns:
            Raw (unexpanded) value, or None if neither layer has the key
        """
        value = self.default_layer.get(key) if self.default_layer is not None else None

        if self._profile_layer_active():
            override = self.profile_layer.get(key)
            if override is not None:
                value = override

        return value

    def exists(self, key: str) -> bool:
        return self.get_value(key) is not None

    def keys(self) -> List[str]:
        """Sorted effective key set."""
        keys = set(self.default_layer.keys()) if self.default_layer is not None else set()
        if self._profile_layer_active():
            keys.update(self.profile_layer.keys())
        return sorted(keys)

    def as_dict(self) -> Dict[str, str]:
        """Effective raw values for every key, profile overrides applied."""
        return {key: self.get_value(key) for key in self.keys()}

    def get_string(self, key: str) -> str:
        """Resolved value, with a whole-value ``${VAR}`` placeholder expanded.

        A missing key yields "".
        """
        value = self.get_value(key)
        if value is None:
            return ""
        return self.substitutor.expand(value)

    def get_string_or_default(self, key: str, default: str = "") -> str:
        """Like get_string, but returns ``default`` when the key is missing or expands to ""."""
        value = self.get_string(key)
        return value if value else default

    def get_string_or_default_in_comma_separator(self, key: str) -> str:
        """Resolve a comma-separated value, expanding each ``${VAR}`` element on its own.

        Lets a deployment override a single entry of an otherwise static list,
        e.g. ``a, ${B_ENDPOINT:-http://b}, c``.
        """
        value = self.get_value(key)
        if value is None:
            return ""
        return self.substitutor.expand_list(value)

    def get_list(self, key: str) -> List[str]:
        value = self.get_value(key)
        if value is None:
            return []
        return self.substitutor.split_list(value)

    def get_int(self, key: str) -> int:
        return self._get_typed(key, parse_int, 0, "integer")

    def get_float(self, key: str) -> float:
        return self._get_typed(key, parse_float, 0.0, "float")

    def get_bool(self, key: str) -> bool:
        return self._get_typed(key, parse_bool, False, "boolean")

    def _get_typed(self, key: str, parse: Callable[[str], T], zero: T, type_name: str) -> T:
        if not self.exists(key):
            return zero

        value = self.get_string(key)
        try:
            return parse(value)
        except ValueError as e:
            if self.strict:
                raise ConfigParseError(
                    message=f"Value for '{key}' is not a valid {type_name}",
                    config_file=self._source_of(key),
                    key=key,
                    value=value,
                    original=e,
                )
            logger.debug(
                f"Unparsable {type_name} for key {key}, using zero value",
                extra={"key": key, "type": type_name},
            )
            return zero

    def _source_of(self, key: str) -> Optional[str]:
        if self._profile_layer_active() and key in self.profile_layer:
            return self.profile_layer.source_name
        return self._layer_name(self.default_layer)
