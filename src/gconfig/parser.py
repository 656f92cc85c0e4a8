"""Property file parser."""
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from gconfig.exceptions.config import ConfigFileReadError, ConfigParseError


logger = logging.getLogger(__name__)

KEY_VALUE_DELIMITER = "="


class PropertyLayer(BaseModel):
    """One parsed property file.

    Attributes:
        source_name: File name (or other origin) the entries came from
        entries: Trimmed key/value pairs, last duplicate wins
    """

    model_config = ConfigDict(frozen=True)

    source_name: str
    entries: Dict[str, str] = Field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return self.entries.get(key)

    def keys(self) -> Iterator[str]:
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


class PropertyFileParser:
    """Parses ``key=value`` text into a PropertyLayer.

    A line is an entry only when it holds exactly one ``=``. Anything else
    is skipped silently, unless ``strict`` is set, in which case a
    non-blank malformed line raises ConfigParseError.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse(self, stream: Iterable[str], source_name: str) -> PropertyLayer:
        """Parse an open text stream (or any iterable of lines).

        Args:
            stream: Lines of the property file
            source_name: Origin name stored on the layer

        Returns:
            PropertyLayer with the well-formed entries

        Raises:
            ConfigParseError: Malformed line in strict mode
        """
        entries: Dict[str, str] = {}
        skipped = 0

        for line_number, line in enumerate(stream, start=1):
            if line.count(KEY_VALUE_DELIMITER) != 1:
                if self.strict and line.strip():
                    raise ConfigParseError(
                        message=f"Malformed property line {line_number} in {source_name}",
                        config_file=source_name,
                        line_number=line_number,
                    )
                skipped += 1
                continue

            key, value = line.split(KEY_VALUE_DELIMITER)
            entries[key.strip()] = value.strip()

        logger.debug(
            f"Parsed property source: {source_name}",
            extra={"source": source_name, "keys": len(entries), "skipped_lines": skipped},
        )

        return PropertyLayer(source_name=source_name, entries=entries)

    def parse_file(self, path: Union[str, Path]) -> PropertyLayer:
        """Open and parse a property file; the layer is named after the file.

        Raises:
            ConfigFileReadError: File cannot be opened or decoded
            ConfigParseError: Malformed line in strict mode
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return self.parse(f, path.name)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                f"Failed to read property file {path}: {e}",
                extra={"path": str(path), "error": str(e)},
            )
            raise ConfigFileReadError(
                message=f"Error opening config file {path.name}",
                config_file=str(path),
                original=e,
            )
