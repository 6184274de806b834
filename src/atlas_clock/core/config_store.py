"""Persistence of the clock list."""

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import ValidationError

from atlas_clock.core.models import DEFAULT_CLOCKS, ClockConfig, ClockEntry
from atlas_clock.error_handling import ConfigError, report_error

logger = logging.getLogger(__name__)


def get_default_config_path() -> Path:
    """Get the default location of the clock list."""
    return Path.home() / ".atlas" / "clock.json"


class ConfigStore:
    """Loads and saves the clock list as a JSON document.

    Reading never fails: a missing or unusable file yields the built-in
    defaults. Writing is best-effort and rewrites the whole document.
    """

    def __init__(self, path: Union[str, Path, None] = None) -> None:
        self.path = Path(path).expanduser() if path else get_default_config_path()

    def load(self) -> List[ClockEntry]:
        """Load the stored clocks, falling back to the defaults.

        Returns:
            Clock entries in display order
        """
        try:
            config = self._read()
        except FileNotFoundError:
            logger.info(f"No clock config at {self.path}, using defaults")
            return list(DEFAULT_CLOCKS)
        except ConfigError as e:
            logger.warning(f"Ignoring clock config: {e}")
            return list(DEFAULT_CLOCKS)

        logger.debug(f"Loaded {len(config.clocks)} clocks from {self.path}")
        return list(config.clocks)

    def _read(self) -> ClockConfig:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            raise
        except OSError as e:
            raise ConfigError(f"cannot read {self.path}: {e}") from e

        try:
            return ClockConfig.model_validate_json(raw)
        except ValidationError as e:
            raise ConfigError(f"invalid document in {self.path}: {e}") from e

    def save(self, entries: Sequence[ClockEntry]) -> bool:
        """Persist the full clock list.

        Args:
            entries: Every clock, in display order

        Returns:
            True if the document was written
        """
        document = ClockConfig(clocks=list(entries)).model_dump_json(
            by_alias=True, indent=2
        )

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=".clock-", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(document)
                os.replace(tmp_name, self.path)
            except BaseException:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            report_error(
                exception=e,
                component="config_store",
                context_name="save",
                context_data={"path": str(self.path)},
            )
            return False

        logger.info(f"Saved {len(entries)} clocks to {self.path}")
        return True

