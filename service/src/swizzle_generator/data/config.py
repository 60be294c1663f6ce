import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from ..consts import LARGE_SWIZZLE_WARNING
from ..errors import ConfigError
from ..model.declaration import SwizzleDeclaration
from ..model.shape import Shape

logger = logging.getLogger(__name__)


class SwizzleConfig(BaseModel):
    name: str | None = None
    output_file: str = "swizzles.py"
    header: str | None = None
    large_swizzle_warning: int = LARGE_SWIZZLE_WARNING
    shapes: list[Shape] = []
    swizzles: list[SwizzleDeclaration] = []
    _file_path: Path | None = None

    @staticmethod
    def from_file(file: str | Path) -> "SwizzleConfig":
        file = Path(file)

        try:
            content = file.read_text(encoding="utf-8")
        except OSError as e:
            msg = f"failed to read config from {str(file)}"
            logger.error(msg)
            raise ConfigError(msg) from e

        suffix = file.suffix.lower()
        try:
            if suffix == ".json":
                config = SwizzleConfig.model_validate_json(content)
            elif suffix in (".yaml", ".yml"):
                data = yaml.safe_load(content)  # may be None for an empty file
                if not isinstance(data, dict):
                    data = {}
                config = SwizzleConfig.model_validate(data)
            else:
                raise ConfigError(f"unsupported config format '{suffix}' ({str(file)})")

        except ValidationError as e:
            msg = f"failed to load config from {str(file)}"
            logger.error(msg)
            logger.error(e.errors())
            raise ConfigError(msg) from e

        except yaml.YAMLError as e:
            msg = f"failed to parse YAML config {str(file)}"
            logger.error(msg)
            raise ConfigError(msg) from e

        config._file_path = file

        # Fix name if missing
        if config.name is None:
            config.name = file.stem

        return config

    @property
    def file_path(self) -> Path | None:
        return self._file_path

    @property
    def output_path(self) -> Path:
        base = self._file_path.parent if self._file_path is not None else Path.cwd()
        return base / self.output_file

