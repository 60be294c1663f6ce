import logging
from pathlib import Path

from ..data.config import SwizzleConfig
from ..errors import ConfigError
from ..generator.binding import BoundSwizzle, ShapeRegistry, bind, bind_all
from ..generator.emitter import DEFAULT_HEADER, render_module
from ..model.declaration import SwizzleDeclaration
from ..model.generation import GenerateInput, GenerateOutput
from ..model.swizzle import SwizzleSpec
from ..normalizer import normalize

logger = logging.getLogger(__name__)


class GenerationHandler:
    """Runs normalize -> bind -> emit for a config file or a single request."""

    def __init__(self, config: SwizzleConfig | None = None) -> None:
        self.__config: SwizzleConfig | None = config
        self.__bound: list[BoundSwizzle] | None = None

    @property
    def config(self) -> SwizzleConfig:
        if self.__config is None:
            raise ConfigError("no swizzle config loaded")
        return self.__config

    def load(self, config_file: str | Path) -> None:
        self.__config = SwizzleConfig.from_file(config_file)
        self.__bound = None

    def specs(self) -> list[SwizzleSpec]:
        return [normalize(d) for d in self.config.swizzles]

    def bound(self) -> list[BoundSwizzle]:
        if self.__bound is None:
            registry = ShapeRegistry(self.config.shapes)
            self.__bound = bind_all(
                self.specs(), registry, warn_above=self.config.large_swizzle_warning
            )
        return self.__bound

    def accessor_names(self) -> dict[str, list[str]]:
        """``"Source -> Destination"`` -> accessor names, in declaration order."""
        result: dict[str, list[str]] = {}
        for bound in self.bound():
            key = f"{bound.source.name} -> {bound.destination.name}"
            result.setdefault(key, []).extend(bound.names)
        return result

    def render(self) -> str:
        return render_module(self.bound(), header=self.config.header or DEFAULT_HEADER)

    def write(self, output_file: str | Path | None = None) -> Path:
        target = Path(output_file) if output_file is not None else self.config.output_path
        content = self.render()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.info("Wrote swizzle accessors to %s", target)
        return target

    @staticmethod
    def normalize(declaration: SwizzleDeclaration) -> SwizzleSpec:
        return normalize(declaration)

    @staticmethod
    def _bind_request(input: GenerateInput) -> BoundSwizzle:
        registry = ShapeRegistry(input.shapes)
        return bind(normalize(input.declaration), registry)

    @staticmethod
    def generate(input: GenerateInput) -> GenerateOutput:
        bound = GenerationHandler._bind_request(input)
        return GenerateOutput(
            destination_type=bound.destination.name,
            source_type=bound.source.name,
            count=len(bound.accessors),
            accessors=bound.accessors,
        )

    @staticmethod
    def render_request(input: GenerateInput) -> str:
        return render_module([GenerationHandler._bind_request(input)])

