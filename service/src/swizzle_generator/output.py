from pathlib import Path

from .errors import SwizzleError
from .handler.generation import GenerationHandler
from .model.error import Error as ErrorModel


def output(config_file: Path, output_file: Path | None = None) -> ErrorModel | None:
    print("Generating swizzle accessors...")

    try:
        handler = GenerationHandler()
        handler.load(config_file)

        for key, names in handler.accessor_names().items():
            print(f"Processing swizzle: {key} ({len(names)} accessors)")

        target = handler.write(output_file)

    except SwizzleError as e:
        print(f"Error: {e}")
        return ErrorModel.from_except(e)

    print(f"Swizzle accessors written to {target}")
    return None


def list_accessors(config_file: Path) -> ErrorModel | None:
    try:
        handler = GenerationHandler()
        handler.load(config_file)

        for key, names in handler.accessor_names().items():
            print(f"{key}: {' '.join(names)}")

    except SwizzleError as e:
        print(f"Error: {e}")
        return ErrorModel.from_except(e)

    return None
