# bluenoise2c.py
# Converts a blue noise texture into C source arrays (R, G bytes per pixel)
#
# 2025-07-20

import enum
import logging
import os
from dataclasses import dataclass

from PIL import Image

LOGGER = logging.getLogger(__name__)

INPUT_PATH = "128_128_LDR_RG01_0.png"
HEADER_PATH = "blue_noise.h"
SOURCE_PATH = "blue_noise.c"

ARRAY_COMMENT = (
    "// Array contains consecutive R, G values. Pixels are indexed from the top-left.\n"
)
PREAMBLE = "#pragma once\n\n#include <stddef.h>\n#include <stdint.h>\n\n"


class OutputMode(enum.Enum):
    COMBINED = "combined"  # header holding the full array
    SPLIT = "split"  # extern header + .c definitions


# Build-time choice, there is no runtime switch.
OUTPUT_MODE = OutputMode.SPLIT


class DecodeError(Exception):
    """The input image is missing, unreadable or not a decodable format."""


@dataclass(frozen=True)
class ConverterConfig:
    input_path: str = INPUT_PATH
    output_mode: OutputMode = OUTPUT_MODE
    header_path: str = HEADER_PATH
    source_path: str = SOURCE_PATH


def load_image(path: str) -> Image.Image:
    try:
        with Image.open(path) as img:
            img.load()
            rgba = img.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise DecodeError(f"cannot decode image {path!r}: {exc}") from exc

    LOGGER.info("Loaded %s (%dx%d, %s)", path, rgba.width, rgba.height, img.mode)
    return rgba


def read_rg_values(img: Image.Image) -> list[int]:
    """Red and green bytes of every pixel, row-major from the top-left."""
    values = []
    width, height = img.size
    for y in range(height):
        for x in range(width):
            r, g, _, _ = img.getpixel((x, y))
            values.append(r)
            values.append(g)

    return values


def _array_body(values: list[int]) -> str:
    body = ", ".join(map(str, values))
    if body:
        body += ","
    return body + "\n};\n"


def _size_constants(width: int, height: int) -> str:
    return (
        f"const size_t blueNoiseWidth = {width};\n"
        f"const size_t blueNoiseHeight = {height};\n"
    )


def render_combined_header(values: list[int], width: int, height: int) -> str:
    return (
        PREAMBLE
        + ARRAY_COMMENT
        + f"uint8_t blueNoiseValues[{len(values)}] = {{\n"
        + _array_body(values)
        + _size_constants(width, height)
    )


def render_split_header(count: int) -> str:
    return (
        PREAMBLE
        + "#ifdef __cplusplus\n"
        + 'extern "C" {\n'
        + "#endif\n"
        + ARRAY_COMMENT
        + f"extern const uint8_t blueNoiseValues[{count}];\n"
        + "\n"
        + "extern const size_t blueNoiseWidth;\n"
        + "extern const size_t blueNoiseHeight;\n"
        + "#ifdef __cplusplus\n"
        + "}\n"
        + "#endif\n"
    )


def render_split_source(
    values: list[int], width: int, height: int, header_name: str = HEADER_PATH
) -> str:
    return (
        f'#include "{header_name}"\n\n'
        + f"const uint8_t blueNoiseValues[{len(values)}] = {{\n"
        + _array_body(values)
        + _size_constants(width, height)
    )


def render_outputs(config: ConverterConfig, img: Image.Image) -> dict[str, str]:
    """Map each output path to its full text for the configured mode."""
    width, height = img.size
    values = read_rg_values(img)
    LOGGER.debug("Rendering %d values for %dx%d", len(values), width, height)

    if config.output_mode is OutputMode.COMBINED:
        return {config.header_path: render_combined_header(values, width, height)}

    header_name = os.path.basename(config.header_path)
    return {
        config.header_path: render_split_header(len(values)),
        config.source_path: render_split_source(values, width, height, header_name),
    }


def write_outputs(outputs: dict[str, str]) -> None:
    for path, text in outputs.items():
        with open(path, "w", encoding="ascii", newline="\n") as f:
            f.write(text)

        LOGGER.info("Wrote %s", path)


def convert_image(config: ConverterConfig) -> list[str]:
    # Decode before opening any output file.
    img = load_image(config.input_path)
    outputs = render_outputs(config, img)
    write_outputs(outputs)
    return list(outputs)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    convert_image(ConverterConfig())


if __name__ == "__main__":
    main()
